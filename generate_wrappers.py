import argparse
import logging
import os
import sys

import definitions as defs
from wrapper_headers import ConfigurationError, check_directory, generate

logger = logging.getLogger(__name__)


def check_base_dir(base, subdirs=defs.EXPECTED_SUBDIRS):
    check_directory(base)
    for subdir in subdirs:
        check_directory(os.path.join(base, subdir))


def generate_all(base, output_dir='.', passes=defs.WRAPPER_PASSES):
    """Write one wrapper header per pass into output_dir."""
    check_base_dir(base)
    os.makedirs(output_dir, exist_ok=True)

    outputs = []
    for wrapper in passes:
        output_path = os.path.join(output_dir, wrapper.output)
        generate(os.path.join(base, wrapper.subdir), wrapper.common_header,
                 output_path, wrapper.forced)
        outputs.append(output_path)
    return outputs


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate the wrapper headers for the max and jitter SDK includes.')
    parser.add_argument('base', help=f'SDK support directory containing '
                                     f'{", ".join(defs.EXPECTED_SUBDIRS)}')
    parser.add_argument('-o', '--output-dir', default='.',
                        help='where to write the wrapper headers (default: current directory)')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true')
    verbosity.add_argument('-q', '--quiet', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    try:
        generate_all(args.base, args.output_dir)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f'{e.filename}: {e.strerror}' if e.filename else str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
