import logging
import os

import definitions as defs

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when an expected directory is missing."""

    def __init__(self, message, path):
        super().__init__(message)
        self.path = path


def check_directory(path):
    if not os.path.isdir(path):
        raise ConfigurationError(f'expected {path} to be a directory', path)


def get_common_includes(directory, common_header):
    """Return the names #included by common_header, in the order they appear."""
    includes = []
    # surrogateescape so names match os.scandir's for non-utf-8 bytes
    with open(os.path.join(directory, common_header), 'r', encoding='utf-8',
              errors='surrogateescape') as hf:
        for line in hf:
            match = defs.INCLUDE_PATTERN.match(line)
            if match:
                quoted, bracketed = match.groups()
                includes.append(quoted if quoted is not None else bracketed)
    return includes


def list_headers(directory, extensions=defs.HEADER_EXTENSIONS):
    headers = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name.startswith('.'):
                continue
            if entry.name.endswith(extensions) and entry.is_file():
                headers.append(entry.name)
    return headers


def force_first(headers, names):
    headers = list(headers)
    for name in reversed(names):
        if name in headers:
            headers.remove(name)
        headers.insert(0, name)
    return headers


def derive(directory, common_header, forced=(), extensions=defs.HEADER_EXTENSIONS):
    check_directory(directory)

    common = set(get_common_includes(directory, common_header))
    logger.debug(f'{common_header} already includes {len(common)} header(s)')

    headers = [h for h in list_headers(directory, extensions) if h not in common]
    headers.sort()
    headers = force_first(headers, [common_header])
    return force_first(headers, forced)


def write_includes(path, headers):
    # fixed newline so output is byte-identical across platforms
    with open(path, 'w', encoding='utf-8', errors='surrogateescape',
              newline='\n') as header_file:
        for header in headers:
            header_file.write(f'#include <{header}>\n')


def generate(directory, common_header, output_path, forced=(),
             extensions=defs.HEADER_EXTENSIONS):
    logger.info(f'Generating {output_path}...')
    headers = derive(directory, common_header, forced, extensions)
    write_includes(output_path, headers)
    logger.info(f'Done generating {output_path} ({len(headers)} includes).')
    return headers
