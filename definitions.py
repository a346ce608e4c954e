import re
from collections import namedtuple

# a single-line #include with the name between "" or <>
INCLUDE_PATTERN = re.compile(r'^\s*#include\s*(?:"([^"]*)"|<([^>]*)>)')

HEADER_EXTENSIONS = ('.h',)

MAX_INCLUDES = 'max-includes'
MSP_INCLUDES = 'msp-includes'
JIT_INCLUDES = 'jit-includes'

# msp-includes is only checked for, never scanned
EXPECTED_SUBDIRS = (MAX_INCLUDES, MSP_INCLUDES, JIT_INCLUDES)

WrapperPass = namedtuple('WrapperPass', ['subdir', 'common_header', 'output', 'forced'])

WRAPPER_PASSES = (
    # jgraphics.h has to come right after ext.h for its declarations
    WrapperPass(MAX_INCLUDES, 'ext.h', 'wrapper-max.h', ('ext.h', 'jgraphics.h')),
    WrapperPass(JIT_INCLUDES, 'jit.common.h', 'wrapper-jitter.h', ()),
)
