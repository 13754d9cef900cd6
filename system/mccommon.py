# -*- coding: utf-8 -*-
"""
Constants shared by the my_copy command and its procedure.
"""
import os
import sys


_MYCOPY_ROOT = os.path.realpath(os.path.abspath(
    os.path.dirname(os.path.dirname(__file__))))
_MYCOPY_CONFIG_FILES = ('.mycopy_config', 'mycopy.cfg')

# the real stderr, for log output
_SYS_STDERR = sys.stderr

# one page per read/write round trip
BUFFER_SIZE = 4096
# rw-r--r--
FILE_MODE = 0o644

PROMPT_OVERWRITE = "Target file exists. Overwrite? (y/n): "
MSG_INTERRUPTED = "\nOperation interrupted by user.\n"

ANSWER_YES = 'y'
ANSWER_NO = 'n'
