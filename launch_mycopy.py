# coding: utf-8
"""
Launch my_copy with control over configuration files and logging.
"""
import sys
import argparse

from mycopy.core import MyCopy
from mycopy.system.mccommon import MSG_INTERRUPTED

ap = argparse.ArgumentParser(description=__doc__)
ap.add_argument('--no-cfgfile', action='store_true',
                help='do not load external config files')
ap.add_argument('--log-level',
                choices=['DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'],
                default=None,
                help='the logging level (turns logging on)')
ap.add_argument('--log-file',
                help='the file to send logging messages (turns logging on)')
ap.add_argument('source', help='file to copy')
ap.add_argument('dest', help='file to create or overwrite')
ns = ap.parse_args()

log_setting = {}
if ns.log_level or ns.log_file:
    log_setting['enabled'] = True
if ns.log_level:
    log_setting['level'] = ns.log_level
if ns.log_file:
    log_setting['file'] = ns.log_file

_mycopy = MyCopy(log_setting=log_setting, no_cfgfile=ns.no_cfgfile)

try:
    sys.exit(_mycopy(ns.source, ns.dest))
except KeyboardInterrupt:
    sys.stderr.write(MSG_INTERRUPTED)
    sys.exit(1)
