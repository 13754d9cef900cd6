#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Copy the contents of a source file into a target file, asking before an
existing target is overwritten.
"""

import argparse
import sys
from typing import Sequence

from mycopy.core import MyCopy
from mycopy.system.mccommon import MSG_INTERRUPTED
from mycopy.system.mcerrors import UsageError


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError()


def main(args: Sequence[str]) -> None:
    ap = _ArgumentParser(description=__doc__, add_help=False)
    ap.add_argument("source", help="file to copy")
    ap.add_argument("dest", help="file to create or overwrite")

    try:
        if len(args) != 2:
            raise UsageError()
        # both arguments are paths, whatever they start with
        ns = ap.parse_args(["--"] + list(args))
    except UsageError as err:
        print(err.message, end="", file=sys.stderr)
        sys.exit(err.exitcode)

    try:
        status = MyCopy()(ns.source, ns.dest)
    except KeyboardInterrupt:
        print(MSG_INTERRUPTED, end="", file=sys.stderr)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main(sys.argv[1:])
