# -*- coding: utf-8 -*-
"""Errors raised while copying a file.

Every class carries the one-line diagnostic that is shown to the user and
the exit status of the command.
"""


class CopyError(Exception):
    message = "Error: Failed to copy file.\n"
    exitcode = 1

    def __init__(self, path=None, *args):
        self.path = path
        super().__init__(self.message, *args)


class UsageError(CopyError):
    message = "Error: Not in the format: ./my_copy NameSource NameTarget\n"


class SourceError(CopyError): ...


class SourceNotFound(SourceError):
    message = "Error: The source file does not exist.\n"


class SourcePermissionDenied(SourceError):
    message = "Error: Permission denied for source file.\n"


class SourceOpenFailed(SourceError):
    message = "Error: Failed to open source file.\n"


class SourceReadError(SourceError):
    message = "Error: Failed to read from source file.\n"


class DestinationError(CopyError): ...


class DestinationPermissionDenied(DestinationError):
    message = "Error: Permission denied for destination directory/file.\n"


class DestinationIsDirectory(DestinationError):
    message = "Error: Destination is a directory, cannot overwrite.\n"


class DestinationOpenFailed(DestinationError):
    message = "Error: Failed to open/create destination file.\n"


class DestinationWriteError(DestinationError):
    message = "Error: Write error to destination file.\n"

    def __init__(self, path=None, expected=None, written=None, *args):
        self.expected = expected
        self.written = written
        super().__init__(path, *args)


class InputAborted(CopyError):
    """raise this if the overwrite prompt hits end of input or a read error.
    Nothing is printed for it."""
    message = ""


class UserCancelled(CopyError):
    """raise this if the user declines to overwrite the destination.
    This is a successful outcome, the message goes to stdout."""
    message = "Copying was canceled at the user's request.\n"
    exitcode = 0
