# -*- coding: utf-8 -*-
"""
The copy procedure: open the source, settle an overwrite conflict with the
user, create the destination and stream the bytes across.

Every failure is raised as one of the classes in ``mcerrors``; nothing here
prints diagnostics or exits.
"""
import errno
import logging
import os
import sys

import six

from .mccommon import ANSWER_NO, ANSWER_YES, BUFFER_SIZE, FILE_MODE, PROMPT_OVERWRITE
from .mcerrors import (
    DestinationIsDirectory,
    DestinationOpenFailed,
    DestinationPermissionDenied,
    DestinationWriteError,
    InputAborted,
    SourceNotFound,
    SourceOpenFailed,
    SourcePermissionDenied,
    SourceReadError,
    UserCancelled,
)

LOGGER = logging.getLogger('MyCopy')


class SourceHandle(object):
    """
    A read-only file descriptor with just enough of the raw file API for
    copy_stream. Unlike io.FileIO it accepts a directory; reading one then
    fails in readinto.
    """

    def __init__(self, fd, name):
        self.fd = fd
        self.name = name

    @property
    def closed(self):
        return self.fd < 0

    def readinto(self, b):
        return os.readv(self.fd, [b])

    def close(self):
        if self.fd >= 0:
            fd, self.fd = self.fd, -1
            os.close(fd)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def open_source(path):
    """
    Open the source file for reading.
    :param path: path of the file to copy
    :type path: str or os.PathLike
    :return: the open source handle
    :rtype: SourceHandle
    """
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as e:
        if e.errno == errno.ENOENT:
            raise SourceNotFound(path)
        elif e.errno == errno.EACCES:
            raise SourcePermissionDenied(path)
        raise SourceOpenFailed(path)
    return SourceHandle(fd, path)


def confirm_overwrite(ins, outs):
    """
    Ask whether an existing destination may be overwritten.
    One byte is consumed per prompt; anything besides 'y' or 'n'
    (the trailing newline included) prompts again.
    :param ins: stream to read the answer from
    :param outs: stream to write the prompt to
    :return: True to overwrite, False if the user declined
    :rtype: bool
    """
    # one raw byte per answer when the stream has a binary layer
    ins = getattr(ins, 'buffer', ins)
    while True:
        outs.write(PROMPT_OVERWRITE)
        outs.flush()
        try:
            answer = ins.read(1)
        except (OSError, ValueError):
            raise InputAborted()
        if not answer:
            raise InputAborted()
        if isinstance(answer, six.binary_type):
            answer = answer.decode('latin-1')
        LOGGER.debug("overwrite answer: {!r}".format(answer))
        if answer == ANSWER_YES:
            return True
        elif answer == ANSWER_NO:
            return False


def open_destination(path, mode=FILE_MODE):
    """
    Create or truncate the destination for unbuffered binary writing.
    :param path: path of the copy
    :type path: str or os.PathLike
    :param mode: permission bits for a newly created file (umask applies)
    :type mode: int
    :return: the open destination handle
    :rtype: io.FileIO
    """

    def opener(p, flags):
        return os.open(p, flags, mode)

    try:
        return open(path, 'wb', buffering=0, opener=opener)
    except OSError as e:
        if e.errno == errno.EACCES:
            raise DestinationPermissionDenied(path)
        elif e.errno == errno.EISDIR:
            raise DestinationIsDirectory(path)
        raise DestinationOpenFailed(path)


def copy_stream(src, dst, buffer_size=BUFFER_SIZE):
    """
    Move every byte of src into dst through one reused buffer.
    Bytes written before a failure are left in dst.
    :param src: readable raw binary file
    :param dst: writable raw binary file
    :param buffer_size: capacity of the transfer buffer
    :type buffer_size: int
    :return: number of bytes copied
    :rtype: int
    """
    buf = bytearray(buffer_size)
    total = 0
    with memoryview(buf) as view:
        while True:
            try:
                nread = src.readinto(buf)
            except OSError:
                raise SourceReadError(getattr(src, 'name', None))
            if not nread:
                break
            try:
                nwritten = dst.write(view[:nread])
            except OSError:
                raise DestinationWriteError(getattr(dst, 'name', None), nread, 0)
            if nwritten != nread:
                raise DestinationWriteError(getattr(dst, 'name', None), nread, nwritten)
            total += nwritten
    return total


def copy_file(source, dest, ins=None, outs=None, buffer_size=BUFFER_SIZE, file_mode=FILE_MODE):
    """
    Copy the contents of source into dest, asking on ins/outs before an
    existing dest is truncated.
    :return: number of bytes copied
    :rtype: int
    :raises UserCancelled: the user answered 'n'
    :raises CopyError: any other failure
    """
    ins = sys.stdin if ins is None else ins
    outs = sys.stdout if outs is None else outs

    with open_source(source) as src:
        LOGGER.debug("opened source {}".format(source))
        if os.path.exists(dest):
            LOGGER.debug("destination {} exists".format(dest))
            if not confirm_overwrite(ins, outs):
                raise UserCancelled(dest)
        with open_destination(dest, file_mode) as dst:
            LOGGER.debug("opened destination {}".format(dest))
            total = copy_stream(src, dst, buffer_size)

    LOGGER.info("copied {} bytes from {} to {}".format(total, source, dest))
    return total
