"""Helpers for measuring, reading and joining open files."""

from __future__ import annotations

import os
import sys
from typing import IO, AnyStr

from smlkit.errors import ErrorCode, ErrorConfig, LogSeverity, init_errors_and_logging

__all__ = ["get_file_size", "file_read", "file_concat"]


def _internal_config() -> ErrorConfig:
    return init_errors_and_logging("SML_LIB_ERRORS_AND_LOGGING", False, None)


def get_file_size(stream: IO) -> int:
    """Return the size of *stream*, leaving its position at the end.

    Standard output and standard error cannot be measured and raise
    :class:`~smlkit.errors.FatalError`. If seeking fails the stream is
    closed and the ``OSError`` propagates.
    """
    if stream is sys.stdout or stream is sys.stderr:
        _internal_config().throw(
            ErrorCode.FILE_READ,
            LogSeverity.ERROR,
            "Cannot measure a file size on standard output or standard error.",
        )
    try:
        stream.seek(0, os.SEEK_END)
    except OSError:
        stream.close()
        raise
    return stream.tell()


def file_read(stream: IO[AnyStr], config: ErrorConfig | None = None) -> AnyStr:
    """Return the whole contents of *stream*, read from its start.

    The stream is neither opened nor closed here. A failed allocation is
    reported through *config*, or an internal one when it is ``None``.
    """
    err_config = config if config is not None else _internal_config()
    size = stream.seek(0, os.SEEK_END)
    stream.seek(0)
    try:
        return stream.read()
    except MemoryError:
        err_config.throw(
            ErrorCode.MEMORY_ALLOCATION,
            LogSeverity.ERROR,
            "Failed to allocate a buffer for %d bytes",
            size,
        )
        raise


def file_concat(
    first: IO[AnyStr],
    second: IO[AnyStr],
    path: str | os.PathLike[str],
    config: ErrorConfig | None = None,
) -> IO[AnyStr]:
    """Join two files into a new file at *path* and return it, rewound.

    The last character of the first file (typically its trailing newline)
    is dropped so that the second file's contents follow directly. The
    joined text is also written to standard output. The returned file is
    open for reading and writing; the caller closes it.
    """
    err_config = config if config is not None else _internal_config()
    head = file_read(first, err_config)
    tail = file_read(second, err_config)
    contents = head[:-1] + tail

    if isinstance(contents, bytes):
        print(contents.decode("utf-8", errors="replace"), end="")
        joined = open(path, "w+b")
    else:
        print(contents, end="")
        joined = open(path, "w+", encoding="utf-8")
    joined.write(contents)
    joined.flush()
    joined.seek(0)
    return joined