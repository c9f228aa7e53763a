"""Error codes, log severities and a small configurable error reporter."""

from __future__ import annotations

import itertools
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

MAX_NAME_LEN = 128
PREDEFINED_LOG_FILE_PATH = "./logs/"

# Numeric value one past the last defined error code; reserved for internal use.
_LAST_ENUM = 54
_LAST_ENUM_TEXT = "LAST_ENUM... if you are using this.. please don't"
_UNKNOWN_ERROR_TEXT = "UNKNOWN ERROR.. \nif you encounter this well...\n RIP"


class ErrorCode(IntEnum):
    """Library-wide error codes."""

    OK = 0

    GENERIC = 1
    INVALID_INPUT = 2
    OUT_OF_MEMORY = 3
    IO_ERROR = 4
    UNSUPPORTED = 5
    OVERFLOW = 6
    INVALID_STATE = 7

    FILE_NOT_FOUND = 10
    FILE_PERMISSION = 11
    FILE_READ = 12
    FILE_WRITE = 13

    NETWORK_DISCONNECTED = 20
    NETWORK_TIMEOUT = 21
    NETWORK_INVALID_URL = 22

    DATABASE_CONNECTION = 30
    DATABASE_QUERY = 31

    MEMORY_ALLOCATION = 40
    MEMORY_REALLOCATION = 41
    MEMORY_DE_ALLOCATION = 42
    MEMORY_OVERFLOW = 43
    MEMORY_UNDERFLOW = 44
    MEMORY_CANNOT_ACCESS = 45
    MEMORY_INVALID = 46
    MEMORY_CORRUPTION = 47
    MEMORY_INSUFFICIENT = 48
    MEMORY_NOT_ENOUGH = 49

    FEATURE_NOT_IMPLEMENTED = 51
    FEATURE_NOT_SUPPORTED = 52
    FEATURE_NOT_FOUND = 53


class LogSeverity(IntEnum):
    """How serious a logged event is; anything above WARNING is fatal when thrown."""

    DEBUG = 0
    INFO = 1
    DEPRECATION = 2
    WARNING = 3
    ERROR = 4


class CommonStatus(IntEnum):
    """Basic status values shared by the library's helpers."""

    FAIL = 0
    SUCCESS = 1
    IMPROPER_FUNCTION_USE = 2


class CheckFailedError(AssertionError):
    """Raised by :func:`check` when its condition does not hold."""


class FatalError(SystemExit):
    """Raised by :meth:`ErrorConfig.throw` for severities above WARNING.

    Left uncaught, the process exits with the severity as its status.
    """

    def __init__(self, error_code: int, severity: int, message: str) -> None:
        super().__init__(int(severity))
        self.error_code = error_code
        self.severity = severity
        self.message = message

    def __str__(self) -> str:
        return f"{error_to_string(self.error_code)}: {self.message}"


def error_to_string(code: int) -> str:
    """Return the symbolic name of an error code."""
    try:
        return f"ERROR_{ErrorCode(code).name}"
    except ValueError:
        if code == _LAST_ENUM:
            return _LAST_ENUM_TEXT
        return _UNKNOWN_ERROR_TEXT


def severity_to_string(severity: int) -> str:
    """Return the name of a log severity, or ``"UNKNOWN"``."""
    try:
        return LogSeverity(severity).name
    except ValueError:
        return "UNKNOWN"


def check(condition: object) -> None:
    """Raise :class:`CheckFailedError` if *condition* is falsy."""
    if not condition:
        raise CheckFailedError("Check failed")


_STDOUT_SEVERITIES = frozenset({LogSeverity.DEBUG, LogSeverity.INFO})
_STDERR_SEVERITIES = frozenset(
    {LogSeverity.WARNING, LogSeverity.ERROR, LogSeverity.DEPRECATION}
)

_log_ids = itertools.count(1)
_throw_ids = itertools.count(1)


@dataclass
class ErrorConfig:
    """Where and under which program name errors are reported."""

    name: str
    has_log_file: bool = False
    log_file_location: str | None = None
    has_set_log_file: bool = False

    def log(self, code: int, severity: int, message: str, *args: object) -> None:
        """Report an event without ever stopping the program.

        *message* is a printf-style format applied to *args*.
        """
        self._emit(_log_ids, code, severity, message, args)

    def throw(self, code: int, severity: int, message: str, *args: object) -> None:
        """Report an event; raise :class:`FatalError` if it is worse than a warning."""
        text = self._emit(_throw_ids, code, severity, message, args)
        if severity > LogSeverity.WARNING:
            raise FatalError(code, severity, text)

    def _log_file_path(self) -> str:
        location = self.log_file_location
        if location is None:
            location = PREDEFINED_LOG_FILE_PATH
        return f"{location}{time.ctime()}.log"[: MAX_NAME_LEN - 1]

    @contextmanager
    def _stream(self, severity: int) -> Iterator[TextIO]:
        stream: TextIO | None = None
        owned = False
        if self.has_log_file:
            try:
                stream = open(self._log_file_path(), "a", encoding="utf-8")
                owned = True
            except OSError:
                stream = None
        elif severity in _STDOUT_SEVERITIES:
            stream = sys.stdout
        elif severity in _STDERR_SEVERITIES:
            stream = sys.stderr

        if stream is None:
            print(f"something went wrong in the {__name__}\nErrorConfig._stream")
            print("setting err_stream to stdout as fallback")
            stream = sys.stdout
        try:
            yield stream
        finally:
            if owned:
                stream.close()

    def _emit(
        self,
        counter: Iterator[int],
        code: int,
        severity: int,
        message: str,
        args: tuple[object, ...],
    ) -> str:
        text = message % args if args else message
        with self._stream(severity) as stream:
            stream.write(
                f"\n[{self.name}] -> {severity_to_string(severity)} :: {next(counter)}\n"
            )
            stream.write(f"[{error_to_string(code)} | {int(code)}]:\n")
            stream.write(f'\t-> "{text}"\n')
            stream.flush()
        return text


def init_errors_and_logging(
    name: str, has_log_file: bool, log_file_location: str | None
) -> ErrorConfig:
    """Create an :class:`ErrorConfig`.

    With a log file but no location, the predefined ``./logs/`` directory is used.
    """
    return ErrorConfig(
        name=name,
        has_log_file=has_log_file,
        log_file_location=log_file_location,
        has_set_log_file=has_log_file and log_file_location is None,
    )