"""
File-backed log line source with optional regex filtering.

A LogSource owns one open file handle and exposes it through a small
iteration contract (key/valid/current/advance/rewind), a generator
interface, and two aggregate reads that always leave the source rewound.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO

from logalerts.errors import ClosedResourceError, InvalidFilterError
from logalerts.logging_config import get_logger

logger = get_logger(__name__)

CLOSED = -1


class LineKind(Enum):
    """What a single read from a log source produced."""
    LINE = "line"
    FILTERED = "filtered"
    END_OF_STREAM = "end_of_stream"


@dataclass(frozen=True)
class LineRead:
    """Tagged result of reading one line."""
    kind: LineKind
    text: str = ""


class LogSource:
    """
    A forward-only, optionally filtered sequence of lines from one file.

    Lines are returned raw, line terminator included. When a filter
    pattern is set, lines it does not match (``re.search``) come back as
    the empty string from ``current()``.

    The file handle is released by ``close()``; use the source as a
    context manager to guarantee that on every exit path::

        with LogSource("/var/log/syslog", r"^Jan\\s+5\\b") as source:
            lines = source.read_into_array()
    """

    FILE_NOT_FOUND_MESSAGE = "The specified file {path} does not exist or is inaccessible."

    def __init__(self, path: str | Path, filter_pattern: str | None = None) -> None:
        """
        Open the file at ``path`` for reading.

        Args:
            path: Path to the log file
            filter_pattern: Optional regular expression a line must match

        Raises:
            InvalidFilterError: If ``filter_pattern`` does not compile
            FileNotFoundError: If the file does not exist or cannot be opened
        """
        self.path = str(path)
        self.name = Path(path).name
        self.filter_pattern = filter_pattern
        self._regex = self._compile(filter_pattern)
        self._handle: IO[str] | None = None
        self._pending: str | None = None  # line read ahead by valid()
        self.cursor = CLOSED

        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(self.FILE_NOT_FOUND_MESSAGE.format(path=self.path))
        try:
            self._handle = file_path.open("r", encoding="utf-8", errors="ignore", newline="")
        except OSError as e:
            raise FileNotFoundError(self.FILE_NOT_FOUND_MESSAGE.format(path=self.path)) from e

        self.cursor = 1
        logger.debug("Opened %s (filter: %s)", self.path, filter_pattern)

    @staticmethod
    def _compile(filter_pattern: str | None) -> re.Pattern[str] | None:
        if filter_pattern is None:
            return None
        try:
            return re.compile(filter_pattern)
        except re.error as e:
            raise InvalidFilterError(filter_pattern, str(e)) from e

    def __enter__(self) -> "LogSource":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"cursor={self.cursor}"
        return f"<LogSource {self.path!r} {state}>"

    @property
    def closed(self) -> bool:
        """True once the file handle has been released."""
        return self.cursor == CLOSED

    def _require_handle(self) -> IO[str]:
        if self._handle is None:
            raise ClosedResourceError()
        return self._handle

    # Iteration contract

    def key(self) -> int:
        """
        Return the loose line position.

        This counts ``advance()`` calls since the last rewind; it is not
        the handle's true read position when called manually.
        """
        return self.cursor

    def valid(self) -> bool:
        """
        Return True unless the handle has reached end of file.

        The next line is read ahead and held until ``current()`` takes it.
        End of file is not held, so lines appended later are still seen.
        """
        handle = self._require_handle()
        if self._pending is None:
            line = handle.readline()
            if line == "":
                return False
            self._pending = line
        return True

    def rewind(self) -> None:
        """Move back to the first line."""
        handle = self._require_handle()
        self.cursor = 1
        self._pending = None
        handle.seek(0)

    def advance(self) -> None:
        """Increment the line position counter. Does not touch the handle."""
        self._require_handle()
        self.cursor += 1

    def read_next(self) -> LineRead:
        """Read the next raw line and classify it against the filter."""
        handle = self._require_handle()
        if self._pending is not None:
            line, self._pending = self._pending, None
        else:
            line = handle.readline()
        if line == "":
            return LineRead(LineKind.END_OF_STREAM)
        if self._regex is not None and self._regex.search(line) is None:
            return LineRead(LineKind.FILTERED)
        return LineRead(LineKind.LINE, line)

    def current(self) -> str:
        """
        Read the next line, returning "" if it was filtered out or nothing is left.

        Each call consumes a line from the handle.
        """
        return self.read_next().text

    def close(self) -> None:
        """Release the file handle. Calling it again does nothing."""
        if self._handle is None:
            return
        self.cursor = CLOSED
        self._pending = None
        self._handle.close()
        self._handle = None
        logger.debug("Closed %s", self.path)

    # Generator interface

    def __iter__(self) -> Iterator[tuple[int, str]]:
        """Yield ``(key, line)`` for one full pass, starting from the first line."""
        self.rewind()
        while self.valid():
            yield self.key(), self.current()
            self.advance()

    def lines(self) -> Iterator[str]:
        """Yield the non-empty lines of one full pass."""
        for _, line in self:
            if line != "":
                yield line

    # Aggregate reads

    def read_into_array(self) -> list[str]:
        """
        Read the whole file into a list of lines that passed the filter.

        Warning: this loads every matching line into memory.

        Raises:
            ClosedResourceError: If the source has been closed
        """
        self._require_handle()
        data = list(self.lines())
        self.rewind()
        return data

    def read_into_string(self) -> str:
        """
        Read the whole file into one string of the lines that passed the filter.

        Raises:
            ClosedResourceError: If the source has been closed
        """
        self._require_handle()
        data = "".join(line for _, line in self)
        self.rewind()
        return data
