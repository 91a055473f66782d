"""A log of start and stop records, one record per line."""

from __future__ import annotations

import os
from types import TracebackType


class SystemLog:
    """Write a start message, then a comma and a stop message ending the line."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._file = open(filename, "a", encoding="utf-8")

    def start(self, message: str) -> None:
        """Begin a record with the given message."""
        self._file.write(message)
        self._file.flush()

    def stop(self, message: str) -> None:
        """Finish the current record with the given message."""
        self._file.write(f",{message}\n")
        self._file.flush()

    def close(self) -> None:
        """Close the file; later calls do nothing."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> SystemLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()