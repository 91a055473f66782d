"""A line logger that appends messages to a file."""

from __future__ import annotations

import os
from types import TracebackType


class Logger:
    """Append each message as its own line and flush at once."""

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        try:
            self._file = open(file_name, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Error opening file: {os.fspath(file_name)}") from exc

    def write(self, message: str) -> None:
        """Write one line."""
        self._file.write(f"{message}\n")
        self._file.flush()

    def __lshift__(self, message: str) -> Logger:
        self.write(message)
        return self

    def close(self) -> None:
        """Close the file; later calls do nothing."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()