"""
File Reader — Content provider consumed by the analysis core.

The core never opens files itself; it calls ``read(path) -> str`` on whatever
provider the caller hands it. ``LocalFileReader`` is the filesystem one.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Protocol

from inspector.config import settings
from inspector.models.scan_models import FailureKind


class FileReadError(Exception):
    """A file could not be turned into text."""

    def __init__(self, path: str, kind: FailureKind, detail: str = "") -> None:
        self.path = path
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {path}" + (f" ({detail})" if detail else ""))


class FileReader(Protocol):
    def read(self, path: str) -> str: ...


class LocalFileReader:
    """Reads UTF-8 text from the local filesystem with a size cap."""

    def __init__(self, max_file_size_bytes: int | None = None) -> None:
        self.max_file_size_bytes = max_file_size_bytes or settings.max_file_size_bytes

    def read(self, path: str) -> str:
        if not path or not path.strip():
            raise FileReadError(path, FailureKind.EMPTY_PATH, "File path is required")

        file_path = Path(path)
        if not file_path.is_file():
            raise FileReadError(path, FailureKind.NOT_FOUND)

        try:
            size = file_path.stat().st_size
            if size > self.max_file_size_bytes:
                raise FileReadError(
                    path,
                    FailureKind.TOO_LARGE,
                    f"{size} bytes exceeds limit of {self.max_file_size_bytes}",
                )
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise FileReadError(path, FailureKind.DECODE_ERROR, str(e)) from e
        except OSError as e:
            raise FileReadError(path, FailureKind.UNREADABLE, str(e)) from e


class LogTailReader:
    """Reads the last lines of an append-only log.

    Logs are streamed line by line and only the tail is kept in memory, so no
    size cap applies. Undecodable bytes are replaced rather than rejected.
    """

    def read_tail(self, path: str, max_lines: int) -> tuple[str, int]:
        """Return ``(text of the last max_lines lines, total line count)``."""
        if not path or not path.strip():
            raise FileReadError(path, FailureKind.EMPTY_PATH, "Log path is required")

        file_path = Path(path)
        if not file_path.is_file():
            raise FileReadError(path, FailureKind.NOT_FOUND)

        tail: deque[bytes] = deque(maxlen=max(max_lines, 0))
        total = 0
        try:
            with file_path.open("rb") as f:
                for raw in f:
                    total += 1
                    tail.append(raw.rstrip(b"\r\n") + b"\n")
        except OSError as e:
            raise FileReadError(path, FailureKind.UNREADABLE, str(e)) from e

        return b"".join(tail).decode("utf-8", errors="replace"), total
