"""Append-only report log shared by conversion workers."""

import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import TextIO

from pubparse.exceptions import OutputError

logger = logging.getLogger(__name__)


class ReportLog:
    """Thread-safe writer for the batch report file.

    Every entry is written, flushed and synced under a single lock, so a
    concurrent reader never sees a partial or interleaved line.

    Attributes:
        handle: Text file handle opened in append mode
    """

    def __init__(self, handle: TextIO):
        self.handle = handle
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: Path) -> "ReportLog":
        """Create (if needed) and open a report file for appending."""
        path.parent.mkdir(parents=True, exist_ok=True)
        return cls(path.open("a", encoding="utf-8"))

    @property
    def path(self) -> str:
        return getattr(self.handle, "name", "<report>")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        with self._lock:
            if not self.handle.closed:
                self.handle.close()

    def write_header(
        self,
        input_path: Path | str,
        output_path: Path | str,
        item_count: int,
        workers: int,
        mode: str | None = None,
        started: datetime | None = None,
    ) -> None:
        """Record the batch parameters before any entry is written."""
        started = started or datetime.now()
        lines = [
            f">>> Starting Time: {started:%Y-%m-%d %H:%M:%S}",
            f">>> Input Directory: {input_path}",
            f">>> Output Directory: {output_path}",
            f">>> Number of Inputs: {item_count}",
            f">>> Workers: {workers}",
        ]
        if mode:
            lines.append(f">>> Mode: {mode}")
        self._write("\n" + "\n".join(lines) + "\n")

    def write_entry(self, input_path: Path | str, output_path: Path | str) -> None:
        """Append one completed conversion.

        Raises:
            OutputError: If the report cannot be written
        """
        self._write(f"\n>>> Input file: {input_path}\t Output file: {output_path}\n")

    def _write(self, text: str) -> None:
        with self._lock:
            try:
                self.handle.write(text)
                self.handle.flush()
                os.fsync(self.handle.fileno())
            except (OSError, ValueError) as e:
                raise OutputError(
                    f"failed to write to report {self.path}: {e}",
                    stage="reporting",
                    path=self.path,
                ) from e
