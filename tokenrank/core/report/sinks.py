from __future__ import annotations
import sys
from pathlib import Path
from typing import IO, Optional

from tokenrank.core.report.base import ReportSink
from tokenrank.messages.analysis_messages import OUTPUT_NOT_WRITABLE
from tokenrank.utils.exceptions import OutputWriteError


class StreamSink(ReportSink):
    """Writes to an already-open stream (stdout by default). Never closes it."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def open(self) -> None:
        pass

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")

    def close(self) -> None:
        self.stream.flush()


class FileSink(ReportSink):
    """Owns a text file handle for the duration of the `with` block."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self._fh: Optional[IO[str]] = None

    def open(self) -> None:
        try:
            self._fh = open(self.path, "w", encoding=self.encoding)
        except OSError as e:
            raise OutputWriteError(
                code="OUTPUT_NOT_WRITABLE",
                message=f"{OUTPUT_NOT_WRITABLE} ({self.path}: {e.strerror})",
            ) from e

    def write_line(self, line: str) -> None:
        if self._fh is None:
            raise RuntimeError("FileSink used outside of its context")
        try:
            self._fh.write(line + "\n")
        except OSError as e:
            raise OutputWriteError(
                code="OUTPUT_WRITE_FAILED",
                message=f"{OUTPUT_NOT_WRITABLE} ({self.path}: {e.strerror})",
            ) from e

    def close(self) -> None:
        if self._fh is not None:
            try:
                self._fh.close()
            finally:
                self._fh = None


def open_sink(path: str | Path | None) -> ReportSink:
    """File sink for a path, stdout sink for None."""
    if path is None:
        return StreamSink()
    return FileSink(path)
