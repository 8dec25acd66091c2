from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable

from tokenrank.core.ranking.base import FrequencyEntry


class ReportSink(ABC):
    """Port: a writable, line-oriented destination used as a context manager."""

    def __enter__(self) -> "ReportSink":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @abstractmethod
    def open(self) -> None: ...

    @abstractmethod
    def write_line(self, line: str) -> None: ...

    @abstractmethod
    def close(self) -> None:
        """Flush, and release the handle if the sink owns it."""
        ...


class ReportWriter(ABC):
    """Port: render ranked entries into a sink."""

    @abstractmethod
    def write(self, entries: Iterable[FrequencyEntry], sink: ReportSink) -> int:
        """Returns the number of lines written."""
        ...
