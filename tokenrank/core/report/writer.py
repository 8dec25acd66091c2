from __future__ import annotations
from itertools import islice
from typing import Iterable

from tokenrank.core.ranking.base import FrequencyEntry
from tokenrank.core.report.base import ReportSink, ReportWriter
from tokenrank.core.report.config import ReportConfig


def format_entry(entry: FrequencyEntry, separator: str = " ") -> str:
    return f"{entry.token}{separator}{entry.count}"


class LineReportWriter(ReportWriter):
    """One "<token> <count>" line per entry, in ranked order."""

    def __init__(self, config: ReportConfig | None = None):
        self.cfg = config or ReportConfig()

    def write(self, entries: Iterable[FrequencyEntry], sink: ReportSink) -> int:
        if self.cfg.top is not None:
            entries = islice(entries, self.cfg.top)
        written = 0
        for entry in entries:
            sink.write_line(format_entry(entry, self.cfg.separator))
            written += 1
        return written
