from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReportConfig:
    top: Optional[int] = None  # None = every entry
    separator: str = " "
