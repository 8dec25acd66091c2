from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence


class PlotRenderer(ABC):
    """Port: draw a rank/frequency chart from counts in ranked order."""

    @abstractmethod
    def render(self, counts: Sequence[int], path: str | Path) -> Path: ...
