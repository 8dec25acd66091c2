from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PlotConfig:
    title: str = "Token Analysis"
    x_title: str = "Rank"
    y_title: str = "Token Count"
    log_x: bool = True
    log_y: bool = True
    include_plotlyjs: bool | str = True  # True = self-contained HTML
