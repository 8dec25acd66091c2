from __future__ import annotations
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from tokenrank.core.plotting.base import PlotRenderer
from tokenrank.core.plotting.config import PlotConfig
from tokenrank.messages.analysis_messages import PLOT_NOT_WRITABLE
from tokenrank.utils.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def zipf_frame(counts: Sequence[int]) -> pd.DataFrame:
    """Columns: rank (1-based), count, zipf (= max_count / rank)."""
    df = pd.DataFrame({"count": pd.Series(list(counts), dtype="int64")})
    df.insert(0, "rank", pd.RangeIndex(1, len(df) + 1))
    if df.empty:
        df["zipf"] = pd.Series(dtype="float64")
        return df
    df["zipf"] = df["count"].max() / df["rank"]
    return df


class PlotlyZipfRenderer(PlotRenderer):
    """Adapter: observed counts vs. the Zipf reference curve, saved as HTML."""

    def __init__(self, config: PlotConfig | None = None):
        self.cfg = config or PlotConfig()

    def build_figure(self, counts: Sequence[int]) -> go.Figure:
        df = zipf_frame(counts)

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=df["rank"],
                y=df["count"],
                mode="lines+markers",
                name="Observed",
            )
        )
        fig.add_trace(
            go.Scatter(
                x=df["rank"],
                y=df["zipf"],
                mode="lines",
                name="Zipf (max / rank)",
                line=dict(dash="dash"),
            )
        )
        fig.update_layout(
            title_text=self.cfg.title,
            xaxis=dict(
                title=self.cfg.x_title, type="log" if self.cfg.log_x else "linear"
            ),
            yaxis=dict(
                title=self.cfg.y_title, type="log" if self.cfg.log_y else "linear"
            ),
        )
        return fig

    def render(self, counts: Sequence[int], path: str | Path) -> Path:
        out = Path(path)
        fig = self.build_figure(counts)
        try:
            fig.write_html(str(out), include_plotlyjs=self.cfg.include_plotlyjs)
        except OSError as e:
            raise OutputWriteError(
                code="PLOT_NOT_WRITABLE",
                message=f"{PLOT_NOT_WRITABLE} ({out}: {e.strerror})",
            ) from e
        logger.info(f"Plot saved to {out} ({len(counts)} ranks)")
        return out
