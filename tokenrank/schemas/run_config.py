from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PLOT_PATH = Path("plot.html")


class RunConfig(BaseModel):
    """Resolved options for one run. Read-only once built."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    strip_punctuation: bool = True
    lowercase: bool = False
    stem: bool = False
    remove_stopwords: bool = False
    proper_noun_filter: bool = False
    output_path: Optional[Path] = None  # None -> stdout
    plot_path: Optional[Path] = DEFAULT_PLOT_PATH  # None -> no chart
    top: Optional[int] = Field(default=None, ge=0)
    verbose: bool = False
