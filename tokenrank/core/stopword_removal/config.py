from __future__ import annotations
from dataclasses import dataclass, field
from typing import Set


@dataclass(frozen=True)
class StopwordConfig:
    enabled: bool = False  # opt-in on the command line
    source: str = "sklearn"  # "sklearn" | "nltk"
    custom_stopwords: Set[str] = field(default_factory=set)  # extra words to remove
    exclude_stopwords: Set[str] = field(
        default_factory=set
    )  # words to keep even if in list
    lowercase: bool = False  # must match the text normalizer
