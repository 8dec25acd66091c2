from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class StemmingConfig:
    enabled: bool = False
    language: str = "english"  # Snowball locale
    ignore_stopwords: bool = False  # Snowball option; needs the NLTK stopword corpus
