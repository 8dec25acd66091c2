from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizationConfig:
    strip_punctuation: bool = True
    lowercase: bool = False  # ASCII only
