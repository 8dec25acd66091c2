from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class RankingConfig:
    proper_noun_filter: bool = False
    min_proper_count: int = 2  # a proper noun has to recur
