from __future__ import annotations
from abc import ABC, abstractmethod
from typing import AbstractSet, Iterable, List, NamedTuple


class FrequencyEntry(NamedTuple):
    """(count, token). Tuple order is the ranking order."""

    count: int
    token: str


class FrequencyRanker(ABC):
    """Port: count tokens and order them by frequency."""

    @abstractmethod
    def rank(
        self, tokens: Iterable[str], evidence: AbstractSet[str] = frozenset()
    ) -> List[FrequencyEntry]: ...
