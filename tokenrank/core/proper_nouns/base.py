from __future__ import annotations
from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable


class EvidenceCollector(ABC):
    """Port: gather words that argue against proper-noun status."""

    @abstractmethod
    def collect(self, words: Iterable[str]) -> FrozenSet[str]: ...
