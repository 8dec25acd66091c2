from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Stemmer(ABC):
    """Port: reduce tokens to their algorithmic root."""

    @abstractmethod
    def stem(self, tokens: List[str]) -> List[str]: ...
