from __future__ import annotations
from abc import ABC, abstractmethod


class TextNormalizer(ABC):
    """Port: turn raw text into normalized text."""

    @abstractmethod
    def strip(self, text: str) -> str:
        """First stage only: punctuation handling, original casing kept."""
        ...

    @abstractmethod
    def normalize(self, text: str) -> str: ...
