from __future__ import annotations
from typing import FrozenSet, Iterable, Set

from tokenrank.core.proper_nouns.base import EvidenceCollector

_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_ASCII_DIGITS = frozenset("0123456789")


def is_lower_evidence(word: str) -> bool:
    """True when the first char is missing, an ASCII lowercase letter or digit."""
    if not word:
        return True
    first = word[0]
    return first in _ASCII_LOWER or first in _ASCII_DIGITS


class LowercaseEvidenceCollector(EvidenceCollector):
    """
    Collects words seen lowercase- or digit-initial anywhere in the text.

    Must run on words split from the stripped text BEFORE lowercasing,
    otherwise every word would count as evidence. Words are kept as they
    appear.
    """

    def collect(self, words: Iterable[str]) -> FrozenSet[str]:
        evidence: Set[str] = set()
        for word in words:
            if is_lower_evidence(word):
                evidence.add(word)
        return frozenset(evidence)
