from __future__ import annotations
import re
from collections import Counter
from typing import AbstractSet, Iterable, List

from tokenrank.core.normalization.normalizer import ascii_lower
from tokenrank.core.ranking.base import FrequencyEntry, FrequencyRanker
from tokenrank.core.ranking.config import RankingConfig

_WORD_RE = re.compile(r"\w")


def sort_entries(entries: Iterable[FrequencyEntry]) -> List[FrequencyEntry]:
    # count desc, then token desc
    return sorted(entries, reverse=True)


class DefaultFrequencyRanker(FrequencyRanker):
    """
    Adapter: Counter-based ranking with the optional proper-noun filter.

    The filter keeps an entry only if it recurs and its lowercase form was
    never seen lowercase/digit-initial in the raw text. Tokens without a
    word character (retained punctuation) are never candidates. Failing
    entries are dropped, not merged.
    """

    def __init__(self, config: RankingConfig | None = None):
        self.cfg = config or RankingConfig()

    def count(self, tokens: Iterable[str]) -> Counter:
        return Counter(t for t in tokens if t)

    def _is_proper(self, entry: FrequencyEntry, evidence: AbstractSet[str]) -> bool:
        return (
            entry.count >= self.cfg.min_proper_count
            and _WORD_RE.search(entry.token) is not None
            and ascii_lower(entry.token) not in evidence
        )

    def rank(
        self, tokens: Iterable[str], evidence: AbstractSet[str] = frozenset()
    ) -> List[FrequencyEntry]:
        counts = self.count(tokens)
        entries = [FrequencyEntry(c, t) for t, c in counts.items()]
        if self.cfg.proper_noun_filter:
            entries = [e for e in entries if self._is_proper(e, evidence)]
        return sort_entries(entries)
