from __future__ import annotations
import logging
from typing import FrozenSet, Iterable, List, Set, Tuple

from nltk.corpus import stopwords as nltk_stopwords
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from tokenrank.core.normalization.normalizer import ascii_lower, strip_punctuation
from tokenrank.core.stopword_removal.base import StopwordRemover
from tokenrank.core.stopword_removal.config import StopwordConfig
from tokenrank.messages.analysis_messages import STOPWORD_SOURCE_MISSING
from tokenrank.utils.exceptions import StopwordResourceError

logger = logging.getLogger(__name__)


def _load_source(source: str) -> List[str]:
    if source == "sklearn":
        return list(ENGLISH_STOP_WORDS)
    if source == "nltk":
        try:
            return list(nltk_stopwords.words("english"))
        except LookupError as e:
            raise StopwordResourceError(
                code="STOPWORD_CORPUS_MISSING", message=STOPWORD_SOURCE_MISSING
            ) from e
    raise ValueError(f"Unknown stopword source: {source!r}")


class DefaultStopwordRemover(StopwordRemover):
    """
    Adapter: the stop set goes through the same punctuation predicate as the
    corpus (the raw lists may wrap entries in quotes) and the same ASCII
    lowercasing, so membership tests compare like with like.
    """

    def __init__(self, config: StopwordConfig | None = None):
        self.cfg = config or StopwordConfig()
        self._stopset = self._build_stopset()

    def _normalize(self, words: Iterable[str]) -> Set[str]:
        out: Set[str] = set()
        for w in words:
            s = strip_punctuation(str(w))
            if self.cfg.lowercase:
                s = ascii_lower(s)
            s = s.strip()
            if s:
                out.add(s)
        return out

    def _build_stopset(self) -> FrozenSet[str]:
        if not self.cfg.enabled:
            return frozenset()

        base = self._normalize(_load_source(self.cfg.source))
        base |= self._normalize(self.cfg.custom_stopwords)
        base -= self._normalize(self.cfg.exclude_stopwords)

        logger.debug(f"Built stopword set from {self.cfg.source}: {len(base)} words")
        return frozenset(base)

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopset

    def remove(self, tokens: List[str]) -> Tuple[List[str], List[str]]:
        cleaned: List[str] = []
        removed: List[str] = []
        for t in tokens:
            if t in self._stopset:
                removed.append(t)
                continue
            cleaned.append(t)
        return cleaned, removed
