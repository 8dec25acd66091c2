from __future__ import annotations
from typing import List

from nltk.stem import SnowballStemmer

from tokenrank.core.stemming.base import Stemmer
from tokenrank.core.stemming.config import StemmingConfig


class SnowballTokenStemmer(Stemmer):
    def __init__(self, config: StemmingConfig | None = None):
        self.cfg = config or StemmingConfig()
        self._stemmer = (
            SnowballStemmer(
                self.cfg.language, ignore_stopwords=self.cfg.ignore_stopwords
            )
            if self.cfg.enabled
            else None
        )

    def stem(self, tokens: List[str]) -> List[str]:
        if self._stemmer is None:
            return list(tokens)
        return [self._stemmer.stem(t) for t in tokens]
