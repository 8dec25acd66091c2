from __future__ import annotations
from typing import List

from nltk.tokenize import wordpunct_tokenize

from tokenrank.core.tokenization.base import Tokenizer
from tokenrank.core.tokenization.config import TokenizationConfig


class DefaultTokenizer(Tokenizer):
    """
    Adapter:
      - "whitespace": split on runs of whitespace (stripped text)
      - "wordpunct": also break between word chars and punctuation, so
        punctuation runs become tokens of their own (retained punctuation)
    """

    def __init__(self, config: TokenizationConfig | None = None):
        self.cfg = config or TokenizationConfig()
        if self.cfg.method not in ("whitespace", "wordpunct"):
            raise ValueError(f"Unknown tokenization method: {self.cfg.method!r}")

    def tokenize(self, text: str) -> List[str]:
        s = text or ""
        if self.cfg.method == "wordpunct":
            return [t for t in wordpunct_tokenize(s) if t]
        return s.split()
