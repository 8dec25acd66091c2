from __future__ import annotations
import re

from tokenrank.core.normalization.base import TextNormalizer
from tokenrank.core.normalization.config import NormalizationConfig

# Anything that is not a word char, whitespace or apostrophe; plus underscores,
# which \w would otherwise keep. Shared with the stop-word builder.
PUNCTUATION_RE = re.compile(r"[^\w\s']|_")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def strip_punctuation(text: str) -> str:
    return PUNCTUATION_RE.sub("", text)


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only. Non-ASCII letters are left as they are."""
    return text.translate(_ASCII_LOWER)


class DefaultTextNormalizer(TextNormalizer):
    """
    Adapter: two stages in a fixed order.
      1. strip punctuation (skipped when retaining it)
      2. ASCII lowercase (when enabled)
    Proper-noun evidence reads the output of stage 1.
    """

    def __init__(self, config: NormalizationConfig | None = None):
        self.cfg = config or NormalizationConfig()

    def strip(self, text: str) -> str:
        s = text or ""
        if self.cfg.strip_punctuation:
            s = strip_punctuation(s)
        return s

    def normalize(self, text: str) -> str:
        s = self.strip(text)
        if self.cfg.lowercase:
            s = ascii_lower(s)
        return s
