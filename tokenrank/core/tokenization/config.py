from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizationConfig:
    method: str = "whitespace"  # "whitespace" | "wordpunct"
