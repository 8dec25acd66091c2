from tokenrank.core.normalization.config import NormalizationConfig
from tokenrank.core.normalization.normalizer import (
    DefaultTextNormalizer,
    ascii_lower,
    strip_punctuation,
)


def test_strip_removes_symbols_keeps_apostrophes_and_digits():
    assert strip_punctuation("Don't stop, 42 times!") == "Don't stop 42 times"


def test_strip_removes_underscores():
    assert strip_punctuation("snake_case __init__") == "snakecase init"


def test_strip_keeps_unicode_word_characters():
    assert strip_punctuation("café — naïve.") == "café  naïve"


def test_strip_removes_quote_characters():
    assert strip_punctuation('"the" “and” «or»') == "the and or"


def test_ascii_lower_leaves_non_ascii_untouched():
    assert ascii_lower("HELLO ÉCOLE Straße") == "hello École straße"


# -------------------------------------
# Stage order
# -------------------------------------
def test_strip_stage_keeps_original_casing():
    n = DefaultTextNormalizer(NormalizationConfig(lowercase=True))
    assert n.strip("The Cat.") == "The Cat"
    assert n.normalize("The Cat.") == "the cat"


def test_lowercase_disabled_by_default():
    assert DefaultTextNormalizer().normalize("The Cat.") == "The Cat"


def test_retained_punctuation_only_lowercases():
    n = DefaultTextNormalizer(
        NormalizationConfig(strip_punctuation=False, lowercase=True)
    )
    assert n.normalize("The Cat, sat.") == "the cat, sat."


def test_normalize_none_is_empty():
    assert DefaultTextNormalizer().normalize(None) == ""
