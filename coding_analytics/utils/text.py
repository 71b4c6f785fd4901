"""Tokenization and offset helpers shared by the analyses."""

import math
import re
from typing import Iterable, List, Optional

from ..config.constants import MIN_WORD_LENGTH
from ..config.lexicon import STOP_WORDS

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s'-]")


def split_words(text: str) -> List[str]:
    """Lower-case, blank out punctuation and split on whitespace. No filtering."""
    return _NON_WORD_CHARS.sub(" ", text.lower()).split()


def tokenize(
    text: str,
    extra_stop_words: Optional[Iterable[str]] = None,
    min_length: int = MIN_WORD_LENGTH
) -> List[str]:
    """
    Split text into content words.

    Args:
        text: Text to tokenize
        extra_stop_words: Lower-case words to drop on top of the fixed list
        min_length: Shortest word kept

    Returns:
        Tokens in text order
    """
    extra = set(extra_stop_words) if extra_stop_words else set()
    return [
        word for word in split_words(text)
        if len(word) >= min_length and word not in STOP_WORDS and word not in extra
    ]


def overlap_length(start_a: int, end_a: int, start_b: int, end_b: int) -> int:
    """Overlap of two half-open ranges; negative when they are apart."""
    return min(end_a, end_b) - max(start_a, start_b)


def round_one_decimal(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def percentage(part: float, whole: float) -> float:
    """Percentage with one decimal, zero when ``whole`` is zero, capped at 100."""
    if whole <= 0:
        return 0.0
    return min(100.0, round_one_decimal(part / whole * 100))
