"""Word frequency counts over coded text."""

from collections import Counter
from typing import Any, Dict, Optional, Sequence

from ..config.constants import MAX_WORD_FREQUENCY_RESULTS
from ..models.records import Coding
from ..utils.text import tokenize


def compute_word_frequency(
    codings: Sequence[Coding],
    question_id: Optional[str] = None,
    max_words: Optional[int] = None,
    custom_stop_words: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """
    Count content words in coded segments.

    Args:
        codings: Codings whose text is counted
        question_id: Restrict to one question's codings
        max_words: Number of words returned (default 100)
        custom_stop_words: Extra words to ignore, case-insensitive

    Returns:
        Dict with ``words`` as [{text, count}], most frequent first; ties
        keep first-seen order
    """
    extra = {w.lower() for w in custom_stop_words} if custom_stop_words else None

    counts: Counter = Counter()
    for coding in codings:
        if question_id and coding.question_id != question_id:
            continue
        counts.update(tokenize(coding.coded_text, extra_stop_words=extra))

    limit = max_words or MAX_WORD_FREQUENCY_RESULTS
    ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)[:limit]
    return {"words": [{"text": text, "count": count} for text, count in ranked]}
