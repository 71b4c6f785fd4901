"""Lexicon-based sentiment scoring of coded segments."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..config.constants import (
    SENTIMENT_NEGATIVE_THRESHOLD,
    SENTIMENT_POSITIVE_THRESHOLD,
    SENTIMENT_SAMPLE_CHARS,
)
from ..config.lexicon import NEGATION_WORDS, SENTIMENT_LEXICON
from ..models.records import Coding, Question, Transcript
from ..utils.text import split_words

logger = logging.getLogger(__name__)


def score_sentiment(text: str) -> Dict[str, float]:
    """
    Score text against the polarity lexicon.

    A lexicon word directly after a negator counts with its sign flipped.
    The score is the summed weight divided by the number of words; the
    magnitude is the summed absolute weight.
    """
    words = split_words(text)
    total = 0
    magnitude = 0

    for i, word in enumerate(words):
        weight = SENTIMENT_LEXICON.get(word)
        if weight is None:
            continue
        if i > 0 and words[i - 1] in NEGATION_WORDS:
            weight = -weight
        total += weight
        magnitude += abs(weight)

    return {
        "score": total / len(words) if words else 0.0,
        "magnitude": float(magnitude),
    }


def classify_score(score: float) -> str:
    """Label a score as positive, negative or neutral."""
    if score > SENTIMENT_POSITIVE_THRESHOLD:
        return "positive"
    if score < SENTIMENT_NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def compute_sentiment(
    codings: Sequence[Coding],
    transcripts: Sequence[Transcript],
    questions: Sequence[Question],
    scope: str = "all",
    scope_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score coded segments and summarize sentiment overall and per group.

    Args:
        codings: Codings to score
        transcripts: Transcripts supplying group labels
        questions: Questions supplying group labels
        scope: ``all``, ``question`` or ``transcript``
        scope_id: Question or transcript id narrowing the codings for that scope

    Returns:
        Dict with ``overall`` counts and average score, and ``items`` per
        question (or per transcript for transcript scope), best score first
    """
    filtered = list(codings)
    if scope == "question" and scope_id:
        filtered = [c for c in codings if c.question_id == scope_id]
    elif scope == "transcript" and scope_id:
        filtered = [c for c in codings if c.transcript_id == scope_id]

    overall = {"positive": 0, "negative": 0, "neutral": 0, "average_score": 0.0}
    total_score = 0.0
    for coding in filtered:
        score = score_sentiment(coding.coded_text)["score"]
        overall[classify_score(score)] += 1
        total_score += score

    if filtered:
        overall["average_score"] = total_score / len(filtered)

    groups: Dict[str, List[Coding]] = {}
    for coding in filtered:
        key = coding.transcript_id if scope == "transcript" else coding.question_id
        groups.setdefault(key, []).append(coding)

    labels: Dict[str, str] = {}
    if scope in ("transcript", "all"):
        labels.update({t.id: t.title for t in transcripts})
    if scope in ("question", "all"):
        labels.update({q.id: q.text for q in questions})

    items = []
    for group_id, group in groups.items():
        scored = score_sentiment(" ".join(c.coded_text for c in group))
        items.append({
            "id": group_id,
            "label": labels.get(group_id) or group_id,
            "score": scored["score"],
            "magnitude": scored["magnitude"],
            "sample_text": group[0].coded_text[:SENTIMENT_SAMPLE_CHARS],
        })
    items.sort(key=lambda x: x["score"], reverse=True)

    logger.debug(f"Sentiment ({scope}) scored {len(filtered)} codings in {len(items)} groups")
    return {"overall": overall, "items": items}
