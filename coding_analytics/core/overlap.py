"""Interval-overlap analyses: co-occurrence and boolean coding queries."""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence

from ..config.constants import DEFAULT_MIN_OVERLAP, MAX_SEARCH_MATCHES
from ..models.analysis import QueryCondition, QueryOperator
from ..models.records import Coding, Transcript
from ..utils.text import overlap_length

logger = logging.getLogger(__name__)


def _group_by_transcript(codings: Sequence[Coding]) -> Dict[str, List[Coding]]:
    """Group codings by transcript, keeping first-seen transcript order."""
    grouped: Dict[str, List[Coding]] = defaultdict(list)
    for coding in codings:
        grouped[coding.transcript_id].append(coding)
    return grouped


def _overlaps(a: Coding, b: Coding) -> bool:
    return overlap_length(a.start_offset, a.end_offset, b.start_offset, b.end_offset) > 0


def compute_cooccurrence(
    codings: Sequence[Coding],
    question_ids: Sequence[str],
    min_overlap: Optional[int] = None
) -> Dict[str, Any]:
    """
    Find where codings of two questions overlap, for every question pair.

    Args:
        codings: Codings to inspect
        question_ids: Questions to pair up; fewer than two gives no pairs
        min_overlap: Minimum shared characters (default 1)

    Returns:
        Dict with a ``pairs`` list; pairs without overlapping segments are omitted
    """
    if len(question_ids) < 2:
        return {"pairs": []}

    threshold = DEFAULT_MIN_OVERLAP if min_overlap is None else min_overlap
    wanted = set(question_ids)
    by_transcript = _group_by_transcript([c for c in codings if c.question_id in wanted])

    pairs = []
    for i, question_a in enumerate(question_ids):
        for question_b in question_ids[i + 1:]:
            segments = []
            for transcript_id, transcript_codings in by_transcript.items():
                codes_a = [c for c in transcript_codings if c.question_id == question_a]
                codes_b = [c for c in transcript_codings if c.question_id == question_b]

                for a in codes_a:
                    for b in codes_b:
                        start = max(a.start_offset, b.start_offset)
                        end = min(a.end_offset, b.end_offset)
                        if end - start < threshold:
                            continue
                        segments.append({
                            "transcript_id": transcript_id,
                            "text": a.coded_text[max(0, start - a.start_offset):end - a.start_offset],
                            "start_offset": start,
                            "end_offset": end,
                        })

            if segments:
                pairs.append({
                    "question_ids": [question_a, question_b],
                    "segments": segments,
                    "count": len(segments),
                })

    logger.debug(f"Co-occurrence over {len(question_ids)} questions found {len(pairs)} pairs")
    return {"pairs": pairs}


def compute_coding_query(
    codings: Sequence[Coding],
    transcripts: Sequence[Transcript],
    conditions: Sequence[QueryCondition]
) -> Dict[str, Any]:
    """
    Evaluate a boolean condition list against codings, transcript by transcript.

    The first condition's question supplies the candidate codings. Each
    later condition is checked against a candidate by overlap within the
    same transcript: ``AND`` keeps it only if an overlapping coding of that
    question exists, ``NOT`` only if none does. ``OR`` never filters; its
    question's codings are appended afterwards unless a match with the
    same offsets is already present.

    Args:
        codings: All codings
        transcripts: Transcripts used for titles; codings on unknown transcripts are skipped
        conditions: Ordered conditions

    Returns:
        Dict with ``matches`` (capped) and ``total_matches`` (uncapped)
    """
    if not conditions:
        return {"matches": [], "total_matches": 0}

    titles = {t.id: t.title for t in transcripts}
    anchor = conditions[0].question_id
    rest = list(conditions[1:])
    matches: List[Dict[str, Any]] = []

    def as_match(coding: Coding, title: str) -> Dict[str, Any]:
        return {
            "transcript_id": coding.transcript_id,
            "transcript_title": title,
            "text": coding.coded_text,
            "start_offset": coding.start_offset,
            "end_offset": coding.end_offset,
        }

    for transcript_id, transcript_codings in _group_by_transcript(codings).items():
        if transcript_id not in titles:
            continue
        title = titles[transcript_id]

        for base in (c for c in transcript_codings if c.question_id == anchor):
            include = True
            for condition in rest:
                if condition.operator == QueryOperator.OR:
                    continue
                has_overlap = any(
                    _overlaps(base, other)
                    for other in transcript_codings
                    if other.question_id == condition.question_id
                )
                if condition.operator == QueryOperator.AND and not has_overlap:
                    include = False
                    break
                if condition.operator == QueryOperator.NOT and has_overlap:
                    include = False
                    break

            if include:
                matches.append(as_match(base, title))

        for condition in rest:
            if condition.operator != QueryOperator.OR:
                continue
            for other in transcript_codings:
                if other.question_id != condition.question_id:
                    continue
                already_matched = any(
                    m["transcript_id"] == transcript_id
                    and m["start_offset"] == other.start_offset
                    and m["end_offset"] == other.end_offset
                    for m in matches
                )
                if not already_matched:
                    matches.append(as_match(other, title))

    logger.debug(f"Coding query with {len(conditions)} conditions matched {len(matches)} segments")
    return {"matches": matches[:MAX_SEARCH_MATCHES], "total_matches": len(matches)}
