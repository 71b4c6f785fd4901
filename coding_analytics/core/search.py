"""Text search over transcript content."""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from ..config.constants import SEARCH_CONTEXT_CHARS
from ..models.records import Transcript

logger = logging.getLogger(__name__)

PATTERN_MODES = ("pattern", "regex")


def _compile(pattern: str, mode: str) -> "re.Pattern":
    if mode in PATTERN_MODES:
        return re.compile(pattern, re.IGNORECASE)
    return re.compile(re.escape(pattern), re.IGNORECASE)


def _context(content: str, start: int, end: int, window: int) -> str:
    """Match plus up to ``window`` characters either side, with ellipses when cut."""
    left = max(0, start - window)
    right = min(len(content), end + window)
    prefix = "..." if left > 0 else ""
    suffix = "..." if right < len(content) else ""
    return prefix + content[left:right] + suffix


def search_transcripts(
    transcripts: Sequence[Transcript],
    pattern: str,
    mode: str = "literal",
    transcript_ids: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """
    Find every case-insensitive match of a pattern in transcript content.

    Args:
        transcripts: Transcripts to scan
        pattern: Literal text, or a regular expression in pattern mode
        mode: ``literal`` (default) or ``pattern``/``regex``
        transcript_ids: Optional allow-list; empty means all transcripts

    Returns:
        Dict with a ``matches`` list in transcript then offset order
    """
    allowed = set(transcript_ids) if transcript_ids else None
    matches: List[Dict[str, Any]] = []

    for transcript in transcripts:
        if allowed is not None and transcript.id not in allowed:
            continue

        try:
            regex = _compile(pattern, mode)
        except re.error as e:
            logger.debug(f"Invalid pattern {pattern!r} for transcript {transcript.id}: {e}")
            continue

        content = transcript.content
        # finditer steps past zero-length matches on its own
        for match in regex.finditer(content):
            matches.append({
                "transcript_id": transcript.id,
                "transcript_title": transcript.title,
                "offset": match.start(),
                "match_text": match.group(0),
                "context": _context(content, match.start(), match.end(), SEARCH_CONTEXT_CHARS),
            })

    logger.debug(f"Search for {pattern!r} ({mode}) found {len(matches)} matches")
    return {"matches": matches}


def propose_codings(search_result: Dict[str, Any], question_id: str) -> List[Dict[str, Any]]:
    """
    Turn search matches into candidate codings for one question.

    Zero-length matches are skipped. Nothing is persisted and no ids are
    assigned; the host decides what to keep.
    """
    proposals = []
    for match in search_result.get("matches", []):
        text = match["match_text"]
        if not text:
            continue
        proposals.append({
            "transcript_id": match["transcript_id"],
            "question_id": question_id,
            "start_offset": match["offset"],
            "end_offset": match["offset"] + len(text),
            "coded_text": text,
        })
    return proposals
