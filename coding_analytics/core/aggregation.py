"""Count and coverage aggregations: framework matrix, statistics, comparison, treemap."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..config.constants import MAX_MATRIX_EXCERPTS
from ..models.records import Case, Coding, Question, Transcript
from ..utils.text import percentage

logger = logging.getLogger(__name__)


def _filter_by_ids(items: Sequence[Any], ids: Optional[Sequence[str]]) -> List[Any]:
    """Keep items whose id is listed; an empty or missing list keeps everything."""
    if not ids:
        return list(items)
    wanted = set(ids)
    return [item for item in items if item.id in wanted]


def _coded_chars(codings: Sequence[Coding]) -> int:
    return sum(c.length for c in codings)


def build_framework_matrix(
    transcripts: Sequence[Transcript],
    questions: Sequence[Question],
    codings: Sequence[Coding],
    cases: Sequence[Case],
    question_ids: Optional[Sequence[str]] = None,
    case_ids: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """
    Build a case-by-question matrix of coding counts and sample excerpts.

    Every filtered case gets a row, even when none of its transcripts are
    coded.
    """
    filtered_questions = _filter_by_ids(questions, question_ids)
    filtered_cases = _filter_by_ids(cases, case_ids)

    rows = []
    for case in filtered_cases:
        case_transcripts = {t.id for t in transcripts if t.case_id == case.id}
        cells = []
        for question in filtered_questions:
            cell_codings = [
                c for c in codings
                if c.question_id == question.id and c.transcript_id in case_transcripts
            ]
            cells.append({
                "question_id": question.id,
                "excerpts": [c.coded_text for c in cell_codings[:MAX_MATRIX_EXCERPTS]],
                "count": len(cell_codings),
            })
        rows.append({"case_id": case.id, "case_name": case.name, "cells": cells})

    return {"rows": rows}


def compute_stats(
    codings: Sequence[Coding],
    questions: Sequence[Question],
    transcripts: Sequence[Transcript],
    group_by: str = "question",
    question_ids: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """
    Count codings per question or per transcript.

    Coverage for a question is measured against only the transcripts that
    question touches, so it reports density within relevant material.

    Args:
        codings: All codings
        questions: Questions to report when grouping by question
        transcripts: Transcripts supplying lengths and titles
        group_by: ``question`` (default) or ``transcript``
        question_ids: Optional question filter applied before counting

    Returns:
        Dict with ``items`` ({id, label, count, percentage, coverage}) and ``total``
    """
    wanted = set(question_ids) if question_ids else None
    filtered = [c for c in codings if wanted is None or c.question_id in wanted]
    total = len(filtered)

    items = []
    if group_by == "transcript":
        for transcript in transcripts:
            group = [c for c in filtered if c.transcript_id == transcript.id]
            items.append({
                "id": transcript.id,
                "label": transcript.title,
                "count": len(group),
                "percentage": percentage(len(group), total),
                "coverage": percentage(_coded_chars(group), len(transcript.content)),
            })
    else:
        lengths = {t.id: len(t.content) for t in transcripts}
        for question in _filter_by_ids(questions, question_ids):
            group = [c for c in filtered if c.question_id == question.id]
            touched = {c.transcript_id for c in group}
            touched_chars = sum(lengths.get(tid, 0) for tid in touched)
            items.append({
                "id": question.id,
                "label": question.text,
                "count": len(group),
                "percentage": percentage(len(group), total),
                "coverage": percentage(_coded_chars(group), touched_chars),
            })

    return {"items": items, "total": total}


def compute_comparison(
    codings: Sequence[Coding],
    transcripts: Sequence[Transcript],
    questions: Sequence[Question],
    transcript_ids: Optional[Sequence[str]] = None,
    question_ids: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """Profile each selected transcript by per-question count and coverage."""
    filtered_questions = _filter_by_ids(questions, question_ids)

    result = []
    for transcript in _filter_by_ids(transcripts, transcript_ids):
        length = len(transcript.content)
        profile = []
        for question in filtered_questions:
            group = [
                c for c in codings
                if c.transcript_id == transcript.id and c.question_id == question.id
            ]
            profile.append({
                "question_id": question.id,
                "count": len(group),
                "coverage": percentage(_coded_chars(group), length),
            })
        result.append({"id": transcript.id, "title": transcript.title, "profile": profile})

    return {"transcripts": result}


def compute_treemap(
    codings: Sequence[Coding],
    questions: Sequence[Question],
    metric: str = "count",
    question_ids: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """Size each question by coding count or coded characters; empty questions are dropped."""
    nodes = []
    for question in _filter_by_ids(questions, question_ids):
        group = [c for c in codings if c.question_id == question.id]
        size = _coded_chars(group) if metric == "characters" else len(group)
        if size <= 0:
            continue
        nodes.append({
            "id": question.id,
            "name": question.text,
            "size": size,
            "color": question.color,
            "parent_id": question.parent_question_id,
        })

    total = sum(node["size"] for node in nodes)
    logger.debug(f"Treemap ({metric}) kept {len(nodes)} of {len(questions)} questions")
    return {"nodes": nodes, "total": total}
