"""Coding Analytics

Derived analytical views over qualitative-research coding data: search,
co-occurrence, framework matrices, statistics, comparison, word frequency,
clustering, boolean coding queries, sentiment and treemaps.
"""

__version__ = "1.0.0"
__author__ = "Qualitative Analysis Team"

from .core import (
    CodingAnalyzer,
    build_framework_matrix,
    compute_clusters,
    compute_coding_query,
    compute_comparison,
    compute_cooccurrence,
    compute_sentiment,
    compute_stats,
    compute_treemap,
    compute_word_frequency,
    search_transcripts,
)
from .models import AnalysisRequest, AnalysisType, Case, Coding, CodingDataset, Question, Transcript

__all__ = [
    "CodingAnalyzer",
    "search_transcripts",
    "compute_cooccurrence",
    "build_framework_matrix",
    "compute_stats",
    "compute_comparison",
    "compute_word_frequency",
    "compute_clusters",
    "compute_coding_query",
    "compute_sentiment",
    "compute_treemap",
    "AnalysisRequest",
    "AnalysisType",
    "Case",
    "Coding",
    "CodingDataset",
    "Question",
    "Transcript",
]
