"""Core analyses over coding data."""

from .search import search_transcripts, propose_codings
from .overlap import compute_cooccurrence, compute_coding_query
from .aggregation import build_framework_matrix, compute_stats, compute_comparison, compute_treemap
from .word_frequency import compute_word_frequency
from .clustering import compute_clusters, cosine_kmeans
from .sentiment import compute_sentiment, score_sentiment
from .analyzer import CodingAnalyzer

__all__ = [
    "search_transcripts",
    "propose_codings",
    "compute_cooccurrence",
    "compute_coding_query",
    "build_framework_matrix",
    "compute_stats",
    "compute_comparison",
    "compute_treemap",
    "compute_word_frequency",
    "compute_clusters",
    "cosine_kmeans",
    "compute_sentiment",
    "score_sentiment",
    "CodingAnalyzer",
]
