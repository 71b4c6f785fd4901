"""Utility functions and helpers."""

from .text import tokenize, split_words, overlap_length
from .similarity import build_tfidf, similarity_matrix
from .validators import validate_input_file, validate_offsets

__all__ = [
    "tokenize",
    "split_words",
    "overlap_length",
    "build_tfidf",
    "similarity_matrix",
    "validate_input_file",
    "validate_offsets",
]
