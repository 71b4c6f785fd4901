"""Data models and structures."""

from .records import Transcript, Coding, Question, Case, CodingDataset
from .analysis import AnalysisType, AnalysisRequest, QueryCondition, QueryOperator

__all__ = [
    "Transcript",
    "Coding",
    "Question",
    "Case",
    "CodingDataset",
    "AnalysisType",
    "AnalysisRequest",
    "QueryCondition",
    "QueryOperator",
]
