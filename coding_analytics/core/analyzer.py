"""Analyzer mapping analysis requests onto the ten analysis functions."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from ..config.settings import Settings
from ..models.analysis import AnalysisRequest, AnalysisType, QueryCondition
from ..models.records import CodingDataset
from ..services.data_loader import DataLoader
from .aggregation import build_framework_matrix, compute_comparison, compute_stats, compute_treemap
from .clustering import compute_clusters
from .overlap import compute_cooccurrence, compute_coding_query
from .search import search_transcripts
from .sentiment import compute_sentiment
from .word_frequency import compute_word_frequency

logger = logging.getLogger(__name__)


class CodingAnalyzer:
    """Runs analyses over one snapshot of transcripts, questions, codings and cases."""

    def __init__(self, dataset: CodingDataset, settings: Optional[Settings] = None):
        """Initialize the analyzer with a dataset snapshot."""
        self.dataset = dataset
        self.settings = settings or Settings()
        self.settings.validate()

        # Run statistics
        self.total_runs = 0
        self.failed_runs = 0

        logger.info(f"CodingAnalyzer initialized with {self.dataset.get_summary()}")

    @classmethod
    def from_file(
        cls,
        path: str,
        settings: Optional[Settings] = None
    ) -> "CodingAnalyzer":
        """Create an analyzer from a project file or directory."""
        settings = settings or Settings()
        dataset = DataLoader(settings=settings).load_dataset(path)
        return cls(dataset, settings)

    def run(self, request: AnalysisRequest) -> Dict[str, Any]:
        """
        Run a single analysis request.

        Args:
            request: Parsed request with analysis type and config

        Returns:
            Plain result structure of the selected analysis

        Raises:
            ValueError: If the request config cannot be interpreted
        """
        data = self.dataset
        kind = request.analysis_type
        logger.info(f"Running {kind.value} analysis '{request.name}'")

        if kind is AnalysisType.SEARCH:
            result = search_transcripts(
                data.transcripts,
                str(request.get("pattern", default="")),
                request.get("mode", default="keyword"),
                request.get_list("transcriptIds", "transcript_ids"),
            )
        elif kind is AnalysisType.COOCCURRENCE:
            result = compute_cooccurrence(
                data.codings,
                request.get_list("questionIds", "question_ids") or [],
                request.get_int("minOverlap", "min_overlap"),
            )
        elif kind is AnalysisType.MATRIX:
            result = build_framework_matrix(
                data.transcripts,
                data.questions,
                data.codings,
                data.cases,
                request.get_list("questionIds", "question_ids"),
                request.get_list("caseIds", "case_ids"),
            )
        elif kind is AnalysisType.STATS:
            result = compute_stats(
                data.codings,
                data.questions,
                data.transcripts,
                request.get("groupBy", "group_by", default="question"),
                request.get_list("questionIds", "question_ids"),
            )
        elif kind is AnalysisType.COMPARISON:
            result = compute_comparison(
                data.codings,
                data.transcripts,
                data.questions,
                request.get_list("transcriptIds", "transcript_ids") or [],
                request.get_list("questionIds", "question_ids"),
            )
        elif kind is AnalysisType.WORD_FREQUENCY:
            result = compute_word_frequency(
                data.codings,
                request.get("questionId", "question_id"),
                request.get_int("maxWords", "max_words"),
                request.get_list("stopWords", "stop_words"),
            )
        elif kind is AnalysisType.CLUSTER:
            result = compute_clusters(
                data.codings,
                request.get_int("k", default=self.settings.default_cluster_count),
                request.get_list("questionIds", "question_ids"),
                seed=request.get_int("seed", default=self.settings.cluster_seed),
            )
        elif kind is AnalysisType.CODING_QUERY:
            conditions = [QueryCondition.from_dict(c) for c in request.get_mappings("conditions")]
            result = compute_coding_query(data.codings, data.transcripts, conditions)
        elif kind is AnalysisType.SENTIMENT:
            result = compute_sentiment(
                data.codings,
                data.transcripts,
                data.questions,
                request.get("scope", default="all"),
                request.get("scopeId", "scope_id"),
            )
        elif kind is AnalysisType.TREEMAP:
            result = compute_treemap(
                data.codings,
                data.questions,
                request.get("metric", default="count"),
                request.get_list("questionIds", "question_ids"),
            )
        else:
            raise ValueError(f"Unhandled analysis type: {kind}")

        self.total_runs += 1
        return result

    def run_dict(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Parse a host request dict and run it."""
        return self.run(AnalysisRequest.from_dict(payload))

    def run_many(self, requests: Sequence[AnalysisRequest]) -> Dict[str, Dict[str, Any]]:
        """
        Run several requests over the same snapshot.

        A request that fails is logged and reported as ``{"error": ...}``
        under its name; the remaining requests still run.
        """
        results: Dict[str, Dict[str, Any]] = {}
        progress = tqdm(requests, desc="Analyses", disable=not self.settings.show_progress)

        for request in progress:
            try:
                results[request.name] = self.run(request)
            except ValueError as e:
                logger.error(f"Analysis '{request.name}' failed: {str(e)}")
                self.failed_runs += 1
                results[request.name] = {"error": str(e)}

        return results

    def get_run_statistics(self) -> Dict[str, Any]:
        """Get statistics about analyses run so far."""
        attempted = self.total_runs + self.failed_runs
        return {
            "total_runs": self.total_runs,
            "failed_runs": self.failed_runs,
            "success_rate": self.total_runs / attempted if attempted > 0 else 0,
            "dataset": self.dataset.get_summary(),
        }

    def list_analyses(self) -> List[str]:
        """Get the accepted analysis type tags."""
        return [t.value for t in AnalysisType]
