"""Report generation for analysis results."""

import os
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
import pandas as pd
import json

from ..models.analysis import AnalysisType
from ..models.records import CodingDataset

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Writes analysis results as JSON and, for tabular results, as Excel sheets."""

    def __init__(self, output_dir: str = "output"):
        """Initialize report generator."""
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def generate_report(
        self,
        results: Dict[str, Dict[str, Any]],
        analysis_types: Dict[str, AnalysisType],
        dataset: Optional[CodingDataset] = None,
        export_excel: bool = True
    ) -> Dict[str, str]:
        """
        Write results to the output directory.

        Args:
            results: Result per request name
            analysis_types: Analysis type per request name, used to pick table layouts
            dataset: Snapshot the results were computed from, for the summary
            export_excel: Also write an Excel workbook with one sheet per result

        Returns:
            Dictionary mapping format to file path
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        report_files = {}

        json_path = os.path.join(self.output_dir, f"analysis_results_{timestamp}.json")
        self._write_json(results, dataset, json_path)
        report_files["json"] = json_path

        if export_excel:
            excel_path = os.path.join(self.output_dir, f"analysis_results_{timestamp}.xlsx")
            if self._write_excel(results, analysis_types, dataset, excel_path):
                report_files["excel"] = excel_path

        logger.info(f"Generated report files: {list(report_files.keys())}")
        return report_files

    def _write_json(
        self,
        results: Dict[str, Dict[str, Any]],
        dataset: Optional[CodingDataset],
        file_path: str
    ) -> None:
        """Write all results plus a dataset summary as one JSON document."""
        document = {
            "dataset": dataset.get_summary() if dataset else {},
            "results": results,
            "generated_timestamp": datetime.now().isoformat(),
        }
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)

        logger.info(f"JSON results saved to: {file_path}")

    def _write_excel(
        self,
        results: Dict[str, Dict[str, Any]],
        analysis_types: Dict[str, AnalysisType],
        dataset: Optional[CodingDataset],
        file_path: str
    ) -> bool:
        """Write one sheet per tabular result. Returns False when nothing was tabular."""
        frames = {}
        for name, result in results.items():
            kind = analysis_types.get(name)
            if kind is None or "error" in result:
                continue
            df = self.result_to_frame(kind, result, dataset)
            if df is not None:
                frames[self._sheet_name(name, frames)] = df

        if not frames:
            logger.info("No tabular results to export to Excel")
            return False

        with pd.ExcelWriter(file_path, engine='openpyxl') as writer:
            for sheet_name, df in frames.items():
                df.to_excel(writer, sheet_name=sheet_name, index=False)

        logger.info(f"Excel report saved to: {file_path}")
        return True

    @staticmethod
    def result_to_frame(
        kind: AnalysisType,
        result: Dict[str, Any],
        dataset: Optional[CodingDataset] = None
    ) -> Optional[pd.DataFrame]:
        """Flatten a result into a table, or None for results without a table form."""
        if kind is AnalysisType.SEARCH:
            return pd.DataFrame(result["matches"], columns=[
                "transcript_id", "transcript_title", "offset", "match_text", "context"])

        if kind is AnalysisType.COOCCURRENCE:
            rows = [
                {"question_a": p["question_ids"][0], "question_b": p["question_ids"][1], **segment}
                for p in result["pairs"] for segment in p["segments"]
            ]
            return pd.DataFrame(rows, columns=[
                "question_a", "question_b", "transcript_id", "text", "start_offset", "end_offset"])

        if kind is AnalysisType.MATRIX:
            rows = []
            for row in result["rows"]:
                line = {"case_id": row["case_id"], "case_name": row["case_name"]}
                line.update({cell["question_id"]: cell["count"] for cell in row["cells"]})
                rows.append(line)
            return pd.DataFrame(rows)

        if kind is AnalysisType.STATS:
            return pd.DataFrame(result["items"], columns=["id", "label", "count", "percentage", "coverage"])

        if kind is AnalysisType.COMPARISON:
            rows = [
                {"transcript_id": t["id"], "title": t["title"], **entry}
                for t in result["transcripts"] for entry in t["profile"]
            ]
            return pd.DataFrame(rows, columns=["transcript_id", "title", "question_id", "count", "coverage"])

        if kind is AnalysisType.WORD_FREQUENCY:
            return pd.DataFrame(result["words"], columns=["text", "count"])

        if kind is AnalysisType.CLUSTER:
            rows = [
                {
                    "cluster": c["label"],
                    "keywords": ", ".join(c["keywords"]),
                    "coding_id": s["coding_id"],
                    "text": s["text"],
                }
                for c in result["clusters"] for s in c["segments"]
            ]
            return pd.DataFrame(rows, columns=["cluster", "keywords", "coding_id", "text"])

        if kind is AnalysisType.CODING_QUERY:
            return pd.DataFrame(result["matches"], columns=[
                "transcript_id", "transcript_title", "text", "start_offset", "end_offset"])

        if kind is AnalysisType.SENTIMENT:
            return pd.DataFrame(result["items"], columns=["id", "label", "score", "magnitude", "sample_text"])

        if kind is AnalysisType.TREEMAP:
            df = pd.DataFrame(result["nodes"], columns=["id", "name", "size", "color", "parent_id"])
            if dataset is not None:
                df["depth"] = [dataset.question_depth(qid) for qid in df["id"]]
            return df

        return None

    @staticmethod
    def _sheet_name(name: str, taken: Dict[str, Any]) -> str:
        """Excel sheet names are limited to 31 characters and must be unique."""
        base = "".join(ch for ch in name if ch not in '[]:*?/\\')[:31] or "result"
        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base[:28]}_{suffix}"
            suffix += 1
        return candidate

    @staticmethod
    def summarize(results: Dict[str, Dict[str, Any]]) -> List[str]:
        """One-line summaries of results for console output."""
        lines = []
        for name, result in results.items():
            if "error" in result:
                lines.append(f"{name}: failed ({result['error']})")
                continue
            sizes = [f"{len(v)} {k}" for k, v in result.items() if isinstance(v, list)]
            lines.append(f"{name}: {', '.join(sizes) if sizes else 'done'}")
        return lines
