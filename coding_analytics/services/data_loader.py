"""Loading of coding project data from JSON, CSV and Excel sources."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ..models.records import CodingDataset
from ..utils.validators import COLLECTION_COLUMNS, validate_input_file, validate_offsets

logger = logging.getLogger(__name__)


class DataLoader:
    """Loads the four collections of a coding project into a CodingDataset."""

    def __init__(self, settings=None):
        """Initialize data loader with settings."""
        self.settings = settings
        self.encoding = settings.data_encoding if settings else 'utf-8'
        self.table_formats = ['.csv', '.tsv', '.xlsx', '.xls']

    def load_dataset(self, path: str) -> CodingDataset:
        """
        Load a project from a JSON file, an Excel workbook or a directory of tables.

        Args:
            path: A ``.json`` file holding the four collection lists, a
                workbook with one sheet per collection, or a directory with
                ``transcripts``, ``questions``, ``codings`` and ``cases``
                tables (CSV, TSV or Excel)

        Returns:
            CodingDataset snapshot
        """
        path_obj = Path(path)
        if not path_obj.exists():
            raise ValueError(f"Input path not found: {path}")

        try:
            if path_obj.is_dir():
                payload = self._load_directory(path_obj)
            elif path_obj.suffix.lower() == '.json':
                payload = self._load_json(path_obj)
            elif path_obj.suffix.lower() in ['.xlsx', '.xls']:
                payload = self._load_workbook(path_obj)
            else:
                raise ValueError(f"Unsupported input format: {path_obj.suffix}")
        except Exception as e:
            logger.error(f"Failed to load data from {path}: {str(e)}")
            raise

        dataset = CodingDataset.from_dict(payload)
        self._check_offsets(dataset)
        logger.info(f"Loaded {dataset.get_summary()} from {path}")
        return dataset

    def _check_offsets(self, dataset: CodingDataset) -> int:
        """Log codings whose offsets fall outside their transcript; returns the count."""
        lengths = {t.id: len(t.content) for t in dataset.transcripts}
        problems = 0
        for coding in dataset.codings:
            if coding.transcript_id not in lengths:
                logger.warning(f"Coding {coding.id} references unknown transcript {coding.transcript_id}")
                problems += 1
                continue
            for error in validate_offsets(coding, lengths[coding.transcript_id]):
                logger.warning(error)
                problems += 1
        return problems

    def _load_json(self, path: Path) -> Dict[str, Any]:
        """Load a JSON project export."""
        for encoding in self._encodings():
            try:
                with open(path, 'r', encoding=encoding) as f:
                    payload = json.load(f)
                break
            except UnicodeDecodeError:
                continue
        else:
            raise ValueError(f"Unable to read {path} with any of the tried encodings: {self._encodings()}")

        if not isinstance(payload, dict):
            raise ValueError("JSON project must be an object with collection lists")

        # Hosts sometimes wrap exports as {"data": {...}}
        if "data" in payload and isinstance(payload["data"], dict):
            payload = payload["data"]
        return payload

    def _load_directory(self, directory: Path) -> Dict[str, Any]:
        """Load one table per collection from a directory."""
        payload: Dict[str, Any] = {}
        for collection in COLLECTION_COLUMNS:
            table_path = self._find_table(directory, collection)
            if table_path is None:
                if collection == "cases":
                    payload[collection] = []
                    continue
                raise ValueError(f"No {collection} table found in {directory}")

            is_valid, error_msg = validate_input_file(str(table_path), COLLECTION_COLUMNS[collection])
            if not is_valid:
                raise ValueError(f"File validation failed: {error_msg}")

            payload[collection] = self._records(self._load_table(table_path), collection)
        return payload

    def _load_workbook(self, path: Path) -> Dict[str, Any]:
        """Load one sheet per collection from an Excel workbook."""
        sheets = pd.read_excel(path, sheet_name=None, dtype=str, keep_default_na=False)
        payload: Dict[str, Any] = {}
        for collection, required in COLLECTION_COLUMNS.items():
            df = sheets.get(collection)
            if df is None:
                if collection == "cases":
                    payload[collection] = []
                    continue
                raise ValueError(f"Workbook has no '{collection}' sheet")

            missing = [col for col in required if col not in df.columns]
            if missing:
                raise ValueError(f"Sheet '{collection}' is missing required columns: {missing}")
            payload[collection] = self._records(df, collection)

        logger.info(f"Successfully loaded workbook with sheets {list(sheets.keys())}")
        return payload

    def _find_table(self, directory: Path, collection: str) -> Optional[Path]:
        for ext in self.table_formats:
            candidate = directory / f"{collection}{ext}"
            if candidate.exists():
                return candidate
        return None

    def _load_table(self, path: Path) -> pd.DataFrame:
        """Load a CSV, TSV or Excel table with encoding fallbacks."""
        ext = path.suffix.lower()
        if ext in ['.xlsx', '.xls']:
            return pd.read_excel(path, dtype=str, keep_default_na=False)

        sep = '\t' if ext == '.tsv' else ','
        for encoding in self._encodings():
            try:
                df = pd.read_csv(path, sep=sep, encoding=encoding, dtype=str, keep_default_na=False)
                logger.info(f"Successfully loaded {path.name} with {encoding} encoding")
                return df
            except UnicodeDecodeError:
                continue

        raise ValueError(f"Unable to load {path} with any of the tried encodings: {self._encodings()}")

    def _records(self, df: pd.DataFrame, collection: str) -> List[Dict[str, Any]]:
        """Convert a table to record dicts, decoding case attribute JSON."""
        df = df.astype(object).where(pd.notnull(df), None)
        records = df.to_dict(orient="records")

        for record in records:
            for key, value in list(record.items()):
                if isinstance(value, str) and value == "":
                    record[key] = None
            if collection == "cases":
                attributes = record.get("attributes")
                if isinstance(attributes, str):
                    record["attributes"] = json.loads(attributes)
        return records

    def _encodings(self) -> List[str]:
        if self.settings:
            return self.settings.encoding_fallbacks
        return [self.encoding, 'utf-8', 'latin-1', 'cp1252']
