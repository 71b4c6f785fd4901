"""Simple validation utilities."""

import os
import pandas as pd
from typing import Any, Dict, List, Tuple
from pathlib import Path


# Columns each collection table must provide
COLLECTION_COLUMNS: Dict[str, List[str]] = {
    "transcripts": ["id", "title", "content"],
    "questions": ["id", "text"],
    "codings": ["id", "transcriptId", "questionId", "startOffset", "endOffset", "codedText"],
    "cases": ["id", "name"],
}


def validate_input_file(file_path: str, required_columns: List[str]) -> Tuple[bool, str]:
    """
    Validate input file exists and has required columns.

    Args:
        file_path: Path to the input file
        required_columns: List of required column names

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not os.path.exists(file_path):
        return False, f"Input file not found: {file_path}"

    file_ext = Path(file_path).suffix.lower()
    if file_ext not in ['.xlsx', '.xls', '.csv', '.tsv']:
        return False, f"Unsupported file format: {file_ext}. Use .xlsx, .xls, .csv or .tsv"

    try:
        # Read the header only
        if file_ext == '.csv':
            df = pd.read_csv(file_path, nrows=1)
        elif file_ext == '.tsv':
            df = pd.read_csv(file_path, sep='\t', nrows=1)
        else:
            df = pd.read_excel(file_path, nrows=1)

        missing_columns = [col for col in required_columns if col not in df.columns]
        if missing_columns:
            available_cols = list(df.columns)
            return False, (f"Missing required columns: {missing_columns}. "
                           f"Available columns: {available_cols}")

        return True, "File validation successful"

    except Exception as e:
        return False, f"Error reading file: {str(e)}"


def validate_offsets(coding: Any, content_length: int) -> List[str]:
    """Check that a coding's offsets fit inside its transcript."""
    errors = []

    if coding.start_offset < 0:
        errors.append(f"Coding {coding.id}: start offset {coding.start_offset} is negative")

    if coding.end_offset < coding.start_offset:
        errors.append(f"Coding {coding.id}: end offset precedes start offset")

    if coding.end_offset > content_length:
        errors.append(f"Coding {coding.id}: end offset {coding.end_offset} exceeds transcript length {content_length}")

    return errors
