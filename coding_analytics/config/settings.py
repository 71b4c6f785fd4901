"""Configuration management for the coding analytics host layer."""

import os
import logging
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Settings for loading data, running analyses and writing reports.

    The analysis functions themselves take no configuration beyond their
    per-call parameters; these settings only shape the CLI and the
    analyzer that feeds them.
    """

    # Data loading
    data_encoding: str = "utf-8"
    encoding_fallbacks: list = None

    # Analysis defaults applied by the analyzer
    default_cluster_count: int = 3
    cluster_seed: Optional[int] = None

    # Output
    output_dir: str = "output"
    export_excel: bool = True
    show_progress: bool = True

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        """Initialize derived settings after object creation."""
        if self.encoding_fallbacks is None:
            self.encoding_fallbacks = [self.data_encoding, 'utf-8', 'latin-1', 'cp1252']

    @classmethod
    def from_env(cls, env_file: str = None) -> "Settings":
        """Create settings from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        seed = os.getenv("CLUSTER_SEED", "")
        logger.debug(f"CLUSTER_SEED from env: {seed or 'NOT_SET'}")

        return cls(
            data_encoding=os.getenv("DATA_ENCODING", "utf-8"),
            default_cluster_count=int(os.getenv("DEFAULT_CLUSTER_COUNT", "3")),
            cluster_seed=int(seed) if seed else None,
            output_dir=os.getenv("OUTPUT_DIR", "output"),
            export_excel=os.getenv("EXPORT_EXCEL", "true").lower() == "true",
            show_progress=os.getenv("SHOW_PROGRESS", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """Validate configuration settings."""
        if self.default_cluster_count < 1:
            raise ValueError("DEFAULT_CLUSTER_COUNT must be at least 1")

        if not self.output_dir:
            raise ValueError("OUTPUT_DIR is required")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Unsupported LOG_LEVEL: {self.log_level}")
