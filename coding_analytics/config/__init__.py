"""Configuration management for coding analytics."""

from .settings import Settings
from . import constants, lexicon

__all__ = ["Settings", "constants", "lexicon"]
