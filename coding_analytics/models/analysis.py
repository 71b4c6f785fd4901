"""Analysis request models used at the host boundary."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import uuid


class AnalysisType(str, Enum):
    """The ten analyses, keyed by the host's node type tags."""

    SEARCH = "search"
    COOCCURRENCE = "cooccurrence"
    MATRIX = "matrix"
    STATS = "stats"
    COMPARISON = "comparison"
    WORD_FREQUENCY = "wordcloud"
    CLUSTER = "cluster"
    CODING_QUERY = "codingquery"
    SENTIMENT = "sentiment"
    TREEMAP = "treemap"

    @classmethod
    def parse(cls, tag: str) -> "AnalysisType":
        """Resolve a type tag, raising ValueError for unknown tags."""
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown analysis type: {tag!r}. Expected one of: {valid}") from None


class QueryOperator(str, Enum):
    """Boolean operators for coding query conditions."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


@dataclass(frozen=True)
class QueryCondition:
    """One condition of a coding query."""

    question_id: str
    operator: QueryOperator = QueryOperator.AND

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QueryCondition":
        if not isinstance(data, dict):
            raise ValueError(f"Query condition must be a mapping, got {data!r}")

        question_id = data.get("questionId", data.get("question_id"))
        if not question_id:
            raise ValueError(f"Query condition is missing a question id: {data}")

        operator = str(data.get("operator", "AND")).upper()
        try:
            return cls(question_id=str(question_id), operator=QueryOperator(operator))
        except ValueError:
            raise ValueError(f"Unknown query operator: {operator!r}") from None


@dataclass
class AnalysisRequest:
    """A single analysis to run over a dataset snapshot."""

    analysis_type: AnalysisType
    config: Dict[str, Any] = field(default_factory=dict)
    name: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisRequest":
        """Parse a host request such as ``{"nodeType": "stats", "config": {...}}``."""
        tag = data.get("nodeType", data.get("type", data.get("analysis_type")))
        if tag is None:
            raise ValueError(f"Analysis request has no type: {data}")

        config = data.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Analysis config must be a mapping, got {type(config).__name__}")

        analysis_type = AnalysisType.parse(tag)
        name = data.get("name") or data.get("label") or analysis_type.value
        return cls(analysis_type=analysis_type, config=dict(config), name=str(name))

    def get(self, *keys: str, default: Any = None) -> Any:
        """Read a config value under any of its accepted spellings."""
        for key in keys:
            value = self.config.get(key)
            if value is not None:
                return value
        return default

    def get_list(self, *keys: str) -> Optional[List[str]]:
        """Read a string list; absent or empty lists mean no filter.

        A bare string counts as a one-item list.
        """
        value = self.get(*keys)
        if not value:
            return None
        if isinstance(value, str):
            return [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"Config value {keys[0]!r} must be a list, got {value!r}")
        return [str(v) for v in value]

    def get_mappings(self, *keys: str) -> List[Dict[str, Any]]:
        """Read a list of mappings such as query conditions."""
        value = self.get(*keys, default=[])
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"Config value {keys[0]!r} must be a list, got {value!r}")
        return list(value)

    def get_int(self, *keys: str, default: Optional[int] = None) -> Optional[int]:
        """Read an integer config value, rejecting non-integers."""
        value = self.get(*keys)
        if value is None:
            return default
        if isinstance(value, bool):
            raise ValueError(f"Config value {keys[0]!r} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Config value {keys[0]!r} must be an integer, got {value!r}") from None
