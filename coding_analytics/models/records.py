"""Record types for the coding data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config.constants import MAX_HIERARCHY_DEPTH


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key, accepting camelCase and snake_case spellings."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _optional_id(data: Dict[str, Any], *keys: str) -> Optional[str]:
    """Read an optional reference id as a string; blanks become None."""
    value = _pick(data, *keys)
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class Transcript:
    """A source document; coding offsets index into ``content``."""

    id: str
    title: str
    content: str = ""
    case_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transcript":
        return cls(
            id=str(data["id"]),
            title=str(_pick(data, "title", default="")),
            content=str(_pick(data, "content", default="")),
            case_id=_optional_id(data, "caseId", "case_id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "case_id": self.case_id,
        }


@dataclass(frozen=True)
class Coding:
    """A half-open ``[start_offset, end_offset)`` span tagged with one question."""

    id: str
    transcript_id: str
    question_id: str
    start_offset: int
    end_offset: int
    coded_text: str = ""

    @property
    def length(self) -> int:
        return self.end_offset - self.start_offset

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coding":
        return cls(
            id=str(data["id"]),
            transcript_id=str(_pick(data, "transcriptId", "transcript_id")),
            question_id=str(_pick(data, "questionId", "question_id")),
            start_offset=int(_pick(data, "startOffset", "start_offset", default=0)),
            end_offset=int(_pick(data, "endOffset", "end_offset", default=0)),
            coded_text=str(_pick(data, "codedText", "coded_text", default="")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "transcript_id": self.transcript_id,
            "question_id": self.question_id,
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "coded_text": self.coded_text,
        }


@dataclass(frozen=True)
class Question:
    """A thematic label; parent links form a forest by convention only."""

    id: str
    text: str
    color: str = ""
    parent_question_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        return cls(
            id=str(data["id"]),
            text=str(_pick(data, "text", default="")),
            color=str(_pick(data, "color", default="")),
            parent_question_id=_optional_id(data, "parentQuestionId", "parent_question_id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "color": self.color,
            "parent_question_id": self.parent_question_id,
        }


@dataclass(frozen=True)
class Case:
    """A grouping of transcripts with an ordered attribute mapping."""

    id: str
    name: str
    attributes: Dict[str, str] = field(default_factory=dict, hash=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Case":
        attributes = _pick(data, "attributes", default={}) or {}
        return cls(
            id=str(data["id"]),
            name=str(_pick(data, "name", default="")),
            attributes={str(k): str(v) for k, v in attributes.items()},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "attributes": dict(self.attributes),
        }


@dataclass
class CodingDataset:
    """One read-only snapshot of the four collections."""

    transcripts: List[Transcript] = field(default_factory=list)
    questions: List[Question] = field(default_factory=list)
    codings: List[Coding] = field(default_factory=list)
    cases: List[Case] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodingDataset":
        """Build a dataset from a host payload with the four collection lists."""
        return cls(
            transcripts=[Transcript.from_dict(t) for t in data.get("transcripts") or []],
            questions=[Question.from_dict(q) for q in data.get("questions") or []],
            codings=[Coding.from_dict(c) for c in data.get("codings") or []],
            cases=[Case.from_dict(c) for c in data.get("cases") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transcripts": [t.to_dict() for t in self.transcripts],
            "questions": [q.to_dict() for q in self.questions],
            "codings": [c.to_dict() for c in self.codings],
            "cases": [c.to_dict() for c in self.cases],
        }

    def question_parents(self) -> Dict[str, Optional[str]]:
        """Get the question id -> parent question id index."""
        return {q.id: q.parent_question_id for q in self.questions}

    def question_depth(self, question_id: str, max_depth: int = MAX_HIERARCHY_DEPTH) -> int:
        """Count ancestors of a question, stopping at ``max_depth``.

        Unknown parents end the walk, and a cycle simply runs into the
        depth bound.
        """
        parents = self.question_parents()
        depth = 0
        current = parents.get(question_id)
        while current is not None and current in parents and depth < max_depth:
            depth += 1
            current = parents[current]
        return depth

    def get_summary(self) -> Dict[str, int]:
        """Get collection sizes for logging and reports."""
        return {
            "transcripts": len(self.transcripts),
            "questions": len(self.questions),
            "codings": len(self.codings),
            "cases": len(self.cases),
        }
