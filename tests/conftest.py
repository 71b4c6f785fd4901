"""
Shared fixtures: a small interview corpus with three transcripts, three
questions, six codings and two cases.
"""

import pytest

from coding_analytics.models.records import Case, Coding, CodingDataset, Question, Transcript


@pytest.fixture
def transcripts():
    return [
        Transcript(
            id="t1",
            title="Interview A",
            content="The program was really good and helped many people. It was a great success for our community.",
        ),
        Transcript(
            id="t2",
            title="Interview B",
            content="There were some problems with funding. The situation was bad and people were frustrated.",
        ),
        Transcript(
            id="t3",
            title="Interview C",
            content="Overall the experience was positive. We saw improvement in several areas over time.",
            case_id="case1",
        ),
    ]


@pytest.fixture
def questions():
    return [
        Question(id="q1", text="Impact", color="#FF0000"),
        Question(id="q2", text="Challenges", color="#0000FF"),
        Question(id="q3", text="Outcomes", color="#00FF00"),
    ]


@pytest.fixture
def codings():
    return [
        Coding("c1", "t1", "q1", 0, 45, "The program was really good and helped many"),
        Coding("c2", "t1", "q3", 20, 45, "good and helped many"),
        Coding("c3", "t2", "q2", 0, 40, "There were some problems with funding"),
        Coding("c4", "t2", "q2", 42, 85, "The situation was bad and people were frustrated"),
        Coding("c5", "t3", "q1", 0, 40, "Overall the experience was positive"),
        Coding("c6", "t3", "q3", 40, 82, "We saw improvement in several areas over time"),
    ]


@pytest.fixture
def cases():
    return [
        Case(id="case1", name="Case Alpha", attributes={"site": "North", "cohort": "2023"}),
        Case(id="case2", name="Case Beta"),
    ]


@pytest.fixture
def dataset(transcripts, questions, codings, cases):
    return CodingDataset(transcripts=transcripts, questions=questions, codings=codings, cases=cases)


@pytest.fixture
def project_payload():
    """The same corpus as a host would export it, with camelCase keys."""
    return {
        "transcripts": [
            {"id": "t1", "title": "Interview A", "content": "Good support and good staff.", "caseId": "case1"},
            {"id": "t2", "title": "Interview B", "content": "Funding was a problem.", "caseId": None},
        ],
        "questions": [
            {"id": "q1", "text": "Support", "color": "#111111"},
            {"id": "q2", "text": "Funding", "color": "#222222", "parentQuestionId": "q1"},
        ],
        "codings": [
            {"id": "c1", "transcriptId": "t1", "questionId": "q1", "startOffset": 0, "endOffset": 12,
             "codedText": "Good support"},
            {"id": "c2", "transcriptId": "t2", "questionId": "q2", "startOffset": 0, "endOffset": 22,
             "codedText": "Funding was a problem."},
        ],
        "cases": [
            {"id": "case1", "name": "Site North", "attributes": {"region": "north"}},
        ],
    }
