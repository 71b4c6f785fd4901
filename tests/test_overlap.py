"""
Tests for co-occurrence and boolean coding queries.
"""

from coding_analytics.core.overlap import compute_coding_query, compute_cooccurrence
from coding_analytics.models.analysis import QueryCondition, QueryOperator
from coding_analytics.models.records import Coding, Transcript


def conditions(*pairs):
    return [QueryCondition(question_id=q, operator=QueryOperator(op)) for q, op in pairs]


class TestCooccurrence:
    def test_finds_overlapping_pair(self, codings):
        result = compute_cooccurrence(codings, ["q1", "q3"])
        assert len(result["pairs"]) == 1
        pair = result["pairs"][0]
        assert pair["question_ids"] == ["q1", "q3"]
        assert pair["count"] == 1
        segment = pair["segments"][0]
        assert segment["transcript_id"] == "t1"
        assert (segment["start_offset"], segment["end_offset"]) == (20, 45)

    def test_segment_text_is_slice_of_first_coding(self, codings):
        segment = compute_cooccurrence(codings, ["q1", "q3"])["pairs"][0]["segments"][0]
        assert segment["text"] == codings[0].coded_text[20:45]

    def test_no_overlap_across_transcripts(self, codings):
        assert compute_cooccurrence(codings, ["q1", "q2"])["pairs"] == []

    def test_touching_codings_do_not_count(self, codings):
        # c5 (0-40) and c6 (40-82) on t3 only touch
        pair = compute_cooccurrence(codings, ["q1", "q3"])["pairs"][0]
        assert all(s["transcript_id"] != "t3" for s in pair["segments"])

    def test_fewer_than_two_questions(self, codings):
        assert compute_cooccurrence(codings, ["q1"])["pairs"] == []
        assert compute_cooccurrence(codings, [])["pairs"] == []

    def test_min_overlap_threshold(self, codings):
        # The c1/c2 overlap is 25 characters
        assert len(compute_cooccurrence(codings, ["q1", "q3"], 25)["pairs"]) == 1
        assert compute_cooccurrence(codings, ["q1", "q3"], 26)["pairs"] == []

    def test_raising_min_overlap_never_adds_pairs(self, codings):
        previous = None
        for threshold in (1, 5, 25, 26, 100):
            result = compute_cooccurrence(codings, ["q1", "q2", "q3"], threshold)
            counts = {tuple(p["question_ids"]): p["count"] for p in result["pairs"]}
            if previous is not None:
                assert len(counts) <= len(previous)
                for key, count in counts.items():
                    assert count <= previous[key]
            previous = counts

    def test_deterministic(self, codings):
        assert compute_cooccurrence(codings, ["q1", "q3", "q2"]) == \
            compute_cooccurrence(codings, ["q1", "q3", "q2"])

    def test_all_pairs_of_three_questions(self):
        codings = [
            Coding("a", "t", "q1", 0, 10, "aaaaaaaaaa"),
            Coding("b", "t", "q2", 5, 15, "bbbbbbbbbb"),
            Coding("c", "t", "q3", 8, 20, "cccccccccccc"),
        ]
        result = compute_cooccurrence(codings, ["q1", "q2", "q3"])
        keys = [tuple(p["question_ids"]) for p in result["pairs"]]
        assert keys == [("q1", "q2"), ("q1", "q3"), ("q2", "q3")]

    def test_empty_codings(self):
        assert compute_cooccurrence([], ["q1", "q2"])["pairs"] == []


class TestCodingQuery:
    def test_base_question_only(self, codings, transcripts):
        result = compute_coding_query(codings, transcripts, conditions(("q1", "AND")))
        assert result["total_matches"] == 2
        assert [m["start_offset"] for m in result["matches"]] == [0, 0]
        assert {m["transcript_id"] for m in result["matches"]} == {"t1", "t3"}

    def test_and_requires_overlap(self, codings, transcripts):
        result = compute_coding_query(codings, transcripts, conditions(("q1", "AND"), ("q3", "AND")))
        assert len(result["matches"]) == 1
        assert result["matches"][0]["transcript_id"] == "t1"
        assert result["matches"][0]["transcript_title"] == "Interview A"

    def test_not_excludes_overlap(self, codings, transcripts):
        result = compute_coding_query(codings, transcripts, conditions(("q1", "AND"), ("q3", "NOT")))
        q3_codings = [c for c in codings if c.question_id == "q3"]
        for match in result["matches"]:
            for other in q3_codings:
                if other.transcript_id != match["transcript_id"]:
                    continue
                overlap = min(match["end_offset"], other.end_offset) - max(match["start_offset"], other.start_offset)
                assert overlap <= 0
        assert [m["transcript_id"] for m in result["matches"]] == ["t3"]

    def test_or_expands_result(self, codings, transcripts):
        base = compute_coding_query(codings, transcripts, conditions(("q1", "AND")))
        expanded = compute_coding_query(codings, transcripts, conditions(("q1", "AND"), ("q2", "OR")))
        assert expanded["total_matches"] >= base["total_matches"]
        assert expanded["total_matches"] == 4

    def test_or_does_not_duplicate_same_span(self, transcripts):
        codings = [
            Coding("a", "t1", "q1", 0, 10, "same span!"),
            Coding("b", "t1", "q2", 0, 10, "same span!"),
            Coding("c", "t1", "q2", 20, 30, "other span"),
        ]
        result = compute_coding_query(codings, transcripts, conditions(("q1", "AND"), ("q2", "OR")))
        assert [m["start_offset"] for m in result["matches"]] == [0, 20]

    def test_or_does_not_filter_base(self, codings, transcripts):
        result = compute_coding_query(codings, transcripts, conditions(("q1", "AND"), ("q2", "OR")))
        base_offsets = {(m["transcript_id"], m["start_offset"]) for m in result["matches"]}
        assert ("t1", 0) in base_offsets and ("t3", 0) in base_offsets

    def test_no_conditions(self, codings, transcripts):
        assert compute_coding_query(codings, transcripts, []) == {"matches": [], "total_matches": 0}

    def test_unknown_transcripts_are_skipped(self, codings):
        only_t3 = [Transcript(id="t3", title="Interview C", content="")]
        result = compute_coding_query(codings, only_t3, conditions(("q1", "AND")))
        assert [m["transcript_id"] for m in result["matches"]] == ["t3"]

    def test_caps_returned_matches(self):
        many = [Coding(f"c{i}", "t", "q1", i * 10, i * 10 + 5, "text") for i in range(150)]
        docs = [Transcript(id="t", title="T", content="x" * 2000)]
        result = compute_coding_query(many, docs, conditions(("q1", "AND")))
        assert len(result["matches"]) == 100
        assert result["total_matches"] == 150
