"""
Tests for lexicon sentiment scoring.
"""

import pytest

from coding_analytics.core.sentiment import classify_score, compute_sentiment, score_sentiment
from coding_analytics.models.records import Coding


class TestScoreSentiment:
    def test_positive_text(self):
        result = score_sentiment("good")
        assert result == {"score": 3.0, "magnitude": 3.0}

    def test_negation_flips_sign(self):
        assert score_sentiment("not good")["score"] == pytest.approx(-1.5)
        assert score_sentiment("not good")["magnitude"] == 3.0

    def test_contracted_negation(self):
        assert score_sentiment("It isn't good")["score"] < 0

    def test_negation_only_affects_next_word(self):
        assert score_sentiment("not the good")["score"] > 0

    def test_score_is_normalized_by_word_count(self):
        assert score_sentiment("The program was really good and helped many")["score"] == pytest.approx(3 / 8)

    def test_no_lexicon_words(self):
        assert score_sentiment("funding arrived on tuesday") == {"score": 0.0, "magnitude": 0.0}

    def test_empty_text(self):
        assert score_sentiment("") == {"score": 0.0, "magnitude": 0.0}
        assert score_sentiment("!!! ...") == {"score": 0.0, "magnitude": 0.0}


class TestClassifyScore:
    @pytest.mark.parametrize("score,label", [
        (0.5, "positive"),
        (0.06, "positive"),
        (0.05, "neutral"),
        (0.0, "neutral"),
        (-0.05, "neutral"),
        (-0.06, "negative"),
    ])
    def test_thresholds(self, score, label):
        assert classify_score(score) == label


class TestComputeSentiment:
    def test_overall_counts(self, codings, transcripts, questions):
        overall = compute_sentiment(codings, transcripts, questions)["overall"]
        assert overall["positive"] == 4
        assert overall["negative"] == 1
        assert overall["neutral"] == 1
        assert overall["positive"] + overall["negative"] + overall["neutral"] == len(codings)

    def test_average_score(self, codings, transcripts, questions):
        expected = (3 / 8 + 3 / 4 + 0 - 6 / 8 + 2 / 5 + 2 / 8) / 6
        overall = compute_sentiment(codings, transcripts, questions)["overall"]
        assert overall["average_score"] == pytest.approx(expected)

    def test_items_grouped_by_question(self, codings, transcripts, questions):
        items = compute_sentiment(codings, transcripts, questions)["items"]
        assert {item["id"] for item in items} == {"q1", "q2", "q3"}
        assert items[-1]["id"] == "q2"
        assert items[-1]["label"] == "Challenges"

    def test_items_sorted_by_score(self, codings, transcripts, questions):
        scores = [item["score"] for item in compute_sentiment(codings, transcripts, questions)["items"]]
        assert scores == sorted(scores, reverse=True)

    def test_transcript_scope(self, codings, transcripts, questions):
        result = compute_sentiment(codings, transcripts, questions, "transcript", "t2")
        assert len(result["items"]) == 1
        item = result["items"][0]
        assert item["id"] == "t2"
        assert item["label"] == "Interview B"
        assert item["score"] < 0

    def test_question_scope(self, codings, transcripts, questions):
        result = compute_sentiment(codings, transcripts, questions, "question", "q1")
        assert [item["id"] for item in result["items"]] == ["q1"]
        assert result["overall"]["positive"] == 2

    def test_sample_text_is_truncated(self, transcripts, questions):
        long_text = "good " * 40
        result = compute_sentiment([Coding("c", "t1", "q1", 0, 1, long_text)], transcripts, questions)
        assert result["items"][0]["sample_text"] == long_text[:80]

    def test_unknown_group_falls_back_to_id(self, transcripts, questions):
        result = compute_sentiment([Coding("c", "t1", "q9", 0, 1, "good")], transcripts, questions)
        assert result["items"][0]["label"] == "q9"

    def test_empty(self, transcripts, questions):
        result = compute_sentiment([], transcripts, questions)
        assert result["overall"] == {"positive": 0, "negative": 0, "neutral": 0, "average_score": 0.0}
        assert result["items"] == []

    def test_strongly_negative_text(self, transcripts, questions):
        codings = [Coding("c", "t1", "q1", 0, 1, "terrible horrible awful bad")]
        assert compute_sentiment(codings, transcripts, questions)["overall"]["average_score"] < 0

    def test_negated_negative_text(self, transcripts, questions):
        codings = [Coding("c", "t1", "q1", 0, 1, "not bad actually")]
        overall = compute_sentiment(codings, transcripts, questions)["overall"]
        assert overall["average_score"] > 0
        assert overall["positive"] == 1
