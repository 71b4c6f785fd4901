"""
Tests for TF-IDF clustering of coded segments.
"""

import math

import numpy as np
import pytest

from coding_analytics.core.clustering import compute_clusters, cosine_kmeans
from coding_analytics.models.records import Coding
from coding_analytics.utils.similarity import build_tfidf


@pytest.fixture
def themed_codings():
    texts = [
        "funding budget money grants",
        "budget money funding cuts",
        "money grants budget shortfall",
        "staff training mentoring coaching",
        "training coaching staff workshops",
        "mentoring staff training sessions",
    ]
    return [Coding(f"c{i}", "t1", "q1", i * 10, i * 10 + 5, text) for i, text in enumerate(texts)]


class TestTfidf:
    def test_vocabulary_in_encounter_order(self):
        vectors, terms = build_tfidf([["alpha", "beta"], ["beta", "gamma"]])
        assert terms == ["alpha", "beta", "gamma"]
        assert vectors.shape == (2, 3)

    def test_shared_terms_weigh_less(self):
        vectors, terms = build_tfidf([["alpha", "beta"], ["beta", "gamma"]])
        alpha, beta = terms.index("alpha"), terms.index("beta")
        assert vectors[0, alpha] > vectors[0, beta] > 0
        assert vectors[1, alpha] == 0

    def test_smoothed_idf_weights(self):
        vectors, terms = build_tfidf([["alpha", "beta", "beta"], ["beta", "gamma"], ["gamma"]])
        assert terms == ["alpha", "beta", "gamma"]
        rare = math.log(4 / 2) + 1
        common = math.log(4 / 3) + 1
        expected = [
            [rare / 3, 2 * common / 3, 0.0],
            [0.0, common / 2, common / 2],
            [0.0, 0.0, common],
        ]
        assert np.allclose(vectors, np.array(expected))

    def test_empty_vocabulary(self):
        vectors, terms = build_tfidf([[], []])
        assert terms == []
        assert vectors.shape == (2, 0)


class TestCosineKmeans:
    def test_labels_within_range(self):
        vectors = np.eye(4)
        labels = cosine_kmeans(vectors, 2, seed=1)
        assert len(labels) == 4
        assert set(labels.tolist()) <= {0, 1}

    def test_k_clamped_to_points(self):
        labels = cosine_kmeans(np.eye(3), 10, seed=1)
        assert len(set(labels.tolist())) <= 3

    def test_no_points_or_clusters(self):
        assert len(cosine_kmeans(np.zeros((0, 3)), 2)) == 0
        assert len(cosine_kmeans(np.eye(3), 0)) == 0

    def test_seed_is_reproducible(self):
        vectors = np.random.default_rng(0).random((12, 5))
        assert np.array_equal(cosine_kmeans(vectors, 3, seed=7), cosine_kmeans(vectors, 3, seed=7))


class TestComputeClusters:
    def test_segments_are_conserved(self, themed_codings):
        result = compute_clusters(themed_codings, 2, seed=42)
        ids = [s["coding_id"] for c in result["clusters"] for s in c["segments"]]
        assert sorted(ids) == sorted(c.id for c in themed_codings)

    def test_cluster_count_bounded_by_k(self, themed_codings):
        assert 1 <= len(compute_clusters(themed_codings, 2, seed=42)["clusters"]) <= 2

    def test_k_larger_than_segments(self, codings):
        result = compute_clusters(codings, 100, seed=3)
        assert 1 <= len(result["clusters"]) <= len(codings)

    def test_separates_distinct_themes(self, themed_codings):
        result = compute_clusters(themed_codings, 2, seed=42)
        groups = [{s["coding_id"] for s in c["segments"]} for c in result["clusters"]]
        assert {"c0", "c1", "c2"} in groups
        assert {"c3", "c4", "c5"} in groups

    def test_labels_and_keywords(self, themed_codings):
        for cluster in compute_clusters(themed_codings, 2, seed=42)["clusters"]:
            assert cluster["label"] == f"Cluster {cluster['id'] + 1}"
            assert 1 <= len(cluster["keywords"]) <= 5
            texts = " ".join(s["text"] for s in cluster["segments"])
            assert all(keyword in texts for keyword in cluster["keywords"])

    def test_segments_capped(self):
        many = [Coding(f"c{i}", "t", "q", i, i + 1, "same words here") for i in range(30)]
        result = compute_clusters(many, 1, seed=0)
        assert len(result["clusters"]) == 1
        assert len(result["clusters"][0]["segments"]) == 20

    def test_question_filter(self, codings):
        result = compute_clusters(codings, 2, ["q2"], seed=0)
        ids = {s["coding_id"] for c in result["clusters"] for s in c["segments"]}
        assert ids == {"c3", "c4"}

    def test_only_stop_words(self):
        result = compute_clusters([Coding("c", "t", "q", 0, 1, "the and was")], 2, seed=0)
        assert len(result["clusters"]) == 1
        assert result["clusters"][0]["keywords"] == []

    def test_empty_input(self):
        assert compute_clusters([], 3) == {"clusters": []}

    def test_non_positive_k(self, codings):
        assert compute_clusters(codings, 0) == {"clusters": []}

    def test_same_seed_same_result(self, codings):
        assert compute_clusters(codings, 3, seed=11) == compute_clusters(codings, 3, seed=11)
