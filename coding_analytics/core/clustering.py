"""Text clustering of coded segments with TF-IDF and cosine K-means."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from ..config.constants import (
    KMEANS_MAX_ITERATIONS,
    KMEANS_RESTARTS,
    MAX_CLUSTER_KEYWORDS,
    MAX_CLUSTER_SEGMENTS,
)
from ..models.records import Coding
from ..utils.similarity import build_tfidf, pairwise_similarity, similarity_matrix
from ..utils.text import tokenize

logger = logging.getLogger(__name__)

SeedLike = Union[None, int, np.random.Generator]


def cosine_kmeans(
    vectors: np.ndarray,
    k: int,
    max_iter: int = KMEANS_MAX_ITERATIONS,
    restarts: int = KMEANS_RESTARTS,
    seed: SeedLike = None
) -> np.ndarray:
    """
    K-means that assigns each point to the centroid of highest cosine similarity.

    Centroids are component-wise means of their members; a centroid with no
    members keeps its previous position. Each restart starts from ``k``
    distinct points chosen at random, and the restart with the highest
    mean point-to-centroid similarity wins.

    Args:
        vectors: Matrix of shape (n_points, n_features)
        k: Requested cluster count, clamped to the number of points
        max_iter: Iteration cap per restart
        restarts: Number of random initializations
        seed: Seed or numpy Generator for reproducible runs

    Returns:
        Label per point (empty when there are no points or k < 1)
    """
    n_points = vectors.shape[0]
    if n_points == 0 or k <= 0:
        return np.zeros(0, dtype=int)

    actual_k = min(k, n_points)
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    best_labels = None
    best_score = -np.inf

    for restart in range(restarts):
        order = rng.permutation(n_points)
        centroids = vectors[order[:actual_k]].astype(float)
        labels = np.zeros(n_points, dtype=int)

        for iteration in range(max_iter):
            # argmax takes the first centroid on ties
            assigned = np.argmax(similarity_matrix(vectors, centroids), axis=1)
            if np.array_equal(assigned, labels):
                break
            labels = assigned

            for cluster in range(actual_k):
                members = vectors[labels == cluster]
                if len(members):
                    centroids[cluster] = members.mean(axis=0)

        score = float(pairwise_similarity(vectors, centroids[labels]).mean())
        logger.debug(f"K-means restart {restart + 1}/{restarts}: mean similarity {score:.4f}")

        if score > best_score:
            best_score = score
            best_labels = labels

    return best_labels


def _top_keywords(cluster_vectors: np.ndarray, vocabulary: List[str]) -> List[str]:
    """Highest average-weight terms of a cluster, skipping zero weights."""
    if not vocabulary:
        return []
    averages = cluster_vectors.mean(axis=0)
    # stable sort keeps vocabulary order among equal weights
    ranked = np.argsort(-averages, kind="stable")[:MAX_CLUSTER_KEYWORDS]
    return [vocabulary[i] for i in ranked if averages[i] > 0]


def compute_clusters(
    codings: Sequence[Coding],
    k: int,
    question_ids: Optional[Sequence[str]] = None,
    seed: SeedLike = None
) -> Dict[str, Any]:
    """
    Group coded segments into ``k`` clusters by text similarity.

    Args:
        codings: Codings to cluster
        k: Requested number of clusters (clamped to the segment count)
        question_ids: Optional question filter
        seed: Seed for the random restarts

    Returns:
        Dict with ``clusters``: [{id, label, segments (max 20), keywords (max 5)}]
    """
    wanted = set(question_ids) if question_ids else None
    filtered = [c for c in codings if wanted is None or c.question_id in wanted]
    if not filtered:
        return {"clusters": []}

    documents = [tokenize(c.coded_text) for c in filtered]
    vectors, vocabulary = build_tfidf(documents)
    labels = cosine_kmeans(vectors, k, seed=seed)
    if len(labels) == 0:
        return {"clusters": []}

    members: Dict[int, List[int]] = {}
    for index, label in enumerate(labels.tolist()):
        members.setdefault(label, []).append(index)

    clusters = []
    for cluster_id, indices in members.items():
        clusters.append({
            "id": cluster_id,
            "label": f"Cluster {cluster_id + 1}",
            "segments": [
                {"coding_id": filtered[i].id, "text": filtered[i].coded_text}
                for i in indices[:MAX_CLUSTER_SEGMENTS]
            ],
            "keywords": _top_keywords(vectors[indices], vocabulary),
        })

    logger.debug(f"Clustered {len(filtered)} segments into {len(clusters)} clusters (k={k})")
    return {"clusters": clusters}
