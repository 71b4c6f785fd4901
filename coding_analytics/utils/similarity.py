"""TF-IDF vectorization and cosine similarity for coded segments."""

import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

logger = logging.getLogger(__name__)


def build_vocabulary(documents: Sequence[Sequence[str]]) -> Dict[str, int]:
    """Map each term to its column, in order of first appearance."""
    vocabulary: Dict[str, int] = {}
    for doc in documents:
        for term in doc:
            if term not in vocabulary:
                vocabulary[term] = len(vocabulary)
    return vocabulary


def build_tfidf(documents: Sequence[Sequence[str]]) -> Tuple[np.ndarray, List[str]]:
    """
    Vectorize pre-tokenized documents over a shared vocabulary.

    Term frequency is the raw count divided by document length and IDF is
    the smoothed ``ln((N + 1) / (df + 1)) + 1``. Vectors are left
    unnormalized.

    Args:
        documents: One token list per document

    Returns:
        Tuple of (dense matrix of shape (n_docs, n_terms), vocabulary list)
    """
    vocabulary = build_vocabulary(documents)
    if not vocabulary:
        return np.zeros((len(documents), 0)), []

    vectorizer = TfidfVectorizer(
        analyzer=lambda doc: doc,
        vocabulary=vocabulary,
        norm=None,
        smooth_idf=True,
        sublinear_tf=False,
    )
    weighted = vectorizer.fit_transform(documents).toarray()

    lengths = np.array([max(len(doc), 1) for doc in documents], dtype=float)
    vectors = weighted / lengths[:, np.newaxis]

    terms = [None] * len(vocabulary)
    for term, index in vocabulary.items():
        terms[index] = term

    logger.debug(f"Built TF-IDF matrix {vectors.shape} for {len(documents)} documents")
    return vectors, terms


def similarity_matrix(vectors: np.ndarray, others: np.ndarray) -> np.ndarray:
    """Pairwise cosine similarity; rows or columns of zero vectors score 0."""
    if vectors.shape[1] == 0:
        return np.zeros((vectors.shape[0], others.shape[0]))
    return cosine_similarity(vectors, others)


def pairwise_similarity(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Cosine similarity of matching rows in two equally shaped matrices."""
    norms = np.linalg.norm(a, axis=1) * np.linalg.norm(b, axis=1)
    dots = np.einsum("ij,ij->i", a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        sims = np.where(norms > 0, dots / norms, 0.0)
    return sims
