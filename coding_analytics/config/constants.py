"""Fixed analysis defaults shared by the engine."""

SEARCH_CONTEXT_CHARS = 50
MAX_SEARCH_MATCHES = 100
MAX_WORD_FREQUENCY_RESULTS = 100
MIN_WORD_LENGTH = 3
MAX_MATRIX_EXCERPTS = 5
MAX_CLUSTER_SEGMENTS = 20
MAX_CLUSTER_KEYWORDS = 5
KMEANS_MAX_ITERATIONS = 50
KMEANS_RESTARTS = 3
SENTIMENT_POSITIVE_THRESHOLD = 0.05
SENTIMENT_NEGATIVE_THRESHOLD = -0.05
SENTIMENT_SAMPLE_CHARS = 80
DEFAULT_MIN_OVERLAP = 1

# Upper bound for walks up the question forest; parent links are not
# checked for cycles.
MAX_HIERARCHY_DEPTH = 64
