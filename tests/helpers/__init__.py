from .documents import ARTICLE_HTML, ARTICLE_PARAGRAPHS, EveryWordStopWords, body_fragment, words
from .metric_delta import counter_value, get_histogram_count, metric_delta

__all__ = [
    "ARTICLE_HTML",
    "ARTICLE_PARAGRAPHS",
    "EveryWordStopWords",
    "body_fragment",
    "counter_value",
    "get_histogram_count",
    "metric_delta",
    "words",
]
