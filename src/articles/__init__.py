from src.articles.client import ArticleClient
from src.articles.extractor import extract_words, normalize_text

__all__ = [
    "ArticleClient",
    "extract_words",
    "normalize_text",
]
