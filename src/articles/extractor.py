"""Turn article markup into a pool of candidate words."""
from typing import List

from bs4 import BeautifulSoup, ParserRejectedMarkup

from src.exceptions import ExtractionError


def normalize_text(text: str) -> str:
    """
    Keep only letters, whitespace and apostrophes, lowercased.

    Dropped characters are removed outright, so "word," becomes "word" and
    "don't" stays a single token.
    """
    return "".join(
        char.lower()
        for char in text
        if char.isalpha() or char.isspace() or char == "'"
    )


def extract_words(markup: str | bytes) -> List[str]:
    """
    Extract the words found inside <p> elements of an HTML document.

    Paragraphs are visited in document order and an open <p> is closed by the
    next <p> or block element; headers, tables, navigation and
    any other non-paragraph content are ignored.
    Raises ExtractionError when the markup cannot be parsed.
    """
    try:
        soup = BeautifulSoup(markup, "lxml")
    except (ParserRejectedMarkup, TypeError) as exc:
        raise ExtractionError(f"failed to parse HTML: {exc}") from exc

    words: List[str] = []
    for paragraph in soup.find_all("p"):
        words.extend(normalize_text(paragraph.get_text()).split())
    return words
