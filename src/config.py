"""Application settings."""
import os
from typing import Optional

# Random article source for each supported language
RANDOM_ARTICLE_URL_BY_LANGUAGE = {
    "en": "https://en.wikipedia.org/wiki/Special:Random",
    "fr": "https://fr.wikipedia.org/wiki/Sp%C3%A9cial:Page_au_hasard",
    "de": "https://de.wikipedia.org/wiki/Spezial:Zuf%C3%A4llige_Seite",
}

DEFAULT_LANGUAGE = "en"
DEFAULT_COUNT = 10

# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./words.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")

# Outbound fetch
USER_AGENT = os.getenv("USER_AGENT", "word-picker/1.0")
_fetch_timeout = os.getenv("FETCH_TIMEOUT")
FETCH_TIMEOUT: Optional[float] = float(_fetch_timeout) if _fetch_timeout else None

PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def article_url_for(language: str) -> str:
    """Return the random article URL for a language, or "" if none is configured."""
    return RANDOM_ARTICLE_URL_BY_LANGUAGE.get(language, "")
