from src.words.models import UsedWord
from src.words.schemas import HealthResponse, LanguagesResponse, PickResponse
from src.words.selector import select_words
from src.words.store import UsageStore

__all__ = [
    # Models
    "UsedWord",
    # Schemas
    "PickResponse",
    "HealthResponse",
    "LanguagesResponse",
    # Services
    "select_words",
    "UsageStore",
]
