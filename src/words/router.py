from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from src.articles.client import ArticleClient
from src.articles.extractor import extract_words
from src.config import DEFAULT_COUNT, DEFAULT_LANGUAGE, RANDOM_ARTICLE_URL_BY_LANGUAGE
from src.logging_config import get_logger
from src.words.schemas import LanguagesResponse, PickResponse
from src.words.selector import select_words
from src.words.store import UsageStore

logger = get_logger(__name__)

router = APIRouter(tags=["Words"])


def get_store(request: Request) -> UsageStore:
    """Dependency returning the store opened at startup."""
    return request.app.state.store


def get_article_client(request: Request) -> ArticleClient:
    """Dependency returning the shared article client."""
    return request.app.state.article_client


def resolve_language(language: str | None) -> str:
    return language or DEFAULT_LANGUAGE


def resolve_count(count: str | None) -> int:
    """
    Parse the requested count; anything missing, non-numeric or negative means the default.
    
    Only an optional sign followed by ASCII digits is a number, so " 7 ", "1_000"
    and non-ASCII digits fall back to the default too.
    """
    if count is None:
        return DEFAULT_COUNT
    digits = count[1:] if count[:1] in ("+", "-") else count
    if not (digits.isascii() and digits.isdigit()):
        return DEFAULT_COUNT
    value = int(count)
    return value if value >= 0 else DEFAULT_COUNT


@router.get("/pick", response_model=PickResponse)
async def pick_words(
    language: str | None = None,
    count: str | None = None,
    store: UsageStore = Depends(get_store),
    article_client: ArticleClient = Depends(get_article_client)
):
    """
    Pick words from a random article that were never served before for the language.
    
    Failures while fetching, parsing or storing surface as a 500 with the error text.
    """
    language = resolve_language(language)
    count_value = resolve_count(count)
    
    html = await article_client.fetch_random_article(language)
    # Parsing a full page is CPU bound, keep it off the event loop
    pool = await run_in_threadpool(extract_words, html)
    
    async with store.lock(language):
        used_before = await store.get_used(language)
        picked = select_words(pool, count_value, used_before)
        await store.store_used(picked, language)
    
    logger.info(f"Picked {len(picked)}/{count_value} words for '{language}' from a pool of {len(pool)}")
    return PickResponse(language=language, words=picked)


@router.get("/languages", response_model=LanguagesResponse)
def list_languages():
    """List the languages with a configured random article source."""
    return LanguagesResponse(languages=dict(RANDOM_ARTICLE_URL_BY_LANGUAGE))
