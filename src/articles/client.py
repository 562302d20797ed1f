"""HTTP client for random encyclopedia articles."""
import httpx

from src.config import article_url_for
from src.exceptions import FetchError
from src.logging_config import get_logger

logger = get_logger(__name__)


class ArticleClient:
    """Downloads a random article for a language over a shared httpx client."""
    
    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client
    
    async def fetch_random_article(self, language: str) -> str:
        """
        Download the raw HTML of a random article in the given language.
        
        Languages without a configured source resolve to an empty URL and
        fail here like any other transport error.
        """
        url = article_url_for(language)
        try:
            response = await self._http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(f"Fetch failed for language '{language}': {exc}")
            raise FetchError(str(exc)) from exc
        
        if response.is_error:
            logger.warning(f"Article source for '{language}' answered {response.status_code}")
        
        logger.info(f"Fetched {response.url} ({len(response.content)} bytes)")
        return response.text
