from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.articles.client import ArticleClient
from src.config import DATABASE_ECHO, DATABASE_URL, FETCH_TIMEOUT, LOG_LEVEL, PORT, USER_AGENT
from src.exceptions import WordPickerError
from src.logging_config import setup_logging, get_logger
from src.words.router import router as words_router
from src.words.schemas import HealthResponse
from src.words.store import UsageStore

# Initialize logging
setup_logging(LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the usage store and the outbound HTTP client for the app's lifetime."""
    app.state.store = await UsageStore.open(DATABASE_URL, echo=DATABASE_ECHO)
    
    http_client = httpx.AsyncClient(
        follow_redirects=True,
        timeout=FETCH_TIMEOUT,
        headers={"User-Agent": USER_AGENT},
    )
    app.state.article_client = ArticleClient(http_client)
    
    yield
    
    # Cleanup on shutdown
    await http_client.aclose()
    await app.state.store.close()


app = FastAPI(
    title="Word Picker API",
    description="Serves words from random encyclopedia articles, never repeating a word per language",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(words_router)


@app.exception_handler(WordPickerError)
async def word_picker_error_handler(request: Request, exc: WordPickerError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info(f"Listening on port: {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
