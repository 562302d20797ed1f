"""Persistence of words already served, partitioned by language."""
import asyncio
from collections import defaultdict
from typing import Iterable, Set

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from src.database import build_engine, build_session_maker, init_db
from src.exceptions import StorageError
from src.logging_config import get_logger
from src.words.models import UsedWord

logger = get_logger(__name__)


class UsageStore:
    """
    Owns the database engine and answers which words were already served.
    
    Create it with open() at startup and release it with close() at shutdown.
    """
    
    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_maker = build_session_maker(engine)
        self._language_locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
    
    @classmethod
    async def open(cls, database_url: str, echo: bool = False) -> "UsageStore":
        """Connect to the database and create the used_words table if missing."""
        store = cls(build_engine(database_url, echo=echo))
        try:
            await store.init()
        except StorageError:
            await store.close()
            raise
        return store
    
    async def init(self) -> None:
        try:
            await init_db(self._engine)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        logger.info(f"Usage store ready at {self._engine.url}")
    
    async def close(self) -> None:
        await self._engine.dispose()
        logger.info("Usage store closed")
    
    def lock(self, language: str) -> asyncio.Lock:
        """Lock serializing read-select-write cycles for one language."""
        return self._language_locks[language]
    
    async def get_used(self, language: str) -> Set[str]:
        """Return every word already served for the language."""
        try:
            async with self._session_maker() as session:
                result = await session.execute(
                    select(UsedWord.word).where(UsedWord.language == language)
                )
                return set(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error(f"Could not load used words for '{language}': {exc}")
            raise StorageError(str(exc)) from exc
    
    async def store_used(self, words: Iterable[str], language: str) -> None:
        """
        Record words as served for the language.
        
        All inserts share one transaction; words already recorded are ignored.
        """
        rows = [{"word": word, "language": language} for word in words]
        if not rows:
            return
        
        stmt = insert(UsedWord.__table__).on_conflict_do_nothing(index_elements=["word", "language"])
        try:
            async with self._session_maker() as session:
                async with session.begin():
                    await session.execute(stmt, rows)
        except SQLAlchemyError as exc:
            logger.error(f"Could not store {len(rows)} used words for '{language}': {exc}")
            raise StorageError(str(exc)) from exc
