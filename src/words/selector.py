"""Random selection of unseen words."""
import random
from typing import AbstractSet, List, Optional, Sequence

from src.logging_config import get_logger

logger = get_logger(__name__)


def select_words(
        pool: Sequence[str],
        n: int,
        excluded: AbstractSet[str],
        rng: Optional[random.Random] = None) -> List[str]:
    """
    Pick n unique random words from the pool, skipping excluded ones.
    
    If n >= len(pool) the pool is returned unchanged, duplicates and excluded
    words included. Otherwise words are drawn uniformly at random and kept
    when they are neither excluded nor already picked, in the order they are
    accepted.
    
    When the pool holds fewer than n distinct eligible words, every eligible
    word is returned in pool order instead of drawing forever.
    """
    if n >= len(pool):
        return list(pool)
    
    eligible = list(dict.fromkeys(word for word in pool if word not in excluded))
    if len(eligible) <= n:
        logger.info(f"Only {len(eligible)} eligible words for {n} requested, returning all of them")
        return eligible
    
    rng = rng or random
    picked: List[str] = []
    seen = set()
    while len(picked) < n:
        word = rng.choice(pool)
        if word in excluded or word in seen:
            continue
        seen.add(word)
        picked.append(word)
    
    return picked
