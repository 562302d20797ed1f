import random

import pytest

from src.words.selector import select_words

POOL = ["the", "cat", "sat", "on", "the", "mat", "with", "a", "hat", "cat"]


@pytest.mark.parametrize("n", [len(POOL), len(POOL) + 5])
def test_returns_pool_unchanged_when_n_covers_it(n):
    result = select_words(POOL, n, excluded={"cat"})
    assert result == POOL


def test_empty_pool():
    assert select_words([], 10, set()) == []


def test_zero_requested():
    assert select_words(POOL, 0, set()) == []


def test_excluded_words_are_never_picked():
    excluded = {"the", "cat"}
    for seed in range(50):
        result = select_words(POOL, 4, excluded, rng=random.Random(seed))
        assert len(result) == 4
        assert not set(result) & excluded
        assert len(set(result)) == len(result)
        assert set(result) <= set(POOL)


def test_result_is_unique_within_call():
    pool = ["a"] * 20 + ["b", "c", "d"]
    result = select_words(pool, 3, set(), rng=random.Random(7))
    assert len(result) == 3
    assert len(set(result)) == 3
    assert set(result) <= {"a", "b", "c", "d"}


def test_same_seed_same_selection():
    first = select_words(POOL, 3, set(), rng=random.Random(42))
    second = select_words(POOL, 3, set(), rng=random.Random(42))
    assert first == second


def test_returns_all_eligible_words_when_too_few_remain():
    excluded = {"the", "cat", "sat", "on", "mat", "with"}
    result = select_words(POOL, 5, excluded)
    assert result == ["a", "hat"]


def test_everything_excluded():
    assert select_words(POOL, 3, set(POOL)) == []
