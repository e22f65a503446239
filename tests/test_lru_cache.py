import pytest

from algokata.lru_cache import LRUCache


def test_worked_example():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_missing_key_returns_minus_one():
    cache = LRUCache(3)
    assert cache.get("absent") == -1


def test_put_existing_key_updates_and_refreshes():
    cache = LRUCache(2)
    cache.put("a", 10)
    cache.put("b", 20)
    cache.put("a", 11)
    cache.put("c", 30)
    assert cache.get("a") == 11
    assert cache.get("b") == -1
    assert cache.get("c") == 30


def test_get_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 100)
    cache.put(2, 200)
    cache.get(1)
    cache.put(3, 300)
    assert cache.get(1) == 100
    assert cache.get(2) == -1


def test_capacity_one_keeps_latest_only():
    cache = LRUCache(1)
    cache.put(1, 5)
    cache.put(2, 6)
    assert cache.get(1) == -1
    assert cache.get(2) == 6


@pytest.mark.parametrize("capacity", [0, -3])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)