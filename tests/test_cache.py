"""
Test Read Cache
"""
from portfolio.modules.cache import ALL, ReadCache


def test_put_and_get_default_key():
    cache = ReadCache()
    cache.put("projects", [1, 2])
    assert cache.contains("projects")
    assert cache.get("projects") == [1, 2]
    assert cache.get("projects", ALL) == [1, 2]


def test_cached_empty_list_is_still_a_hit():
    cache = ReadCache()
    cache.put("skills", [])
    assert cache.contains("skills")
    assert cache.get("skills") == []


def test_evict_all_drops_only_named_namespaces():
    cache = ReadCache()
    cache.put("project", "p1", key=1)
    cache.put("project", "p2", key=2)
    cache.put("skills", ["s"])

    cache.evict_all("project")

    assert not cache.contains("project", 1)
    assert not cache.contains("project", 2)
    assert cache.get("skills") == ["s"]
    assert list(cache.namespaces()) == ["skills"]


def test_evict_unknown_namespace_is_noop():
    cache = ReadCache()
    cache.evict_all("nothing-here")
    assert list(cache.namespaces()) == []


def test_clear():
    cache = ReadCache()
    cache.put("a", 1)
    cache.put("b", 2)
    cache.clear()
    assert list(cache.namespaces()) == []


def test_put_after_eviction_is_discarded():
    """A value loaded before an eviction is not stored after it."""
    cache = ReadCache()
    generation = cache.generation("projects")

    cache.evict_all("projects")

    assert cache.put("projects", ["stale"], generation=generation) is False
    assert not cache.contains("projects")
    assert cache.put("projects", ["fresh"], generation=cache.generation("projects")) is True
    assert cache.get("projects") == ["fresh"]


def test_eviction_of_other_namespace_keeps_generation():
    cache = ReadCache()
    generation = cache.generation("projects")
    cache.evict_all("skills")
    assert cache.put("projects", [1], generation=generation) is True
