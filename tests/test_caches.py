import pytest

from consign_tracker.lib.caches import DiskCache


@pytest.fixture
def cache(tmp_path):
    disk_cache = DiskCache(tmp_path / "records")
    yield disk_cache
    disk_cache.close()


def test_get_or_load_calls_loader_once(cache) -> None:
    calls = []

    def loader():
        calls.append(1)
        return [{"sr_id": "SR1"}]

    first = cache.get_or_load("records:abc", loader, expire=60)
    second = cache.get_or_load("records:abc", loader, expire=60)

    assert first.loaded
    assert not second.loaded
    assert second.value == [{"sr_id": "SR1"}]
    assert calls == [1]


def test_empty_record_set_is_cached(cache) -> None:
    cache.get_or_load("records:empty", list)

    assert cache.get("records:empty").value == []


def test_loader_errors_are_not_cached(cache) -> None:
    def failing():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        cache.get_or_load("records:x", failing)

    assert cache.get("records:x") is None


def test_delete_and_clear(cache) -> None:
    cache.set("a", 1)
    cache.set("b", 2)

    cache.delete("a")
    assert cache.get("a") is None

    cache.clear()
    assert cache.get("b") is None
