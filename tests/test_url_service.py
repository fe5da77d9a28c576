import pytest

from shortit.services.key_strategies import KeyStrategy, ShortUUIDKeyStrategy
from shortit.services.url_service import URLService
from shortit.store.strategies import InMemoryMappingStore


class SequentialKeys(KeyStrategy):
    """Predictable keys: k1, k2, ..."""

    def __init__(self):
        self.count = 0

    def generate(self) -> str:
        self.count += 1
        return f"k{self.count}"


class TestURLService:
    """Test URL service business logic directly"""

    @pytest.fixture
    def store(self):
        return InMemoryMappingStore()

    def test_shorten_stores_mapping(self, store):
        service = URLService(store, SequentialKeys())

        mapping = service.shorten("https://www.example.com/")

        assert mapping.key == "k1"
        assert mapping.url == "https://www.example.com/"
        assert store.fetch("k1") == "https://www.example.com/"

    def test_shorten_rejects_empty_url(self, store):
        service = URLService(store, ShortUUIDKeyStrategy())

        with pytest.raises(ValueError):
            service.shorten("")
        assert len(store) == 0

    def test_same_url_twice(self, store):
        """Short keys should be different, both pointing at the same URL"""
        service = URLService(store, ShortUUIDKeyStrategy())

        first = service.shorten("https://www.test.com/")
        second = service.shorten("https://www.test.com/")

        assert first.key != second.key
        assert service.resolve(first.key) == service.resolve(second.key) == "https://www.test.com/"

    def test_resolve_unknown_key(self, store):
        service = URLService(store, ShortUUIDKeyStrategy())
        assert service.resolve("nonexistent") is None
        assert service.resolve("") is None

    @pytest.mark.parametrize("base_url", ["http://localhost:4000", "http://localhost:4000/"])
    def test_short_url(self, base_url):
        assert URLService.short_url(base_url, "abc") == "http://localhost:4000/short/abc"
