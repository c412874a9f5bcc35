"""Shared pytest fixtures for the queries_resources test suite."""

from __future__ import annotations

import threading
from typing import BinaryIO, Dict, List, Mapping, Union

import pytest

from queries_resources.config import ResourcesConfig
from queries_resources.providers import InMemoryResourceProvider
from queries_resources.registry import ResourceRegistry, set_default_registry

EN_RESOURCES: Dict[str, str] = {
    "en/top_10000_words_inflected.txt": "ran;run\nCities;City\n",
    "en/top_1000_verbs_lexemes.txt": "",
    "en/brown_clusters.txt": "dog\t001\ncat\t002\n",
    "en/cities_us.txt": "New York\n\nParis\n",
    "en/cities_world.txt": "Paris\nLondon\n",
    "en/countries.txt": "France\n",
    "en/states_us.txt": "Texas\n",
    "en/stop_words.txt": "the\na\n",
    "en/street_identifier.txt": "street\n",
    "en/top_10000_nouns.txt": "cities\n",
    "en/top_10000_words.txt": "ran\ncities\n",
}


class CountingProvider:
    """In-memory provider that records every key it opens."""

    def __init__(self, contents: Mapping[str, Union[bytes, str]]) -> None:
        self._inner = InMemoryResourceProvider(contents)
        self._lock = threading.Lock()
        self.opened: List[str] = []

    def exists(self, key: str) -> bool:
        return self._inner.exists(key)

    def open(self, key: str) -> BinaryIO:
        with self._lock:
            self.opened.append(key)
        return self._inner.open(key)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep tests independent of the caller's environment and of each other."""

    monkeypatch.delenv("QUERIES_RESOURCES_DIR", raising=False)
    monkeypatch.delenv("QUERIES_RESOURCES_CACHE_FAILURES", raising=False)
    set_default_registry(None)
    yield
    set_default_registry(None)


@pytest.fixture
def en_provider() -> CountingProvider:
    """Provider serving a small, fully known set of English resources."""

    return CountingProvider(EN_RESOURCES)


@pytest.fixture
def en_registry(en_provider: CountingProvider) -> ResourceRegistry:
    """Registry over the small English resource set."""

    return ResourceRegistry(provider=en_provider, config=ResourcesConfig())
