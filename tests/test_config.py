"""Unit tests for configuration and resource providers."""

from __future__ import annotations

from pathlib import Path

import pytest

from queries_resources.config import ResourcesConfig
from queries_resources.errors import ResourceIOError, ResourceNotFoundError
from queries_resources.providers import (
    DirectoryResourceProvider,
    InMemoryResourceProvider,
    PackageResourceProvider,
)
from queries_resources.registry import ResourceRegistry


def test_config_defaults_without_environment() -> None:
    config = ResourcesConfig.from_env({})

    assert config.resources_dir is None
    assert config.cache_failures is True


def test_config_reads_environment_values(tmp_path: Path) -> None:
    config = ResourcesConfig.from_env(
        {
            "QUERIES_RESOURCES_DIR": str(tmp_path),
            "QUERIES_RESOURCES_CACHE_FAILURES": " no ",
        }
    )

    assert config.resources_dir == tmp_path
    assert config.cache_failures is False


def test_config_rejects_invalid_boolean() -> None:
    with pytest.raises(ValueError, match="Expected true/false"):
        ResourcesConfig.from_env({"QUERIES_RESOURCES_CACHE_FAILURES": "maybe"})


def test_registry_picks_provider_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("QUERIES_RESOURCES_DIR", str(tmp_path))

    registry = ResourceRegistry()

    assert isinstance(registry.provider, DirectoryResourceProvider)
    assert registry.provider.root == tmp_path
    assert isinstance(ResourceRegistry(config=ResourcesConfig()).provider, PackageResourceProvider)


def test_directory_provider_opens_files(tmp_path: Path) -> None:
    (tmp_path / "en").mkdir()
    (tmp_path / "en" / "stop_words.txt").write_bytes(b"the\n")
    provider = DirectoryResourceProvider(tmp_path)

    assert provider.exists("en/stop_words.txt")
    with provider.open("en/stop_words.txt") as stream:
        assert stream.read() == b"the\n"


def test_providers_reject_missing_and_escaping_keys(tmp_path: Path) -> None:
    directory = DirectoryResourceProvider(tmp_path)
    package = PackageResourceProvider()

    for provider in (directory, package):
        with pytest.raises(ResourceNotFoundError):
            provider.open("en/missing.txt")
        with pytest.raises(ResourceNotFoundError):
            provider.open("../secrets.txt")
        assert not provider.exists("../secrets.txt")


def test_in_memory_provider_accepts_text_and_bytes() -> None:
    provider = InMemoryResourceProvider({"en/a.txt": "été\n", "en/b.txt": b"x\n"})

    assert provider.open("en/a.txt").read() == "été\n".encode("utf-8")
    assert provider.open("en/b.txt").read() == b"x\n"
    with pytest.raises(ResourceIOError):
        provider.open("en/c.txt")


def test_package_provider_serves_bundled_files() -> None:
    provider = PackageResourceProvider()

    assert provider.exists("en/stop_words.txt")
    with provider.open("en/stop_words.txt") as stream:
        assert b"the" in stream.read()
