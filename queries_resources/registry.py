"""
Resource registry: lazily built, memoized lookup tables.

A ResourceRegistry owns one cache slot per resource identity
(language, kind, name, stemmed). The first request for an identity parses
its source files; later requests return the same structure without
touching the provider again. Concurrent first requests for the same
identity run a single build.

Applications can create a registry once and pass it around, or use the
module-level functions, which share a lazily created default registry.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import ExitStack
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional

from . import catalog
from .catalog import GAZETTEER, STEMS, WORD_CLUSTERS, ResourceId
from .clusters import parse_clusters
from .config import ResourcesConfig
from .errors import ResourceError, UnknownResourceError
from .gazetteers import canonicalize_phrase, parse_gazetteer
from .language_mapping import resolve_language
from .providers import DirectoryResourceProvider, PackageResourceProvider, ResourceProvider
from .stems import Stemmer, build_stems, no_stem
from .text import normalize

logger = logging.getLogger(__name__)

DEFAULT_CLUSTERS = "brown_clusters"


class _Slot:
    """Cache slot for one identity: unbuilt -> built (or failed), then read-only."""

    __slots__ = ("lock", "done", "value", "error")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.done = False
        self.value: Any = None
        self.error: Optional[ResourceError] = None

    def result(self) -> Any:
        if self.error is not None:
            # Drop frames left by earlier raises so the cached error does not grow
            raise self.error.with_traceback(None)
        return self.value


def provider_from_config(config: ResourcesConfig) -> ResourceProvider:
    if config.resources_dir is not None:
        return DirectoryResourceProvider(config.resources_dir)
    return PackageResourceProvider()


class ResourceRegistry:
    """
    Process-lifetime cache of parsed resources.

    Args:
        provider: Byte-stream provider for resource keys (derived from config if None)
        config: Registry configuration (read from the environment if None)
    """

    def __init__(
        self,
        provider: Optional[ResourceProvider] = None,
        config: Optional[ResourcesConfig] = None,
    ) -> None:
        self.config = config if config is not None else ResourcesConfig.from_env()
        self.provider = provider if provider is not None else provider_from_config(self.config)
        self._slots: Dict[ResourceId, _Slot] = {}
        self._slots_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"ResourceRegistry(provider={self.provider!r}, loaded={len(self.loaded())})"

    # ------------------------------------------------------------------
    # Cache machinery
    # ------------------------------------------------------------------

    def _slot(self, resource_id: ResourceId) -> _Slot:
        slot = self._slots.get(resource_id)
        if slot is None:
            with self._slots_lock:
                slot = self._slots.setdefault(resource_id, _Slot())
        return slot

    def _cached(self, resource_id: ResourceId, build: Callable[[], Any]) -> Any:
        slot = self._slot(resource_id)
        # Fast path: completed slots are never written again
        if slot.done:
            return slot.result()

        with slot.lock:
            if slot.done:
                return slot.result()
            start = time.perf_counter()
            try:
                value = build()
            except ResourceError as exc:
                logger.error("Failed to build %s: %s", resource_id, exc)
                if self.config.cache_failures:
                    slot.error = exc
                    slot.done = True
                raise
            slot.value = value
            slot.done = True
            logger.debug(
                "Built %s with %d entries in %.3fs",
                resource_id,
                len(value),
                time.perf_counter() - start,
            )
            return value

    def is_loaded(self, resource_id: ResourceId) -> bool:
        """True if the identity has been built successfully."""
        slot = self._slots.get(resource_id)
        return bool(slot is not None and slot.done and slot.error is None)

    def loaded(self) -> List[ResourceId]:
        """Identities built successfully so far."""
        with self._slots_lock:
            items = list(self._slots.items())
        return [rid for rid, slot in items if slot.done and slot.error is None]

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def _build_stems(self, language: str) -> Mapping[str, str]:
        sources = catalog.STEM_SOURCES[language]
        with ExitStack() as stack:
            inflections = stack.enter_context(self.provider.open(sources.inflections)) if sources.inflections else None
            lexemes = stack.enter_context(self.provider.open(sources.lexemes)) if sources.lexemes else None
            stem_map = build_stems(
                inflections,
                lexemes,
                inflections_source=sources.inflections,
                lexemes_source=sources.lexemes,
            )
        return MappingProxyType(stem_map)

    def _build_clusters(self, language: str, name: str) -> Mapping[str, str]:
        key = catalog.WORD_CLUSTER_SOURCES[(language, name)]
        with self.provider.open(key) as stream:
            return MappingProxyType(parse_clusters(stream, source=key))

    def _build_gazetteer(self, language: str, name: str, stemmed: bool) -> FrozenSet[str]:
        stem_fn = self.stemmer(language) if stemmed else no_stem
        key = catalog.gazetteer_source(language, name)
        with self.provider.open(key) as stream:
            return parse_gazetteer(stream, stem_fn, source=key)

    # ------------------------------------------------------------------
    # Identity resolution
    # ------------------------------------------------------------------

    def _stems_language(self, language: str) -> str:
        return resolve_language(language, supported=list(catalog.STEM_SOURCES))

    def _gazetteer_id(self, language: str, name: str, stemmed: bool) -> ResourceId:
        lang = resolve_language(language, supported=list(catalog.GAZETTEERS))
        base_name, suffixed = catalog.split_gazetteer_name(name)
        if base_name not in catalog.GAZETTEERS[lang]:
            # A gazetteer whose own name ends with "_stem" is not an alias
            if name in catalog.GAZETTEERS[lang]:
                base_name, suffixed = name, False
            else:
                raise UnknownResourceError(
                    f"unknown gazetteer {name!r} for language {lang!r} "
                    f"(available: {', '.join(catalog.gazetteer_names(lang))})"
                )
        stemmed = stemmed or suffixed
        if stemmed and lang not in catalog.STEM_SOURCES:
            raise UnknownResourceError(f"no stems available to build stemmed gazetteers for {lang!r}")
        return ResourceId(lang, GAZETTEER, base_name, stemmed)

    # ------------------------------------------------------------------
    # Public accessors
    # ------------------------------------------------------------------

    def stems(self, language: str) -> Mapping[str, str]:
        """
        Return the stem map for a language.

        Args:
            language: Language code or name ("en", "fr", "es", "de", ...)

        Returns:
            Read-only mapping of normalized word forms to normalized stems
        """
        lang = self._stems_language(language)
        return self._cached(ResourceId(lang, STEMS, STEMS), lambda: self._build_stems(lang))

    def stemmer(self, language: str) -> Stemmer:
        """Return a stemming function backed by the language's stem map."""
        return Stemmer(self.stems(language))

    def stem(self, language: str, word: str) -> str:
        """Normalize a word and return its stem (the normalized word if unknown)."""
        return self.stemmer(language)(normalize(word))

    def word_clusters(self, language: str, name: str = DEFAULT_CLUSTERS) -> Mapping[str, str]:
        """
        Return a word cluster map.

        Keys are raw words exactly as they appear in the resource.
        """
        languages = sorted({lang for lang, _ in catalog.WORD_CLUSTER_SOURCES})
        lang = resolve_language(language, supported=languages)
        if (lang, name) not in catalog.WORD_CLUSTER_SOURCES:
            raise UnknownResourceError(
                f"unknown word clusters {name!r} for language {lang!r} "
                f"(available: {', '.join(catalog.cluster_names(lang)) or 'none'})"
            )
        return self._cached(ResourceId(lang, WORD_CLUSTERS, name), lambda: self._build_clusters(lang, name))

    def gazetteer(self, language: str, name: str, stemmed: bool = False) -> FrozenSet[str]:
        """
        Return a gazetteer as a frozen set of canonical entries.

        Args:
            language: Language code or name
            name: Gazetteer name; a "_stem" suffix selects the stemmed variant
            stemmed: Pass every token through the language's stemmer

        Returns:
            Frozen set of normalized, tokenized (and optionally stemmed) phrases
        """
        rid = self._gazetteer_id(language, name, stemmed)
        return self._cached(rid, lambda: self._build_gazetteer(rid.language, rid.name, rid.stemmed))

    def contains(self, language: str, name: str, phrase: str, stemmed: bool = False) -> bool:
        """Check whether a raw phrase belongs to a gazetteer."""
        rid = self._gazetteer_id(language, name, stemmed)
        entries = self.gazetteer(rid.language, rid.name, rid.stemmed)
        stem_fn = self.stemmer(rid.language) if rid.stemmed else no_stem
        entry = canonicalize_phrase(phrase, stem_fn)
        return bool(entry) and entry in entries

    def get(self, resource_id: ResourceId) -> Any:
        """Return the structure for any catalogued identity."""
        if resource_id.kind == STEMS:
            return self.stems(resource_id.language)
        if resource_id.kind == WORD_CLUSTERS:
            return self.word_clusters(resource_id.language, resource_id.name)
        if resource_id.kind == GAZETTEER:
            return self.gazetteer(resource_id.language, resource_id.name, resource_id.stemmed)
        raise UnknownResourceError(f"unknown resource kind {resource_id.kind!r}")

    def preload(self, languages: Optional[Iterable[str]] = None) -> List[ResourceId]:
        """
        Build every catalogued resource for the given languages.

        Args:
            languages: Language codes or names (all supported languages if None)

        Returns:
            Identities that were built (or already cached)
        """
        if languages is None:
            codes = catalog.supported_languages()
        else:
            codes = [resolve_language(lang, supported=catalog.supported_languages()) for lang in languages]
        built: List[ResourceId] = []
        for code in codes:
            for rid in catalog.iter_catalog(code):
                self.get(rid)
                built.append(rid)
        logger.info("Preloaded %d resources for %s", len(built), ", ".join(codes))
        return built


# ----------------------------------------------------------------------
# Module-level default registry
# ----------------------------------------------------------------------

_DEFAULT_REGISTRY: Optional[ResourceRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def get_default_registry() -> ResourceRegistry:
    """Return the shared registry, creating it on first use."""
    global _DEFAULT_REGISTRY
    registry = _DEFAULT_REGISTRY
    if registry is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = ResourceRegistry()
            registry = _DEFAULT_REGISTRY
    return registry


def set_default_registry(registry: Optional[ResourceRegistry]) -> None:
    """Replace the shared registry (None resets it to a fresh one on next use)."""
    global _DEFAULT_REGISTRY
    with _DEFAULT_LOCK:
        _DEFAULT_REGISTRY = registry


def stems(language: str) -> Mapping[str, str]:
    return get_default_registry().stems(language)


def stemmer(language: str) -> Stemmer:
    return get_default_registry().stemmer(language)


def stem(language: str, word: str) -> str:
    return get_default_registry().stem(language, word)


def word_clusters(language: str, name: str = DEFAULT_CLUSTERS) -> Mapping[str, str]:
    return get_default_registry().word_clusters(language, name)


def gazetteer(language: str, name: str, stemmed: bool = False) -> FrozenSet[str]:
    return get_default_registry().gazetteer(language, name, stemmed)


def contains(language: str, name: str, phrase: str, stemmed: bool = False) -> bool:
    return get_default_registry().contains(language, name, phrase, stemmed)
