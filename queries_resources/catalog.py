"""
Catalogue of the resources shipped with queries_resources.

Every resource is described once here; the registry builds any of them
through a single generic code path. Source keys are paths relative to the
resource root (queries_resources/data by default).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

STEMS = "stems"
WORD_CLUSTERS = "word_clusters"
GAZETTEER = "gazetteer"

STEMMED_SUFFIX = "_stem"


@dataclass(frozen=True)
class ResourceId:
    """Identity of one cached structure."""

    language: str
    kind: str
    name: str
    stemmed: bool = False

    def __str__(self) -> str:
        suffix = STEMMED_SUFFIX if self.stemmed else ""
        return f"{self.kind}:{self.language}/{self.name}{suffix}"


@dataclass(frozen=True)
class StemSources:
    inflections: Optional[str]
    lexemes: Optional[str]

    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key in (self.inflections, self.lexemes) if key)


# language -> (inflection table, lexeme table)
STEM_SOURCES: Dict[str, StemSources] = {
    "en": StemSources("en/top_10000_words_inflected.txt", "en/top_1000_verbs_lexemes.txt"),
    "fr": StemSources("fr/top_10000_words_inflected.txt", "fr/top_2000_verbs_lexemes.txt"),
    "es": StemSources("es/top_10000_words_inflected.txt", "es/top_1000_verbs_lexemes.txt"),
    "de": StemSources(None, "de/top_1000_verbs_lexemes.txt"),
}

# (language, name) -> tab-separated cluster table
WORD_CLUSTER_SOURCES: Dict[Tuple[str, str], str] = {
    ("en", "brown_clusters"): "en/brown_clusters.txt",
}

# language -> gazetteer names, each read from "<language>/<name>.txt"
GAZETTEERS: Dict[str, Tuple[str, ...]] = {
    "en": (
        "top_10000_nouns",
        "cities_us",
        "cities_world",
        "countries",
        "states_us",
        "stop_words",
        "street_identifier",
        "top_10000_words",
    ),
    "fr": (
        "cities_france",
        "cities_world",
        "countries",
        "departements_france",
        "regions_france",
        "stop_words",
        "street_identifier",
        "top_10000_words",
    ),
    "de": (
        "cities_germany",
        "cities_world",
        "countries",
        "lander_germany",
        "stop_words",
        "street_identifier",
    ),
}


def supported_languages() -> List[str]:
    """All language codes that have at least one resource."""
    languages = set(STEM_SOURCES) | set(GAZETTEERS) | {lang for lang, _ in WORD_CLUSTER_SOURCES}
    return sorted(languages)


def cluster_names(language: str) -> List[str]:
    return sorted(name for lang, name in WORD_CLUSTER_SOURCES if lang == language)


def gazetteer_names(language: str) -> List[str]:
    return list(GAZETTEERS.get(language, ()))


def split_gazetteer_name(name: str) -> Tuple[str, bool]:
    """
    Split an accessor-style gazetteer name into (base name, stemmed flag).

    "cities_us_stem" -> ("cities_us", True); "cities_us" -> ("cities_us", False)
    """
    if name.endswith(STEMMED_SUFFIX):
        return name[: -len(STEMMED_SUFFIX)], True
    return name, False


def gazetteer_source(language: str, name: str) -> str:
    return f"{language}/{name}.txt"


def source_keys(resource_id: ResourceId) -> Tuple[str, ...]:
    """Return the resource keys that feed the given identity."""
    if resource_id.kind == STEMS:
        return STEM_SOURCES[resource_id.language].keys()
    if resource_id.kind == WORD_CLUSTERS:
        return (WORD_CLUSTER_SOURCES[(resource_id.language, resource_id.name)],)
    if resource_id.kind == GAZETTEER:
        keys = (gazetteer_source(resource_id.language, resource_id.name),)
        if resource_id.stemmed:
            keys += STEM_SOURCES[resource_id.language].keys()
        return keys
    raise ValueError(f"Unknown resource kind: {resource_id.kind}")


def iter_catalog(language: Optional[str] = None) -> Iterator[ResourceId]:
    """
    Yield the identity of every catalogued resource.

    Args:
        language: Restrict to one language code (all languages if None)
    """
    for lang in supported_languages():
        if language is not None and lang != language:
            continue
        if lang in STEM_SOURCES:
            yield ResourceId(lang, STEMS, STEMS)
        for name in cluster_names(lang):
            yield ResourceId(lang, WORD_CLUSTERS, name)
        for name in gazetteer_names(lang):
            yield ResourceId(lang, GAZETTEER, name)
            if lang in STEM_SOURCES:
                yield ResourceId(lang, GAZETTEER, name, stemmed=True)
