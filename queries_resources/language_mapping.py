"""
Language identifier resolution.

Accessors take a language as a code or a name ("en", "eng", "English",
"français") and map it to the ISO 639-1 code used by the resource
catalogue. A small table covers the supported languages and their common
variants; pycountry handles other ISO 639 codes and English names.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

import pycountry

from .errors import UnknownResourceError
from .text import normalize

# Format: (iso_639_1, iso_639_2, iso_639_3, primary_name, [variants])
_LANGUAGE_MAPPINGS: List[Tuple[str, str, str, str, List[str]]] = [
    ("de", "ger", "deu", "German", ["deutsch"]),
    ("en", "eng", "eng", "English", ["anglais", "englisch", "ingles"]),
    ("es", "spa", "spa", "Spanish", ["espanol", "castellano", "castilian"]),
    ("fr", "fre", "fra", "French", ["francais", "franzosisch", "frances"]),
]

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

_LANGUAGE_BY_CODE: Dict[str, str] = {}
_LANGUAGE_BY_NAME: Dict[str, str] = {}


def _normalize_name(value: str) -> str:
    return _NON_ALNUM.sub("", normalize(value))


def _build_language_mappings() -> None:
    """Build lookup dictionaries from language mappings."""
    for iso_1, iso_2, iso_3, primary_name, variants in _LANGUAGE_MAPPINGS:
        for code in (iso_1, iso_2, iso_3):
            _LANGUAGE_BY_CODE[code] = iso_1
        _LANGUAGE_BY_NAME[_normalize_name(primary_name)] = iso_1
        for variant in variants:
            _LANGUAGE_BY_NAME[_normalize_name(variant)] = iso_1


# Filled once at import; lookups only read the tables
_build_language_mappings()


def _lookup_pycountry(value: str) -> Optional[str]:
    try:
        lang = pycountry.languages.lookup(value)
    except LookupError:
        return None
    code = getattr(lang, "alpha_2", None)
    return code.lower() if code else None


def language_code(language: str) -> Optional[str]:
    """
    Map a language identifier to its ISO 639-1 code.

    Args:
        language: Language code or name

    Returns:
        Two-letter code, or None if the identifier is not a known language
    """
    if not language or not language.strip():
        return None
    value = language.strip()
    # Region subtags are irrelevant for resources ("en-US", "fr_CA")
    primary = re.split(r"[-_]", value, maxsplit=1)[0].lower()

    if primary in _LANGUAGE_BY_CODE:
        return _LANGUAGE_BY_CODE[primary]
    name_key = _normalize_name(value)
    if name_key in _LANGUAGE_BY_NAME:
        return _LANGUAGE_BY_NAME[name_key]
    return _lookup_pycountry(primary) or _lookup_pycountry(value)


def resolve_language(language: str, supported: Optional[List[str]] = None) -> str:
    """
    Resolve a language identifier to a supported catalogue code.

    Args:
        language: Language code or name
        supported: Codes accepted by the caller (any known language if None)

    Returns:
        ISO 639-1 code

    Raises:
        UnknownResourceError: If the language is unknown or not supported
    """
    code = language_code(language)
    if code is None:
        raise UnknownResourceError(f"unknown language {language!r}")
    if supported is not None and code not in supported:
        raise UnknownResourceError(
            f"no resources for language {language!r} (supported: {', '.join(sorted(supported))})"
        )
    return code


def language_name(code: str) -> str:
    """Return the English name of a language code, or the code itself."""
    for iso_1, _iso_2, _iso_3, primary_name, _variants in _LANGUAGE_MAPPINGS:
        if iso_1 == code:
            return primary_name
    try:
        return pycountry.languages.lookup(code).name
    except LookupError:
        return code
