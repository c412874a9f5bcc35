"""
Text normalization and light tokenization.

Every key stored in a stem map and every gazetteer entry goes through
normalize(), so lookups must normalize their query the same way.
"""

from __future__ import annotations

import re
import unicodedata
from typing import List

_WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)

# Runs of letters/digits; punctuation, apostrophes and hyphens split tokens
_TOKEN_RE = re.compile(r"[^\W_]+", re.UNICODE)


def strip_diacritics(text: str) -> str:
    """Remove combining marks after canonical decomposition ("é" -> "e")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text: str) -> str:
    """
    Canonicalize text for use as a lookup key.

    Diacritics are stripped, case is folded and whitespace runs are
    collapsed to a single space. The result is stable under a second
    application: normalize(normalize(x)) == normalize(x).

    Args:
        text: Raw text

    Returns:
        Normalized text (possibly empty)
    """
    if not text:
        return ""
    folded = strip_diacritics(text).casefold()
    # casefold() can reintroduce decomposable characters
    folded = strip_diacritics(folded)
    return _WHITESPACE_RE.sub(" ", folded).strip()


def tokenize_light(text: str) -> List[str]:
    """
    Split text into word tokens without any linguistic analysis.

    Args:
        text: Text to split (usually already normalized)

    Returns:
        List of token strings, punctuation removed
    """
    if not text:
        return []
    return _TOKEN_RE.findall(text)
