"""
Stem maps built from inflection and lexeme tables.

Two ';'-separated shapes feed a language's stem map:

- inflection tables: ``inflected;base`` (one form per row)
- lexeme tables: ``base;form1,form2,...`` (all forms of a lexeme per row)

Both sides are normalized. When both tables exist for a language the
lexeme table is merged last, so its entries win on key collisions.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Dict, Mapping, Optional

from .records import SEMICOLON, iter_records
from .text import normalize

logger = logging.getLogger(__name__)


def no_stem(word: str) -> str:
    """Identity stemming function used by unstemmed gazetteers."""
    return word


def parse_inflections(stream: BinaryIO, *, source: Optional[str] = None) -> Dict[str, str]:
    """
    Parse an inflection table into {normalized inflected form: normalized base}.

    Args:
        stream: Binary stream of ``inflected;base`` rows
        source: Resource key, used in error messages

    Returns:
        Dictionary mapping inflected forms to base forms
    """
    result: Dict[str, str] = {}
    for inflected, base in iter_records(stream, SEMICOLON, source=source):
        result[normalize(inflected)] = normalize(base)
    return result


def parse_lexemes(stream: BinaryIO, *, source: Optional[str] = None) -> Dict[str, str]:
    """
    Parse a lexeme table into {normalized form: normalized base}.

    Each row holds a base form and the comma-joined list of its forms.
    The base form itself is only present as a key if the row lists it.

    Args:
        stream: Binary stream of ``base;form1,form2,...`` rows
        source: Resource key, used in error messages

    Returns:
        Dictionary mapping every listed form to its base form
    """
    result: Dict[str, str] = {}
    for base, forms in iter_records(stream, SEMICOLON, source=source):
        normalized_base = normalize(base)
        for form in forms.split(","):
            result[normalize(form)] = normalized_base
    return result


def build_stems(
    inflections: Optional[BinaryIO] = None,
    lexemes: Optional[BinaryIO] = None,
    *,
    inflections_source: Optional[str] = None,
    lexemes_source: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build a language's stem map from its inflection and lexeme tables.

    Either table may be missing (German only ships verb lexemes).
    Lexeme entries overwrite inflection entries with the same key.

    Returns:
        Dictionary mapping normalized forms to normalized stems
    """
    result: Dict[str, str] = {}
    if inflections is not None:
        result.update(parse_inflections(inflections, source=inflections_source))
    if lexemes is not None:
        lexeme_map = parse_lexemes(lexemes, source=lexemes_source)
        overridden = sum(1 for key in lexeme_map if key in result and result[key] != lexeme_map[key])
        if overridden:
            logger.debug("%d inflection entries overridden by %s", overridden, lexemes_source or "lexeme table")
        result.update(lexeme_map)
    return result


class Stemmer:
    """
    Callable stemming function backed by a stem map.

    Words missing from the map are returned unchanged.
    """

    def __init__(self, stem_map: Mapping[str, str]) -> None:
        self.stem_map = stem_map

    def __call__(self, word: str) -> str:
        return self.stem_map.get(word, word)

    def __len__(self) -> int:
        return len(self.stem_map)

    def __repr__(self) -> str:
        return f"Stemmer({len(self.stem_map)} entries)"
