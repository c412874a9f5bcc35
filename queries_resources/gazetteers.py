"""
Gazetteers: closed sets of known phrases (cities, countries, stop words...).

Each line of a gazetteer file is one phrase. A phrase is stored in
canonical form: normalized, split with the light tokenizer, every token
passed through a stemming function, then joined with single spaces.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, FrozenSet, Optional, Set

from .errors import ParseError, ResourceIOError
from .stems import no_stem
from .text import normalize, tokenize_light

StemFunction = Callable[[str], str]


def canonicalize_phrase(phrase: str, stem_fn: StemFunction = no_stem) -> str:
    """
    Turn a phrase into the form used for gazetteer entries.

    Args:
        phrase: Raw phrase text
        stem_fn: Function applied to every token

    Returns:
        Canonical entry, or an empty string if nothing is left after normalization
    """
    normalized = normalize(phrase)
    if not normalized:
        return ""
    return " ".join(stem_fn(token) for token in tokenize_light(normalized))


def parse_gazetteer(
    stream: BinaryIO,
    stem_fn: StemFunction = no_stem,
    *,
    source: Optional[str] = None,
) -> FrozenSet[str]:
    """
    Parse a line-oriented gazetteer file into a set of canonical entries.

    Blank lines (after normalization) are skipped.

    Args:
        stream: Binary stream, one UTF-8 phrase per line
        stem_fn: Stemming function (no_stem for unstemmed gazetteers)
        source: Resource key, used in error messages

    Returns:
        Frozen set of canonical entries

    Raises:
        ParseError: If a line is not valid UTF-8
        ResourceIOError: If the stream cannot be read
    """
    entries: Set[str] = set()
    line_num = 0
    try:
        for line_num, raw in enumerate(stream, 1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(f"invalid UTF-8 data ({exc.reason})", source=source, line=line_num) from exc
            entry = canonicalize_phrase(line, stem_fn)
            if entry:
                entries.add(entry)
    except OSError as exc:
        raise ResourceIOError(f"read failed after line {line_num}: {exc}", source=source) from exc
    return frozenset(entries)
