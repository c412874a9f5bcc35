"""Unit tests for gazetteer parsing and phrase canonicalization."""

from __future__ import annotations

import io

import pytest

from queries_resources.errors import ParseError, ResourceIOError
from queries_resources.gazetteers import canonicalize_phrase, parse_gazetteer
from queries_resources.stems import Stemmer, no_stem


class _BrokenLines:
    """Line stream that fails after the first line."""

    def __iter__(self):
        yield b"paris\n"
        raise OSError("truncated resource")


def test_parse_gazetteer_skips_blank_lines() -> None:
    """New York / blank / Paris yields two canonical entries."""

    entries = parse_gazetteer(io.BytesIO(b"New York\n\nParis\n"), no_stem)

    assert entries == frozenset({"new york", "paris"})


def test_parse_gazetteer_whitespace_only_lines_do_not_count() -> None:
    """Lines that normalize to nothing add no entry and do not change the size."""

    with_blanks = parse_gazetteer(io.BytesIO(b"Paris\n   \n\t\nLondon\n\n"))
    without_blanks = parse_gazetteer(io.BytesIO(b"Paris\nLondon\n"))

    assert with_blanks == without_blanks
    assert len(with_blanks) == 2


def test_parse_gazetteer_tokenizes_punctuation() -> None:
    """Entries are space-joined light tokens of the normalized line."""

    entries = parse_gazetteer(io.BytesIO("Coeur d'Alene\nSaint-Étienne\nSt.  Louis\r\n".encode("utf-8")))

    assert entries == frozenset({"coeur d alene", "saint etienne", "st louis"})


def test_parse_gazetteer_deduplicates_entries() -> None:
    """Lines that canonicalize identically collapse into one entry."""

    entries = parse_gazetteer(io.BytesIO("Zürich\nzurich\nZURICH\n".encode("utf-8")))

    assert entries == frozenset({"zurich"})


def test_parse_gazetteer_applies_stem_function_per_token() -> None:
    """Each token is stemmed individually before joining."""

    stemmer = Stemmer({"united": "unite", "states": "state"})
    entries = parse_gazetteer(io.BytesIO(b"United States\nVirgin Islands\n"), stemmer)

    assert entries == frozenset({"unite state", "virgin islands"})


def test_stemmed_entries_match_per_token_stems_of_unstemmed_entries() -> None:
    """For every plain entry, the stemmed set holds the joined per-token stems."""

    data = b"United States\nNew York\nCities of Gold\n"
    stemmer = Stemmer({"united": "unite", "states": "state", "cities": "city"})

    plain = parse_gazetteer(io.BytesIO(data))
    stemmed = parse_gazetteer(io.BytesIO(data), stemmer)

    expected = {" ".join(stemmer(token) for token in entry.split(" ")) for entry in plain}
    assert stemmed == expected


def test_canonicalize_phrase_matches_entry_format() -> None:
    assert canonicalize_phrase("  NEW   york!! ") == "new york"
    assert canonicalize_phrase("   ") == ""


def test_parse_gazetteer_rejects_invalid_utf8() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_gazetteer(io.BytesIO(b"paris\n\xff\n"), source="fr/cities_france.txt")

    assert exc_info.value.line == 2
    assert exc_info.value.source == "fr/cities_france.txt"


def test_parse_gazetteer_reports_io_failures() -> None:
    with pytest.raises(ResourceIOError, match="truncated resource"):
        parse_gazetteer(_BrokenLines(), source="en/cities_us.txt")
