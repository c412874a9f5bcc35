"""Unit tests for normalization and light tokenization."""

from __future__ import annotations

import pytest

from queries_resources.text import normalize, strip_diacritics, tokenize_light


def test_normalize_folds_case_diacritics_and_whitespace() -> None:
    """Normalization should lower-case, drop accents and collapse whitespace."""

    assert normalize("  Héllo \t  WORLD\n") == "hello world"
    assert normalize("Île-de-France") == "ile-de-france"
    assert normalize("Straße") == "strasse"


def test_normalize_empty_and_blank_text() -> None:
    """Blank input normalizes to an empty string."""

    assert normalize("") == ""
    assert normalize(" \t\r\n ") == ""


@pytest.mark.parametrize(
    "text",
    [
        "New York",
        "  São   Paulo ",
        "Côte d'Ivoire",
        "ÉTÉ",
        "Straße",
        "ﬁnance",
        "Düsseldorf\r\n",
        "Ǆemal",
    ],
)
def test_normalize_is_idempotent(text: str) -> None:
    """A second normalization pass must not change the result."""

    once = normalize(text)
    assert normalize(once) == once


def test_strip_diacritics_keeps_base_letters() -> None:
    """Combining marks are removed, base letters are kept."""

    assert strip_diacritics("àéîõü") == "aeiou"
    assert strip_diacritics("niño") == "nino"


def test_tokenize_light_splits_on_punctuation() -> None:
    """Apostrophes, hyphens and dots separate tokens and are dropped."""

    assert tokenize_light("coeur d'alene") == ["coeur", "d", "alene"]
    assert tokenize_light("winston-salem") == ["winston", "salem"]
    assert tokenize_light("st. louis") == ["st", "louis"]
    assert tokenize_light("halle (saale)") == ["halle", "saale"]


def test_tokenize_light_keeps_digits_and_handles_empty_text() -> None:
    """Numbers are tokens; empty or punctuation-only text yields nothing."""

    assert tokenize_light("route 66") == ["route", "66"]
    assert tokenize_light("") == []
    assert tokenize_light(" -- ") == []
