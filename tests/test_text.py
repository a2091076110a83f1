"""Tests for trademark name canonicalization."""

import pytest

from inpi_check.availability.text import canonicalize, strip_diacritics_lower


@pytest.mark.parametrize(
    "text",
    ["Túnel Crew", "TUNEL CREW", "tunel-crew", "  Tunel.Crew  ", "TÚNEL_CREW"],
)
def test_variants_share_canonical_form(text: str) -> None:
    """Test diacritics, case, spacing and punctuation are ignored."""
    assert canonicalize(text) == "tunelcrew"


@pytest.mark.parametrize(
    "text",
    ["Ação & Cia.", "COCA-COLA", "Marca 2025!", "", "ÇÃÕÉ ü ñ", "東京 Tokyo"],
)
def test_canonicalize_is_idempotent(text: str) -> None:
    """Test canonicalizing twice equals canonicalizing once."""
    once = canonicalize(text)
    assert canonicalize(once) == once


def test_canonicalize_keeps_digits() -> None:
    """Test digits survive canonicalization."""
    assert canonicalize("XYZ Minha Marca 2025") == "xyzminhamarca2025"


def test_canonicalize_drops_non_ascii_letters() -> None:
    """Test letters outside a-z without a decomposition are removed."""
    assert canonicalize("東京 Tokyo") == "tokyo"


@pytest.mark.parametrize("value", [None, 123, 4.5, ["a"], {"marca": "x"}])
def test_canonicalize_non_string_is_empty(value: object) -> None:
    """Test non-string input canonicalizes to an empty string."""
    assert canonicalize(value) == ""


def test_strip_diacritics_lower_keeps_punctuation() -> None:
    """Test status normalization keeps spaces and punctuation."""
    assert strip_diacritics_lower("  Nulidade PROCEDENTE - Renúncia ") == (
        "nulidade procedente - renuncia"
    )
