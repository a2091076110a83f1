"""Tests for relevant-record selection."""

import pytest

from inpi_check.availability.matching import MatchPolicy, names_match, select_relevant
from inpi_check.availability.models import TrademarkRecord


def _record(name: str, status: str = "Registro de marca em vigor") -> TrademarkRecord:
    return TrademarkRecord(name=name, legal_status=status)


@pytest.mark.parametrize(
    "query, name, loose, exact",
    [
        ("Túnel Crew", "TUNEL-CREW", True, True),
        ("ACME", "ACME SOLUTIONS", True, False),
        ("ACME SOLUTIONS", "acme", True, False),
        ("Sol", "Girassol", True, False),
        ("NATURA", "AVON", False, False),
    ],
    ids=["same_mark", "query_in_name", "name_in_query", "short_name", "unrelated"],
)
def test_names_match_policies(query: str, name: str, loose: bool, exact: bool) -> None:
    """Test loose and exact policies on the same pairs."""
    assert names_match(query, name, MatchPolicy.LOOSE) is loose
    assert names_match(query, name, MatchPolicy.EXACT) is exact


@pytest.mark.parametrize("policy", list(MatchPolicy))
@pytest.mark.parametrize("query, name", [("", ""), ("!!!", "???"), ("ACME", ""), ("", "ACME")])
def test_empty_names_never_match(query: str, name: str, policy: MatchPolicy) -> None:
    """Test an empty canonical form never matches, not even another empty one."""
    assert names_match(query, name, policy) is False


def test_select_relevant_empty_records() -> None:
    """Test an empty record list gives an empty selection."""
    assert select_relevant("NATURA", []) == []


def test_select_relevant_no_match() -> None:
    """Test no matching record gives an empty selection."""
    records = [_record("AVON"), _record("BOTICARIO")]
    assert select_relevant("NATURA", records) == []


def test_select_relevant_preserves_order() -> None:
    """Test relevant records come back in input order."""
    records = [
        _record("NATURA EKOS"),
        _record("AVON"),
        _record("Natura"),
        _record("NAT"),
    ]
    relevant = select_relevant("natura", records)
    assert [r.name for r in relevant] == ["NATURA EKOS", "Natura", "NAT"]


def test_select_relevant_exact_policy() -> None:
    """Test exact policy keeps only canonical equals."""
    records = [_record("NATURA EKOS"), _record("Natura"), _record("NATURA!")]
    relevant = select_relevant("NATURA", records, MatchPolicy.EXACT)
    assert [r.name for r in relevant] == ["Natura", "NATURA!"]


def test_match_policy_parse() -> None:
    """Test policies parse from config text."""
    assert MatchPolicy.parse("EXACT") is MatchPolicy.EXACT
    assert MatchPolicy.parse(" loose ") is MatchPolicy.LOOSE
    assert MatchPolicy.parse(MatchPolicy.EXACT) is MatchPolicy.EXACT


def test_match_policy_parse_unknown() -> None:
    """Test unknown policy names are rejected."""
    with pytest.raises(ValueError, match="Unknown match policy"):
        MatchPolicy.parse("fuzzy")
