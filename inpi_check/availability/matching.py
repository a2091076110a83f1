"""Selection of records relevant to a queried trademark name."""

from enum import Enum
from typing import Iterable

from inpi_check.availability.models import TrademarkRecord
from inpi_check.availability.text import canonicalize


class MatchPolicy(str, Enum):
    """How strictly a record name must match the query.

    LOOSE accepts canonical equality or containment in either direction.
    EXACT accepts canonical equality only, which avoids hits such as
    "Sol" inside "Girassol".
    """

    LOOSE = "loose"
    EXACT = "exact"

    @classmethod
    def parse(cls, value: "str | MatchPolicy") -> "MatchPolicy":
        """Parse a policy from config text (case-insensitive)."""
        if isinstance(value, MatchPolicy):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown match policy: '{value}'. Available: {available}"
            ) from None


def _canonical_match(query: str, name: str, policy: MatchPolicy) -> bool:
    # Two empty names never match
    if not query or not name:
        return False
    if query == name:
        return True
    if policy is MatchPolicy.EXACT:
        return False
    return query in name or name in query


def names_match(query: str, name: str, policy: MatchPolicy = MatchPolicy.LOOSE) -> bool:
    """Check whether a record name refers to the queried mark.

    Args:
        query: Queried trademark name
        name: Record name
        policy: Matching strictness

    Returns:
        True if the names match under the policy
    """
    return _canonical_match(canonicalize(query), canonicalize(name), policy)


def select_relevant(
    query: str,
    records: Iterable[TrademarkRecord],
    policy: MatchPolicy = MatchPolicy.LOOSE,
) -> list[TrademarkRecord]:
    """Filter records down to those relevant to the query.

    Input order is preserved. An empty input or no match yields an empty
    list, never an error.

    Args:
        query: Queried trademark name
        records: Candidate records
        policy: Matching strictness

    Returns:
        Relevant records
    """
    target = canonicalize(query)
    return [
        r for r in records if _canonical_match(target, canonicalize(r.name), policy)
    ]
