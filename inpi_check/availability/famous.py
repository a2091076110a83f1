"""Famous-mark pre-check.

Marks with "alto renome" status are protected in every Nice class, so a
query equal to one of them is unavailable whatever the register says for
the specific filing. The list is curated by hand and dated; keep it in
config and review it against the INPI register.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from inpi_check.availability.text import canonicalize

DEFAULT_FAMOUS_MARKS_AS_OF = date(2025, 1, 15)

DEFAULT_FAMOUS_MARKS: tuple[str, ...] = (
    "Coca-Cola",
    "Natura",
    "Pirelli",
    "Sadia",
    "Perdigão",
    "Petrobras",
    "Havaianas",
    "Nestlé",
    "Itaú",
    "Bradesco",
    "Skol",
    "Brahma",
    "Globo",
    "Chanel",
    "Nike",
)


@dataclass
class FamousMarkList:
    """Dated list of well-known marks.

    Attributes:
        names: Mark names as written in the register
        as_of: Date the list was last reviewed
    """

    names: Iterable[str] = DEFAULT_FAMOUS_MARKS
    as_of: date | None = DEFAULT_FAMOUS_MARKS_AS_OF
    _canonical: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.names = tuple(self.names)
        self._canonical = frozenset(c for c in map(canonicalize, self.names) if c)

    def is_famous(self, query: str) -> bool:
        """Check if the query is one of the listed marks (exact canonical match)."""
        target = canonicalize(query)
        return bool(target) and target in self._canonical

    def __len__(self) -> int:
        return len(self._canonical)
