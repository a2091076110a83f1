"""Data models for trademark availability decisions."""

from dataclasses import dataclass, field
from enum import Enum

from inpi_check.availability.status import StatusCategory


@dataclass(frozen=True)
class TrademarkRecord:
    """One filed trademark application/registration.

    Attributes:
        name: Mark denomination as filed
        legal_status: Free-text status string from the source
        number: Process/application number (display only)
        holder: Titleholder name (display only)
        nice_class: Classification code (display only)
    """

    name: str
    legal_status: str
    number: str = ""
    holder: str = ""
    nice_class: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "legal_status": self.legal_status,
            "number": self.number,
            "holder": self.holder,
            "nice_class": self.nice_class,
        }


class Reason(str, Enum):
    """Categorical justification attached to every verdict."""

    NO_RECORD = "no record found"
    NO_MATCH = "no matching record found"
    ALL_TERMINAL = "all matched records are in terminal status"
    ACTIVE_RECORDS = "active or pending record(s) exist"
    FAMOUS_MARK = "famous mark protected in all classes"

    @property
    def message(self) -> str:
        """User-facing message in Portuguese."""
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    Reason.NO_RECORD: "Nenhum registro encontrado.",
    Reason.NO_MATCH: "Nenhum registro correspondente encontrado.",
    Reason.ALL_TERMINAL: "Todas as situações são terminais (permite registro).",
    Reason.ACTIVE_RECORDS: "Há registros em vigor ou em andamento.",
    Reason.FAMOUS_MARK: "Marca de alto renome, protegida em todas as classes.",
}


@dataclass(frozen=True)
class BlockingRecord:
    """A matched record whose status prevents a new filing."""

    record: TrademarkRecord
    category: StatusCategory

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["status_category"] = self.category.value
        return data


@dataclass
class AvailabilityVerdict:
    """Result of an availability decision.

    Attributes:
        query: The trademark name as submitted
        available: Whether the name can be filed
        reason: Categorical justification
        matched_records: Records judged relevant to the query, in input order
        blocking_records: Matched records in a non-terminal status
    """

    query: str
    available: bool
    reason: Reason
    matched_records: list[TrademarkRecord] = field(default_factory=list)
    blocking_records: list[BlockingRecord] = field(default_factory=list)

    @property
    def message(self) -> str:
        return self.reason.message

    @property
    def blocking_categories(self) -> list[StatusCategory]:
        """Distinct status categories of the blocking records."""
        seen: list[StatusCategory] = []
        for b in self.blocking_records:
            if b.category not in seen:
                seen.append(b.category)
        return seen
