"""Classification of INPI legal-status strings.

A status is terminal (does not block a new filing) when it contains one of
the terminal stems. Everything else blocks, including statuses that match
no stem at all: an unknown status is never read as permissive.
"""

from dataclasses import dataclass, field
from enum import Enum

from inpi_check.availability.text import strip_diacritics_lower

TABLE_VERSION = "2025.1"

# Stems of statuses that no longer block registration
TERMINAL_STEMS: tuple[str, ...] = (
    "indeferid",  # denied
    "negad",  # denied
    "arquiv",  # archived/shelved
    "extint",  # extinguished
    "caducad",  # lapsed
    "cancelad",  # cancelled
    "nulidade procedent",  # nullity upheld
    "nulo",  # void
    "renunci",  # renounced
)

# Stems of statuses known to block registration
BLOCKING_STEMS: tuple[str, ...] = (
    "vigor",
    "registro",
    "deferid",
    "exame",
    "publicad",
    "sobrestad",
    "alto renome",
    "notoriamente",
    "oposicao",
    "andamento",
    "pedido",
)


class StatusCategory(str, Enum):
    """Category of a legal status."""

    TERMINAL = "terminal"
    BLOCKING = "blocking"
    UNKNOWN = "unknown"

    @property
    def blocks(self) -> bool:
        """Whether a record in this category prevents a new filing."""
        return self is not StatusCategory.TERMINAL


def _normalize_stems(stems) -> tuple[str, ...]:
    normalized = (strip_diacritics_lower(s) for s in stems)
    return tuple(s for s in normalized if s)


@dataclass(frozen=True)
class StatusTable:
    """Versioned status classification table.

    Attributes:
        terminal_stems: Stems marking a non-blocking (terminal) status
        blocking_stems: Stems marking a known blocking status
        version: Table version label
    """

    terminal_stems: tuple[str, ...] = TERMINAL_STEMS
    blocking_stems: tuple[str, ...] = BLOCKING_STEMS
    version: str = TABLE_VERSION
    _terminal: tuple[str, ...] = field(init=False, repr=False, compare=False)
    _blocking: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_terminal", _normalize_stems(self.terminal_stems))
        object.__setattr__(self, "_blocking", _normalize_stems(self.blocking_stems))

    @classmethod
    def from_config(
        cls,
        terminal_stems: list[str] | None = None,
        blocking_stems: list[str] | None = None,
        version: str | None = None,
    ) -> "StatusTable":
        """Build a table, falling back to the defaults for missing parts."""
        return cls(
            terminal_stems=tuple(terminal_stems) if terminal_stems else TERMINAL_STEMS,
            blocking_stems=tuple(blocking_stems) if blocking_stems is not None else BLOCKING_STEMS,
            version=version or TABLE_VERSION,
        )

    def classify(self, status: object) -> StatusCategory:
        """Classify a legal-status string.

        Terminal stems win over blocking stems, so "Pedido definitivamente
        arquivado" is terminal.

        Args:
            status: Free-text status (non-strings are treated as empty)

        Returns:
            StatusCategory
        """
        text = strip_diacritics_lower(status)
        if not text:
            return StatusCategory.UNKNOWN

        if any(stem in text for stem in self._terminal):
            return StatusCategory.TERMINAL
        if any(stem in text for stem in self._blocking):
            return StatusCategory.BLOCKING
        return StatusCategory.UNKNOWN

    def is_terminal(self, status: object) -> bool:
        """Check if a status no longer blocks registration."""
        return self.classify(status) is StatusCategory.TERMINAL


DEFAULT_TABLE = StatusTable()


def is_terminal_status(status: object, table: StatusTable = DEFAULT_TABLE) -> bool:
    """Check if a legal status is terminal under the given table."""
    return table.is_terminal(status)
