"""Availability decision engine for Brazilian trademarks.

Pure functions with no I/O: raw records go through the adapter, the
relevant ones are selected and their statuses classified, and the decider
aggregates everything into a verdict.

Usage:
    from inpi_check.availability import decide, records_from_raw

    records = records_from_raw(raw_processos)
    verdict = decide("Túnel Crew", records)
    print(verdict.available, verdict.reason.value)
"""

from inpi_check.availability.adapters import record_from_raw, records_from_raw
from inpi_check.availability.decider import AvailabilityDecider, decide
from inpi_check.availability.famous import FamousMarkList
from inpi_check.availability.matching import MatchPolicy, names_match, select_relevant
from inpi_check.availability.models import (
    AvailabilityVerdict,
    BlockingRecord,
    Reason,
    TrademarkRecord,
)
from inpi_check.availability.status import (
    DEFAULT_TABLE,
    StatusCategory,
    StatusTable,
    is_terminal_status,
)
from inpi_check.availability.text import canonicalize, strip_diacritics_lower

__all__ = [
    # Decision
    "AvailabilityDecider",
    "decide",
    # Models
    "AvailabilityVerdict",
    "BlockingRecord",
    "Reason",
    "TrademarkRecord",
    # Components
    "DEFAULT_TABLE",
    "FamousMarkList",
    "MatchPolicy",
    "StatusCategory",
    "StatusTable",
    "canonicalize",
    "is_terminal_status",
    "names_match",
    "record_from_raw",
    "records_from_raw",
    "select_relevant",
    "strip_diacritics_lower",
]
