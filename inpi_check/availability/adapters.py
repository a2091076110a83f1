"""Normalization of raw upstream records into TrademarkRecord.

Sources expose the same facts under different keys (Infosimples uses
"marca"/"situacao", scraped tables use "denominacao"/"status", and so on).
Everything source-specific is resolved here so the decider only ever sees
TrademarkRecord.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable

from inpi_check.availability.models import TrademarkRecord

logger = logging.getLogger(__name__)

NAME_KEYS = (
    "marca",
    "nome",
    "nome_marca",
    "denominacao",
    "titulo",
    "sinal",
    "mark",
    "name",
    "title",
    "sign",
)
STATUS_KEYS = (
    "situacao",
    "situacao_processual",
    "status",
    "registro",
    "estado",
    "legal_status",
    "situation",
)
NUMBER_KEYS = ("processo", "numero", "numero_processo", "number")
HOLDER_KEYS = ("titular", "titulares", "holder", "owner")
CLASS_KEYS = ("classe", "classe_nice", "classe_ncl", "nice_class", "class")


def _as_text(value: Any) -> str:
    """Coerce a scalar or a list of scalars to text; anything else is ""."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        parts = [_as_text(v) for v in value]
        return "; ".join(p for p in parts if p)
    return ""


def _first(raw: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        text = _as_text(raw.get(key))
        if text:
            return text
    return ""


def record_from_raw(raw: Mapping[str, Any]) -> TrademarkRecord:
    """Build a TrademarkRecord from a raw source record.

    Fields that cannot be resolved become empty strings, which keeps the
    record out of the relevant set instead of failing the whole decision.

    Args:
        raw: Raw record dictionary

    Returns:
        TrademarkRecord
    """
    return TrademarkRecord(
        name=_first(raw, NAME_KEYS),
        legal_status=_first(raw, STATUS_KEYS),
        number=_first(raw, NUMBER_KEYS),
        holder=_first(raw, HOLDER_KEYS),
        nice_class=_first(raw, CLASS_KEYS),
    )


def records_from_raw(items: Iterable[Any]) -> list[TrademarkRecord]:
    """Normalize a sequence of raw records, skipping non-mapping items."""
    records = []
    for item in items:
        if not isinstance(item, Mapping):
            logger.debug("Skipping malformed record: %r", item)
            continue
        records.append(record_from_raw(item))
    return records
