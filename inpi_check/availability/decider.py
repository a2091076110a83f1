"""Availability decision for a queried trademark name.

Rule, in order:

1. No records at all -> available.
2. No record relevant to the query -> available.
3. Every relevant record in a terminal status -> available.
4. Any relevant record in a non-terminal status -> unavailable.

A single active match vetoes availability no matter how many other
matches are terminal. A false "available" costs a rejected filing, so the
asymmetry is intentional.
"""

import logging
from typing import Sequence

from inpi_check.availability.famous import FamousMarkList
from inpi_check.availability.matching import MatchPolicy, select_relevant
from inpi_check.availability.models import (
    AvailabilityVerdict,
    BlockingRecord,
    Reason,
    TrademarkRecord,
)
from inpi_check.availability.status import DEFAULT_TABLE, StatusTable

logger = logging.getLogger(__name__)


def decide(
    query: str,
    records: Sequence[TrademarkRecord],
    policy: MatchPolicy = MatchPolicy.LOOSE,
    table: StatusTable = DEFAULT_TABLE,
) -> AvailabilityVerdict:
    """Decide whether a trademark name is available for registration.

    Args:
        query: Queried trademark name
        records: All records returned for the query (every page merged)
        policy: Matching strictness
        table: Status classification table

    Returns:
        AvailabilityVerdict
    """
    if not records:
        return AvailabilityVerdict(query=query, available=True, reason=Reason.NO_RECORD)

    relevant = select_relevant(query, records, policy)
    if not relevant:
        logger.debug("No relevant record for %r among %d", query, len(records))
        return AvailabilityVerdict(query=query, available=True, reason=Reason.NO_MATCH)

    blocking = []
    for record in relevant:
        category = table.classify(record.legal_status)
        if category.blocks:
            blocking.append(BlockingRecord(record=record, category=category))

    logger.debug(
        "Query %r: %d relevant, %d blocking (table %s)",
        query,
        len(relevant),
        len(blocking),
        table.version,
    )

    if blocking:
        return AvailabilityVerdict(
            query=query,
            available=False,
            reason=Reason.ACTIVE_RECORDS,
            matched_records=relevant,
            blocking_records=blocking,
        )

    return AvailabilityVerdict(
        query=query,
        available=True,
        reason=Reason.ALL_TERMINAL,
        matched_records=relevant,
    )


class AvailabilityDecider:
    """Configured availability decider.

    Bundles the matching policy, the status table and the optional
    famous-mark pre-check so call sites don't pass them around.

    Usage:
        decider = AvailabilityDecider(policy=MatchPolicy.EXACT)
        verdict = decider.decide("ACME", records)
        print(verdict.available, verdict.reason.value)
    """

    def __init__(
        self,
        policy: MatchPolicy = MatchPolicy.LOOSE,
        table: StatusTable = DEFAULT_TABLE,
        famous_marks: FamousMarkList | None = None,
    ):
        """Initialize decider.

        Args:
            policy: Matching strictness
            table: Status classification table
            famous_marks: Optional famous-mark list; None disables the pre-check
        """
        self.policy = policy
        self.table = table
        self.famous_marks = famous_marks

    def precheck(self, query: str) -> AvailabilityVerdict | None:
        """Return an unavailable verdict if the query is a famous mark."""
        if self.famous_marks is not None and self.famous_marks.is_famous(query):
            logger.debug("Query %r is a famous mark", query)
            return AvailabilityVerdict(
                query=query, available=False, reason=Reason.FAMOUS_MARK
            )
        return None

    def decide(self, query: str, records: Sequence[TrademarkRecord]) -> AvailabilityVerdict:
        """Run the pre-check, then the availability rule."""
        verdict = self.precheck(query)
        if verdict is not None:
            return verdict
        return decide(query, records, policy=self.policy, table=self.table)
