"""Availability service: broker query, decision and response envelope.

This module wires the upstream client to the decision engine and wraps
the verdict in the response envelope returned to callers.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Protocol

from inpi_check.availability import (
    AvailabilityDecider,
    AvailabilityVerdict,
    FamousMarkList,
    MatchPolicy,
    StatusTable,
    records_from_raw,
)
from inpi_check.broker import (
    BrokerResult,
    MockInfosimplesClient,
    create_client_from_settings,
)
from inpi_check.config import Settings

logger = logging.getLogger(__name__)


class TrademarkSource(Protocol):
    """Upstream client interface used by the service."""

    search_type: str

    def search(self, name: str) -> BrokerResult: ...

    def test_connection(self) -> tuple[bool, str]: ...


@dataclass
class ResponseMetadata:
    """Metadata attached to every response.

    Attributes:
        source: Data source label
        search_type: Upstream search mode
        timestamp: When the check finished (UTC)
        elapsed_ms: Total check duration in milliseconds
        pages: Number of result pages collected
    """

    source: str
    search_type: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    elapsed_ms: int = 0
    pages: int = 0

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "search_type": self.search_type,
            "timestamp": self.timestamp.isoformat(),
            "elapsed_ms": self.elapsed_ms,
            "pages": self.pages,
        }


@dataclass
class AvailabilityResponse:
    """Response envelope for an availability check."""

    verdict: AvailabilityVerdict
    metadata: ResponseMetadata
    expose_evidence: bool = True

    @property
    def query(self) -> str:
        return self.verdict.query

    @property
    def available(self) -> bool:
        return self.verdict.available

    @property
    def evidence(self) -> list[dict]:
        """Blocking records, or matched records when none block."""
        if not self.expose_evidence:
            return []
        if self.verdict.blocking_records:
            return [b.to_dict() for b in self.verdict.blocking_records]
        return [r.to_dict() for r in self.verdict.matched_records]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "query": self.verdict.query,
            "available": self.verdict.available,
            "reason": self.verdict.reason.value,
            "message": self.verdict.message,
            "blocking_categories": [c.value for c in self.verdict.blocking_categories],
            "evidence": self.evidence,
            "metadata": self.metadata.to_dict(),
        }


class AvailabilityService:
    """Checks trademark availability against an upstream source.

    Usage:
        service = create_service_from_settings(load_settings())
        response = service.check("Túnel Crew")
        print(response.available, response.verdict.message)
    """

    def __init__(
        self,
        client: TrademarkSource,
        decider: AvailabilityDecider | None = None,
        source_name: str = "INPI via Infosimples",
        expose_evidence: bool = True,
    ):
        """Initialize service.

        Args:
            client: Upstream client returning raw INPI processes
            decider: Configured decider (loose matching, default table if None)
            source_name: Source label for response metadata
            expose_evidence: Include structured record evidence in responses
        """
        self.client = client
        self.decider = decider or AvailabilityDecider()
        self.source_name = source_name
        self.expose_evidence = expose_evidence

    def check(self, query: str) -> AvailabilityResponse:
        """Check a trademark name.

        Args:
            query: Trademark name as typed by the user

        Returns:
            AvailabilityResponse

        Raises:
            ValueError: If the query is empty after trimming
            BrokerError: If the upstream search fails
        """
        if not isinstance(query, str) or not query.strip():
            raise ValueError("Trademark name must not be empty")

        query = query.strip()
        started = time.perf_counter()
        pages = 0

        verdict = self.decider.precheck(query)
        if verdict is None:
            result = self.client.search(query)
            pages = result.pages
            records = records_from_raw(result.processes)
            verdict = self.decider.decide(query, records)

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "Checked %r: available=%s reason=%s (%d ms)",
            query,
            verdict.available,
            verdict.reason.value,
            elapsed_ms,
        )

        return AvailabilityResponse(
            verdict=verdict,
            metadata=ResponseMetadata(
                source=self.source_name,
                search_type=self.client.search_type,
                elapsed_ms=elapsed_ms,
                pages=pages,
            ),
            expose_evidence=self.expose_evidence,
        )

    def check_batch(
        self,
        queries: list[str],
        progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> list[AvailabilityResponse]:
        """Check multiple names in sequence.

        Args:
            queries: Names to check
            progress_callback: Optional callback(name, current, total)

        Returns:
            Responses in query order
        """
        responses = []
        total = len(queries)

        for i, query in enumerate(queries, 1):
            if progress_callback:
                progress_callback(query, i, total)
            responses.append(self.check(query))

        return responses

    @property
    def is_using_mock(self) -> bool:
        """Check if the service reads the mock register."""
        return isinstance(self.client, MockInfosimplesClient)

    def test_connection(self) -> tuple[bool, str]:
        """Test upstream connection."""
        return self.client.test_connection()


def create_decider_from_settings(settings: Settings) -> AvailabilityDecider:
    """Build the decider from the availability section of the settings."""
    config = settings.availability

    famous = None
    if config.famous_marks.enabled:
        if config.famous_marks.names:
            famous = FamousMarkList(config.famous_marks.names, config.famous_marks.as_of)
        else:
            famous = FamousMarkList()

    return AvailabilityDecider(
        policy=MatchPolicy.parse(config.match_policy),
        table=StatusTable.from_config(
            terminal_stems=config.terminal_stems,
            blocking_stems=config.blocking_stems,
            version=config.table_version,
        ),
        famous_marks=famous,
    )


def create_service_from_settings(
    settings: Settings,
    match_policy: str | None = None,
) -> AvailabilityService:
    """Factory function to create the service.

    Args:
        settings: Loaded settings
        match_policy: Override of the configured match policy

    Returns:
        Configured AvailabilityService (mock register when no token is set)
    """
    decider = create_decider_from_settings(settings)
    if match_policy:
        decider.policy = MatchPolicy.parse(match_policy)

    client = create_client_from_settings(
        token=settings.infosimples.token,
        timeout=settings.infosimples.timeout_seconds,
        search_type=settings.infosimples.search_type,
        base_url=settings.infosimples.base_url,
        max_pages=settings.infosimples.max_pages,
    )

    return AvailabilityService(
        client=client,
        decider=decider,
        source_name="MOCK" if isinstance(client, MockInfosimplesClient) else settings.source_name,
        expose_evidence=settings.availability.expose_evidence,
    )
