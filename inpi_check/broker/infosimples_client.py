"""Infosimples client for INPI trademark searches.

Infosimples is a paid proxy in front of the INPI trademark register. The
client posts the query, walks every result page and returns the merged
raw process list for the availability engine.

API Documentation: https://api.infosimples.com/consultas/docs/inpi/marcas

Response shape (abridged):
    {
        "code": 200,
        "code_message": "...",
        "data": [{"total_paginas": 2, "processos": [{"marca": ..., "situacao": ...}]}]
    }
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import requests

from inpi_check.availability.text import canonicalize
from inpi_check.broker.errors import (
    BrokerError,
    ConfigurationMissingError,
    UpstreamRejectedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

# Infosimples codes meaning the INPI site itself is offline
INPI_DOWN_CODES = frozenset({612, 615})


@dataclass
class BrokerResult:
    """Merged result of a multi-page broker search.

    Attributes:
        processes: Raw process records from every page, in page order
        pages: Number of pages collected
    """

    processes: list[dict[str, Any]] = field(default_factory=list)
    pages: int = 1


def extract_processes(data: Any) -> list[dict[str, Any]]:
    """Flatten the "processos" lists of every data block."""
    if not isinstance(data, list):
        return []
    processes: list[dict[str, Any]] = []
    for block in data:
        if isinstance(block, dict):
            processes.extend(block.get("processos") or [])
    return processes


def extract_total_pages(payload: dict[str, Any]) -> int:
    """Read the page count from the first data block or the top level."""
    data = payload.get("data")
    total = None
    if isinstance(data, list) and data and isinstance(data[0], dict):
        total = data[0].get("total_paginas")
    total = total or payload.get("total_paginas") or 1
    try:
        return max(1, int(total))
    except (TypeError, ValueError):
        return 1


class InfosimplesClient:
    """Client for the Infosimples INPI trademark search.

    Usage:
        client = InfosimplesClient(token="your-token")
        result = client.search("NATURA")
        print(result.pages, len(result.processes))
    """

    DEFAULT_URL = "https://api.infosimples.com/api/v2/consultas/inpi/marcas"

    def __init__(
        self,
        token: str | None,
        timeout: int = 20,
        search_type: str = "exata",
        base_url: str | None = None,
        max_pages: int = 50,
    ):
        """Initialize Infosimples client.

        Args:
            token: Infosimples API token
            timeout: Request timeout in seconds
            search_type: Infosimples search mode ("exata" or "radical")
            base_url: Override the endpoint URL
            max_pages: Largest page count accepted from the broker
        """
        self._token = token
        self._timeout = timeout
        self._search_type = search_type
        self._url = base_url or self.DEFAULT_URL
        self._max_pages = max_pages
        self._session = requests.Session()

    @property
    def is_configured(self) -> bool:
        """Check if client has a token configured."""
        return bool(self._token)

    @property
    def search_type(self) -> str:
        return self._search_type

    def _post_page(self, name: str, page: int) -> dict[str, Any]:
        """Fetch one result page.

        Raises:
            BrokerError: On transport failures or an unparsable body
        """
        try:
            response = self._session.post(
                self._url,
                json={
                    "token": self._token,
                    "marca": name,
                    "tipo": self._search_type,
                    "pagina": page,
                },
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()

        except requests.exceptions.Timeout as e:
            raise UpstreamTimeoutError(
                f"Infosimples did not answer within {self._timeout}s"
            ) from e

        except requests.exceptions.ConnectionError as e:
            raise UpstreamUnavailableError(f"Could not reach Infosimples: {e}") from e

        except requests.exceptions.RequestException as e:
            status = None
            if e.response is not None:
                status = e.response.status_code
            error_cls = (
                UpstreamUnavailableError
                if status is not None and status >= 500
                else UpstreamRejectedError
            )
            raise error_cls(f"Infosimples request failed: {e}", status_code=status) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamRejectedError(
                "Infosimples returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamRejectedError("Unexpected Infosimples response", response=payload)

        return payload

    @staticmethod
    def _check_code(payload: dict[str, Any]) -> None:
        code = payload.get("code")
        if code in INPI_DOWN_CODES:
            raise UpstreamUnavailableError("INPI is offline", code=code, response=payload)
        if code != 200:
            raise UpstreamRejectedError(
                payload.get("code_message") or "Infosimples error",
                code=code,
                response=payload,
            )

    @staticmethod
    def _data_blocks(payload: dict[str, Any]) -> list[Any]:
        data = payload.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise UpstreamRejectedError("Unexpected Infosimples response", response=payload)
        return data

    def search(self, name: str) -> BrokerResult:
        """Search INPI for a trademark name across every result page.

        Args:
            name: Trademark name to search for

        Returns:
            BrokerResult with all processes merged

        Raises:
            ConfigurationMissingError: If no token is configured
            BrokerError: If any page fails
        """
        if not self.is_configured:
            raise ConfigurationMissingError("Infosimples token not configured")

        first = self._post_page(name, 1)
        self._check_code(first)

        blocks = self._data_blocks(first)
        total_pages = extract_total_pages(first)
        if total_pages > self._max_pages:
            raise UpstreamRejectedError(
                f"Infosimples reported {total_pages} pages (limit {self._max_pages})",
                response=first,
            )
        logger.info("Infosimples: %r returned %d page(s)", name, total_pages)

        for page in range(2, total_pages + 1):
            payload = self._post_page(name, page)
            # A missing page could hide a blocking record, so it fails the search
            self._check_code(payload)
            blocks.extend(self._data_blocks(payload))

        return BrokerResult(processes=extract_processes(blocks), pages=total_pages)

    def test_connection(self) -> tuple[bool, str]:
        """Test API connection and token.

        Returns:
            Tuple of (success, message)
        """
        if not self.is_configured:
            return False, "Client not configured - missing token"

        try:
            self.search("TESTE")
            return True, "Connection successful"
        except BrokerError as e:
            return False, f"{e.category}: {e.message}"


class MockInfosimplesClient:
    """Mock Infosimples client for demos and tests.

    Returns records from a small in-memory register without any network
    access.
    """

    search_type = "exata"

    def __init__(self, processes: list[dict[str, Any]] | None = None) -> None:
        """Initialize mock client.

        Args:
            processes: Register to search; a demo register when None
        """
        if processes is None:
            processes = [
                {
                    "marca": "NATURA",
                    "processo": "006545120",
                    "situacao": "Registro de marca em vigor",
                    "titular": "Natura Cosméticos S.A.",
                    "classe": "NCL(11) 03",
                },
                {
                    "marca": "NATURA",
                    "processo": "817554291",
                    "situacao": "Alto Renome",
                    "titular": "Natura Cosméticos S.A.",
                    "classe": "NCL(11) 03",
                },
                {
                    "marca": "TÚNEL CREW",
                    "processo": "921004477",
                    "situacao": "Registro de marca em vigor",
                    "titular": "Túnel Produções Ltda",
                    "classe": "NCL(12) 41",
                },
                {
                    "marca": "TÚNEL CREW",
                    "processo": "915332108",
                    "situacao": "Pedido definitivamente arquivado",
                    "titular": "João da Silva",
                    "classe": "NCL(11) 25",
                },
                {
                    "marca": "COCA-COLA",
                    "processo": "002413000",
                    "situacao": "Alto Renome",
                    "titular": "The Coca-Cola Company",
                    "classe": "NCL(11) 32",
                },
                {
                    "marca": "ACME SOLUTIONS",
                    "processo": "908771230",
                    "situacao": "Arquivado",
                    "titular": "Acme Ltda",
                    "classe": "NCL(11) 42",
                },
                {
                    "marca": "GIRASSOL",
                    "processo": "830112765",
                    "situacao": "Registro de marca em vigor",
                    "titular": "Girassol Alimentos Ltda",
                    "classe": "NCL(11) 30",
                },
            ]
        self._processes = processes

    @property
    def is_configured(self) -> bool:
        """Mock client is always configured."""
        return True

    def search(self, name: str) -> BrokerResult:
        """Search mock register (canonical substring match)."""
        target = canonicalize(name)
        results = []
        for proc in self._processes:
            mark = canonicalize(proc.get("marca", ""))
            if target and mark and (target in mark or mark in target):
                results.append(proc)
        return BrokerResult(processes=results, pages=1)

    def test_connection(self) -> tuple[bool, str]:
        """Mock connection test always succeeds."""
        return True, "Mock client - no real connection"


def create_client_from_settings(
    token: str | None = None,
    timeout: int = 20,
    search_type: str = "exata",
    base_url: str | None = None,
    max_pages: int = 50,
) -> InfosimplesClient | MockInfosimplesClient:
    """Factory function to create a broker client.

    If no token is given or found in INFOSIMPLES_TOKEN, creates a mock
    client suitable for development and testing.

    Returns:
        Configured client
    """
    token = token or os.getenv("INFOSIMPLES_TOKEN")
    if not token:
        logger.warning("INFOSIMPLES_TOKEN not set, using mock register")
        return MockInfosimplesClient()

    return InfosimplesClient(
        token=token,
        timeout=timeout,
        search_type=search_type,
        base_url=base_url,
        max_pages=max_pages,
    )
