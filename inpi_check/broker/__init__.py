"""Upstream data clients for the INPI trademark register."""

from inpi_check.broker.errors import (
    BrokerError,
    ConfigurationMissingError,
    UpstreamRejectedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from inpi_check.broker.infosimples_client import (
    BrokerResult,
    InfosimplesClient,
    MockInfosimplesClient,
    create_client_from_settings,
)

__all__ = [
    "BrokerError",
    "BrokerResult",
    "ConfigurationMissingError",
    "InfosimplesClient",
    "MockInfosimplesClient",
    "UpstreamRejectedError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
    "create_client_from_settings",
]
