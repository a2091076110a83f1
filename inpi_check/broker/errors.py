"""Error categories raised by upstream data clients.

An upstream failure is never reported as an empty record list: that would
read as "available".
"""

from typing import Any


class BrokerError(Exception):
    """Base exception for upstream broker errors."""

    category = "upstream"

    def __init__(
        self,
        message: str,
        code: int | None = None,
        status_code: int | None = None,
        response: Any = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)


class ConfigurationMissingError(BrokerError):
    """Raised when the broker token is not configured."""

    category = "configuration-missing"


class UpstreamUnavailableError(BrokerError):
    """Raised when INPI or the broker is offline."""

    category = "upstream-unavailable"


class UpstreamRejectedError(BrokerError):
    """Raised when the broker answers with an error code."""

    category = "upstream-rejected"


class UpstreamTimeoutError(BrokerError):
    """Raised when the broker does not answer in time."""

    category = "timeout"
