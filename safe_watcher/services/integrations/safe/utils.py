"""Utility classes and helpers for Safe transaction-index integration."""

from enum import Enum
from typing import NamedTuple, Optional

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

TX_ID_PREFIX = "multisig"


class SafeApiError(Exception):
    """Base exception for Safe transaction-index API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint


class SafeApiRequestError(SafeApiError):
    """Exception for transport-level failures (connection, timeout)."""

    pass


class SafeApiStatusError(SafeApiError):
    """Exception for non-success HTTP responses."""

    def __init__(
        self,
        message: str,
        status_code: int,
        endpoint: Optional[str] = None,
        response_body: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint)
        self.response_body = response_body


class SafeApiResponseError(SafeApiError):
    """Exception for malformed or unexpected response payloads."""

    pass


class InvalidTxIdError(ValueError):
    """Raised when a composite transaction id cannot be parsed."""

    pass


class ApiKind(str, Enum):
    """Supported transaction-index backends."""

    GATEWAY = "gateway"
    TRANSACTION_SERVICE = "transaction_service"

    def __str__(self):
        return self.value


class ParsedTxId(NamedTuple):
    multisig: str
    safe_tx_hash: str


def parse_tx_id(tx_id: str) -> ParsedTxId:
    """Split a ``multisig_<safeAddress>_<safeTxHash>`` id into its parts.

    Args:
        tx_id: Composite transaction id as returned by the gateway

    Returns:
        ParsedTxId with the Safe address and the safeTxHash. The hash is
        everything after the second separator

    Raises:
        InvalidTxIdError: If the id does not have the expected form
    """
    parts = tx_id.split("_", 2)
    if len(parts) != 3 or parts[0] != TX_ID_PREFIX:
        raise InvalidTxIdError(f"Invalid multisig transaction id: {tx_id!r}")
    return ParsedTxId(multisig=parts[1], safe_tx_hash=parts[2])


def build_tx_id(safe: str, safe_tx_hash: str) -> str:
    """Build the composite id used by the gateway and the Safe web UI."""
    return f"{TX_ID_PREFIX}_{safe}_{safe_tx_hash}"
