"""
Safe transaction-index clients.
"""

from safe_watcher.services.integrations.safe.base import BaseSafeApi, SafeApi
from safe_watcher.services.integrations.safe.gateway_api import SafeClientGatewayApi
from safe_watcher.services.integrations.safe.models import ListedSafeTx, SafeTx, Signer
from safe_watcher.services.integrations.safe.safe_factory import create_safe_api
from safe_watcher.services.integrations.safe.signers import SignerDirectory
from safe_watcher.services.integrations.safe.transaction_service_api import (
    SafeTransactionServiceApi,
)
from safe_watcher.services.integrations.safe.utils import (
    ZERO_ADDRESS,
    ApiKind,
    InvalidTxIdError,
    SafeApiError,
    SafeApiRequestError,
    SafeApiResponseError,
    SafeApiStatusError,
    build_tx_id,
    parse_tx_id,
)

__all__ = [
    "ApiKind",
    "BaseSafeApi",
    "InvalidTxIdError",
    "ListedSafeTx",
    "SafeApi",
    "SafeApiError",
    "SafeApiRequestError",
    "SafeApiResponseError",
    "SafeApiStatusError",
    "SafeClientGatewayApi",
    "SafeTransactionServiceApi",
    "SafeTx",
    "Signer",
    "SignerDirectory",
    "ZERO_ADDRESS",
    "build_tx_id",
    "create_safe_api",
    "parse_tx_id",
]
