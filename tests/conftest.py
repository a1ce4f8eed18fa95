"""Shared fixtures: remote payloads shaped like the transaction-index APIs."""

from typing import Any, Callable, Dict, List, Optional

import pytest

SAFE_ADDRESS = "0x5aFE3855358E112B5647B952709E6165e1c1eEEe"
API_URL = "https://safe-transaction.example.org"


@pytest.fixture
def safe_address() -> str:
    return SAFE_ADDRESS


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture
def make_listed_result() -> Callable[..., Dict[str, Any]]:
    """Build one entry of a gateway list page."""

    def _make(
        safe_tx_hash: str,
        nonce: int,
        submitted: int = 1,
        required: int = 2,
        status: str = "AWAITING_CONFIRMATIONS",
    ) -> Dict[str, Any]:
        return {
            "type": "TRANSACTION",
            "transaction": {
                "txInfo": {"type": "Custom", "to": {"value": SAFE_ADDRESS}},
                "id": f"multisig_{SAFE_ADDRESS}_{safe_tx_hash}",
                "timestamp": 1700000000000,
                "txStatus": status,
                "executionInfo": {
                    "type": "MULTISIG",
                    "nonce": nonce,
                    "confirmationsRequired": required,
                    "confirmationsSubmitted": submitted,
                    "missingSigners": None,
                },
                "txHash": None,
            },
            "conflictType": "None",
        }

    return _make


@pytest.fixture
def make_gateway_transaction() -> Callable[..., Dict[str, Any]]:
    """Build a gateway single-transaction payload."""

    def _make(
        safe_tx_hash: str,
        signers: Optional[List[Dict[str, Any]]] = None,
        status: str = "SUCCESS",
        nonce: int = 7,
        required: int = 3,
        to: str = "0x000000000000000000000000000000000000dEaD",
        operation: int = 0,
    ) -> Dict[str, Any]:
        confirmations = None
        if signers is not None:
            confirmations = [
                {
                    "signer": signer,
                    "signature": "0x" + "11" * 65,
                    "submittedAt": 1700000000000 + i,
                }
                for i, signer in enumerate(signers)
            ]
        return {
            "safeAddress": SAFE_ADDRESS,
            "txId": f"multisig_{SAFE_ADDRESS}_{safe_tx_hash}",
            "executedAt": None,
            "txStatus": status,
            "txInfo": {
                "type": "Custom",
                "humanDescription": None,
                "to": {"value": to, "name": None, "logoUri": None},
                "dataSize": "0",
                "value": "0",
                "isCancellation": False,
            },
            "txData": {
                "hexData": "0x",
                "to": {"value": to},
                "value": "0",
                "operation": operation,
                "trustedDelegateCallTarget": False,
                "addressInfoIndex": {},
            },
            "txHash": None,
            "detailedExecutionInfo": {
                "type": "MULTISIG",
                "submittedAt": 1700000000000,
                "nonce": nonce,
                "safeTxGas": "0",
                "baseGas": "0",
                "gasPrice": "0",
                # Deliberately different from the id-derived hash
                "safeTxHash": "0xffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
                "executor": None,
                "signers": [],
                "confirmationsRequired": required,
                "confirmations": confirmations,
                "rejectors": [],
                "trusted": True,
            },
            "note": None,
        }

    return _make
