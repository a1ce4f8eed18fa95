"""Client for the Safe transaction service (v1 multisig transaction endpoints)."""

from typing import Any

from .base import BaseSafeApi, TransactionPage
from .models import ListedSafeTx, SafeTx
from .schemas import MultisigTransaction, MultisigTransactionPage
from .utils import ZERO_ADDRESS


def _is_executed(tx: MultisigTransaction) -> bool:
    # Matches the gateway's SUCCESS status: executed and not reverted
    return bool(tx.is_executed and tx.is_successful)


def normalize_service_listed(tx: MultisigTransaction) -> ListedSafeTx:
    return ListedSafeTx(
        safe_tx_hash=tx.safe_tx_hash,
        nonce=tx.nonce,
        confirmations=len(tx.confirmations),
        confirmations_required=tx.confirmations_required,
        is_executed=_is_executed(tx),
    )


def normalize_service_detailed(tx: MultisigTransaction) -> SafeTx[str]:
    confirmations = [c.owner for c in tx.confirmations]
    if tx.proposer:
        proposer = tx.proposer
    elif confirmations:
        proposer = confirmations[0]
    else:
        proposer = ZERO_ADDRESS
    return SafeTx[str](
        safe_tx_hash=tx.safe_tx_hash,
        nonce=tx.nonce,
        to=tx.to,
        operation=tx.operation,
        proposer=proposer,
        confirmations=confirmations,
        confirmations_required=tx.confirmations_required,
        is_executed=_is_executed(tx),
    )


class SafeTransactionServiceApi(BaseSafeApi):
    """Client for the Safe transaction service.

    List pages already carry full records, and the service reports the
    proposer explicitly.
    """

    def _list_url(self) -> str:
        return f"{self.api_url}/api/v1/safes/{self.address}/multisig-transactions/"

    def _detail_url(self, safe_tx_hash: str) -> str:
        return f"{self.api_url}/api/v1/multisig-transactions/{safe_tx_hash}/"

    def _normalize_page(self, data: Any) -> TransactionPage:
        page = MultisigTransactionPage.model_validate(data)
        return TransactionPage(
            transactions=[normalize_service_listed(tx) for tx in page.results],
            next=page.next,
        )

    def _normalize_detailed(self, data: Any) -> SafeTx[str]:
        return normalize_service_detailed(MultisigTransaction.model_validate(data))
