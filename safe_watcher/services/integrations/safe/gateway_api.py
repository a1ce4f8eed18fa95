"""Client for the Safe client gateway (v2 multisig transaction endpoints)."""

from typing import Any

from .base import BaseSafeApi, TransactionPage
from .models import ListedSafeTx, SafeTx
from .schemas import ListedTx, ListTransactionsResponse, Transaction
from .utils import ZERO_ADDRESS, parse_tx_id

SUCCESS_STATUS = "SUCCESS"


def normalize_listed(tx: ListedTx) -> ListedSafeTx:
    safe_tx_hash = parse_tx_id(tx.id).safe_tx_hash
    return ListedSafeTx(
        safe_tx_hash=safe_tx_hash,
        nonce=tx.execution_info.nonce,
        confirmations=tx.execution_info.confirmations_submitted,
        confirmations_required=tx.execution_info.confirmations_required,
        is_executed=tx.tx_status == SUCCESS_STATUS,
    )


def normalize_detailed(tx: Transaction) -> SafeTx[str]:
    safe_tx_hash = parse_tx_id(tx.tx_id).safe_tx_hash
    info = tx.detailed_execution_info
    # Assumes the gateway lists confirmations in submission order
    confirmations = [c.signer.value for c in info.confirmations or []]
    return SafeTx[str](
        safe_tx_hash=safe_tx_hash,
        nonce=info.nonce,
        to=tx.tx_info.to.value,
        operation=tx.tx_data.operation,
        proposer=confirmations[0] if confirmations else ZERO_ADDRESS,
        confirmations=confirmations,
        confirmations_required=info.confirmations_required,
        is_executed=tx.tx_status == SUCCESS_STATUS,
    )


class SafeClientGatewayApi(BaseSafeApi):
    """Client for gateway-style transaction-index services.

    Transactions are identified by composite ``multisig_<safe>_<hash>`` ids;
    the safeTxHash is always taken from that id.
    """

    def _list_url(self) -> str:
        return f"{self.api_url}/api/v2/safes/{self.address}/multisig-transactions"

    def _detail_url(self, safe_tx_hash: str) -> str:
        return f"{self.api_url}/api/v2/safes/multisig-transactions/{safe_tx_hash}"

    def _normalize_page(self, data: Any) -> TransactionPage:
        response = ListTransactionsResponse.model_validate(data)
        return TransactionPage(
            transactions=[
                normalize_listed(result.transaction)
                for result in response.results
                if result.transaction is not None
            ],
            next=response.next,
        )

    def _normalize_detailed(self, data: Any) -> SafeTx[str]:
        return normalize_detailed(Transaction.model_validate(data))
