"""Raw response shapes of the supported transaction-index APIs.

Only the fields the clients read are declared; everything else in the
payloads is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


# Client gateway, /api/v2


class AddressInfo(ApiModel):
    value: str
    name: Optional[str] = None
    logo_uri: Optional[str] = None


class ExecutionInfo(ApiModel):
    type: Optional[str] = None
    nonce: int
    confirmations_required: int
    confirmations_submitted: int
    missing_signers: Optional[List[AddressInfo]] = None


class ListedTx(ApiModel):
    id: str
    tx_status: str
    execution_info: ExecutionInfo
    timestamp: Optional[int] = None
    tx_hash: Optional[str] = None


class ListTransactionsResult(ApiModel):
    type: Optional[str] = None
    transaction: Optional[ListedTx] = None
    conflict_type: Optional[str] = None


class ListTransactionsResponse(ApiModel):
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[ListTransactionsResult] = []


class TxInfo(ApiModel):
    type: Optional[str] = None
    to: AddressInfo


class TxData(ApiModel):
    hex_data: Optional[str] = None
    to: Optional[AddressInfo] = None
    value: Optional[str] = None
    operation: int


class Confirmation(ApiModel):
    signer: AddressInfo
    signature: Optional[str] = None
    submitted_at: Optional[int] = None


class DetailedExecutionInfo(ApiModel):
    type: Optional[str] = None
    nonce: int
    confirmations_required: int
    confirmations: Optional[List[Confirmation]] = None


class Transaction(ApiModel):
    safe_address: Optional[str] = None
    tx_id: str
    tx_status: str
    executed_at: Optional[int] = None
    tx_info: TxInfo
    tx_data: TxData
    tx_hash: Optional[str] = None
    detailed_execution_info: DetailedExecutionInfo


# Transaction service, /api/v1


class MultisigConfirmation(ApiModel):
    owner: str
    submission_date: Optional[str] = None
    signature: Optional[str] = None


class MultisigTransaction(ApiModel):
    safe: Optional[str] = None
    to: str
    operation: int
    # Coerced from the string nonce of v2 serializers
    nonce: int
    safe_tx_hash: str
    proposer: Optional[str] = None
    is_executed: bool
    is_successful: Optional[bool] = None
    confirmations_required: int
    confirmations: List[MultisigConfirmation] = []


class MultisigTransactionPage(ApiModel):
    count: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[MultisigTransaction] = []
