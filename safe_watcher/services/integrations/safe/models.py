"""Canonical, API-independent Safe transaction models."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Signer(CustomBaseModel):
    """An owner address with an optional human-readable name."""

    address: str
    name: Optional[str] = None


SignerT = TypeVar("SignerT", str, Signer)


class ListedSafeTx(CustomBaseModel):
    """Summary of a multisig transaction as seen on a list page."""

    safe_tx_hash: str
    nonce: int
    confirmations: int
    confirmations_required: int
    is_executed: bool


class SafeTx(CustomBaseModel, Generic[SignerT]):
    """Full multisig transaction record.

    ``SignerT`` is either a plain address (as returned by the API clients)
    or a ``Signer`` once names have been resolved.
    """

    safe_tx_hash: str
    nonce: int
    to: str
    operation: int
    proposer: SignerT
    confirmations: List[SignerT]
    confirmations_required: int
    is_executed: bool
