from typing import Dict, Optional

from .models import SafeTx, Signer


class SignerDirectory:
    """Resolves owner addresses to display names.

    Lookups ignore address case, so checksummed and lowercase forms match.
    """

    def __init__(self, names: Optional[Dict[str, str]] = None):
        self._names = {
            address.lower(): name for address, name in (names or {}).items()
        }

    def __len__(self) -> int:
        return len(self._names)

    def signer(self, address: str) -> Signer:
        return Signer(address=address, name=self._names.get(address.lower()))

    def resolve(self, tx: SafeTx[str]) -> SafeTx[Signer]:
        """Lift a transaction with plain addresses to one with named signers."""
        return SafeTx[Signer](
            safe_tx_hash=tx.safe_tx_hash,
            nonce=tx.nonce,
            to=tx.to,
            operation=tx.operation,
            proposer=self.signer(tx.proposer),
            confirmations=[self.signer(address) for address in tx.confirmations],
            confirmations_required=tx.confirmations_required,
            is_executed=tx.is_executed,
        )
