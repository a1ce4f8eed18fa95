import logging
from typing import Dict, Optional

import httpx

from safe_watcher.lib.logger import configure_logger
from safe_watcher.services.communication.base import (
    BaseNotifier,
    Event,
    EventType,
    UnknownChainPrefixError,
)
from safe_watcher.services.integrations.safe.models import Signer
from safe_watcher.services.integrations.safe.utils import build_tx_id

ACTIONS: Dict[EventType, str] = {
    EventType.CREATED: "created",
    EventType.UPDATED: "updated",
    EventType.EXECUTED: "executed",
    EventType.MALICIOUS: "ALERT! ACTION REQUIRED: MALICIOUS TRANSACTION DETECTED!",
}

# Safe chain short names
NETWORKS: Dict[str, str] = {
    "camp": "Camp",
    "eth": "Ethereum",
    "gno": "Gnosis Chain",
    "matic": "Polygon",
    "arb1": "Arbitrum",
    "oeth": "Optimism",
    "base": "Base",
    "sep": "Sepolia",
}


def format_signer(signer: Signer) -> str:
    return f"*{signer.name}*" if signer.name else f"`{signer.address}`"


class SlackNotifier(BaseNotifier):
    def __init__(
        self,
        webhook_url: str,
        safe_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        request_timeout: float = 10.0,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the Slack notifier.

        Args:
            webhook_url: Slack incoming webhook. Empty disables delivery
            safe_url: Prefix of transaction links into the Safe web UI
            http_client: Optional shared client, otherwise one per message
            request_timeout: Timeout in seconds for clients created here
            logger: Optional logger, defaults to one named after the class
        """
        self.webhook_url = webhook_url
        self.safe_url = safe_url
        self.http_client = http_client
        self.request_timeout = request_timeout
        self.logger = logger or configure_logger(self.__class__.__name__)

    async def send(self, event: Event) -> bool:
        message = self.get_message(event)
        return await self._send_to_slack(message)

    def get_message(self, event: Event) -> str:
        """Render an event as Slack mrkdwn.

        Raises:
            UnknownChainPrefixError: If the chain prefix has no display name
        """
        tx = event.tx
        try:
            network = NETWORKS[event.chain_prefix]
        except KeyError:
            raise UnknownChainPrefixError(event.chain_prefix) from None

        tx_id = build_tx_id(event.safe, tx.safe_tx_hash)
        link = f"<{self.safe_url}safe={event.chain_prefix}:{event.safe}/&id={tx_id}|🔗 transaction>"
        proposer = f"*Proposed by:* {format_signer(tx.proposer)}"
        confirmations = ", ".join(format_signer(s) for s in tx.confirmations)
        confirmations = f"*Signed by:* {confirmations}"

        summary = (
            f"{ACTIONS[event.type]} {network} multisig "
            f"[{len(tx.confirmations)}/{tx.confirmations_required}] "
            f"with safeTxHash `{tx.safe_tx_hash}` and nonce `{tx.nonce}`"
        )

        return "\n\n".join([summary, proposer, confirmations, link])

    async def _send_to_slack(self, text: str) -> bool:
        if not self.webhook_url:
            self.logger.warning("Slack webhook not configured")
            return False

        try:
            if self.http_client is not None:
                response = await self._post(self.http_client, text)
            else:
                async with httpx.AsyncClient(timeout=self.request_timeout) as client:
                    response = await self._post(client, text)
        except httpx.HTTPError as e:
            self.logger.error(
                "Cannot send to Slack", extra={"error": str(e), "text": text}
            )
            return False

        if not response.is_success:
            self.logger.error(
                "Cannot send to Slack",
                extra={
                    "response": {"status_code": response.status_code},
                    "error": f"{response.reason_phrase}: {response.text}",
                    "text": text,
                },
            )
            return False

        self.logger.debug("Slack message sent successfully")
        return True

    async def _post(self, client: httpx.AsyncClient, text: str) -> httpx.Response:
        return await client.post(self.webhook_url, json={"text": text})
