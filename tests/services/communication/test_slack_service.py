import json
import logging
from typing import List

import httpx
import pytest

from safe_watcher.config import Config, HttpConfig, SafeConfig, SlackConfig
from safe_watcher.services.communication import (
    Event,
    EventType,
    UnknownChainPrefixError,
)
from safe_watcher.services.communication.slack import (
    SlackNotifier,
    create_slack_notifier,
)
from safe_watcher.services.integrations.safe import SafeTx, Signer

SAFE = "0x5aFE3855358E112B5647B952709E6165e1c1eEEe"
TX_HASH = "0x" + "ab" * 32
WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"
SAFE_URL = "https://app.safe.global/transactions/tx?"

ALICE = Signer(address="0x1111111111111111111111111111111111111111", name="Alice")
ANONYMOUS = Signer(address="0x2222222222222222222222222222222222222222")


def make_event(
    event_type: EventType = EventType.CREATED,
    chain_prefix: str = "eth",
    confirmations: List[Signer] = None,
) -> Event:
    if confirmations is None:
        confirmations = [ALICE, ANONYMOUS]
    return Event(
        type=event_type,
        chain_prefix=chain_prefix,
        safe=SAFE,
        tx=SafeTx[Signer](
            safe_tx_hash=TX_HASH,
            nonce=42,
            to="0x000000000000000000000000000000000000dEaD",
            operation=0,
            proposer=ALICE,
            confirmations=confirmations,
            confirmations_required=3,
            is_executed=False,
        ),
    )


def make_notifier(handler=None, webhook_url: str = WEBHOOK_URL):
    requests: List[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request) if handler else httpx.Response(200, text="ok")

    notifier = SlackNotifier(
        webhook_url=webhook_url,
        safe_url=SAFE_URL,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(_handler)),
    )
    return notifier, requests


def test_message_layout():
    notifier, _ = make_notifier()

    message = notifier.get_message(make_event())
    summary, proposer, signed_by, link = message.split("\n\n")

    assert summary == (
        f"created Ethereum multisig [2/3] with safeTxHash `{TX_HASH}` and nonce `42`"
    )
    assert proposer == "*Proposed by:* *Alice*"
    assert signed_by == f"*Signed by:* *Alice*, `{ANONYMOUS.address}`"
    assert link == (
        f"<{SAFE_URL}safe=eth:{SAFE}/&id=multisig_{SAFE}_{TX_HASH}|🔗 transaction>"
    )


@pytest.mark.parametrize(
    "event_type, phrase",
    [
        (EventType.UPDATED, "updated Ethereum multisig"),
        (EventType.EXECUTED, "executed Ethereum multisig"),
        (EventType.MALICIOUS, "ALERT! ACTION REQUIRED: MALICIOUS TRANSACTION DETECTED!"),
    ],
)
def test_message_action_phrase(event_type, phrase):
    notifier, _ = make_notifier()

    assert notifier.get_message(make_event(event_type)).startswith(phrase)


def test_message_without_confirmations():
    notifier, _ = make_notifier()

    message = notifier.get_message(make_event(confirmations=[]))

    assert "[0/3]" in message
    assert "*Signed by:* \n\n" in message


def test_message_uses_chain_display_name():
    notifier, _ = make_notifier()

    assert "Camp multisig" in notifier.get_message(make_event(chain_prefix="camp"))


def test_unknown_chain_prefix_raises():
    notifier, _ = make_notifier()

    with pytest.raises(UnknownChainPrefixError):
        notifier.get_message(make_event(chain_prefix="zzz"))


@pytest.mark.asyncio
async def test_send_posts_message():
    notifier, requests = make_notifier()
    event = make_event()

    assert await notifier.send(event) is True

    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert str(requests[0].url) == WEBHOOK_URL
    assert json.loads(requests[0].content) == {"text": notifier.get_message(event)}


@pytest.mark.asyncio
async def test_send_without_webhook(caplog):
    notifier, requests = make_notifier(webhook_url="")

    with caplog.at_level(logging.WARNING):
        assert await notifier.send(make_event()) is False

    assert requests == []
    assert "Slack webhook not configured" in caplog.text


@pytest.mark.asyncio
async def test_send_logs_error_response(caplog):
    notifier, requests = make_notifier(
        lambda request: httpx.Response(500, text="invalid_payload")
    )

    with caplog.at_level(logging.ERROR):
        assert await notifier.send(make_event()) is False

    assert len(requests) == 1
    assert "Cannot send to Slack" in caplog.text
    record = next(r for r in caplog.records if r.getMessage() == "Cannot send to Slack")
    assert record.response == {"status_code": 500}
    assert "invalid_payload" in record.error


@pytest.mark.asyncio
async def test_send_logs_transport_error(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    notifier, _ = make_notifier(handler)

    with caplog.at_level(logging.ERROR):
        assert await notifier.send(make_event()) is False

    assert "Cannot send to Slack" in caplog.text


@pytest.mark.asyncio
async def test_send_with_unknown_chain_prefix_raises():
    notifier, requests = make_notifier()

    with pytest.raises(UnknownChainPrefixError):
        await notifier.send(make_event(chain_prefix="zzz"))

    assert requests == []


def test_create_slack_notifier_from_config():
    config = Config(
        safe=SafeConfig(address=SAFE, web_url="https://safe.example.org/tx?"),
        http=HttpConfig(request_timeout=3.0),
        slack=SlackConfig(webhook_url=WEBHOOK_URL),
    )

    notifier = create_slack_notifier(config)

    assert notifier.webhook_url == WEBHOOK_URL
    assert notifier.safe_url == "https://safe.example.org/tx?"
    assert notifier.request_timeout == 3.0


def test_create_slack_notifier_without_webhook(caplog):
    config = Config(slack=SlackConfig(webhook_url=""))

    with caplog.at_level(logging.WARNING):
        notifier = create_slack_notifier(config)

    assert isinstance(notifier, SlackNotifier)
    assert notifier.webhook_url == ""
    assert "notifications disabled" in caplog.text


def test_create_slack_notifier_webhook_override():
    config = Config(slack=SlackConfig(webhook_url=WEBHOOK_URL))

    notifier = create_slack_notifier(config, webhook_url="https://hooks.example.org/x")

    assert notifier.webhook_url == "https://hooks.example.org/x"
