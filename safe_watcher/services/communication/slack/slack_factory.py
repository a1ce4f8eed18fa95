from typing import Optional

import httpx

from safe_watcher.config import Config
from safe_watcher.config import config as default_config
from safe_watcher.lib.logger import configure_logger
from safe_watcher.services.communication.slack.slack_service import SlackNotifier

logger = configure_logger(__name__)


def create_slack_notifier(
    config: Optional[Config] = None,
    webhook_url: Optional[str] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> SlackNotifier:
    """
    Create a Slack notifier using configuration.

    A notifier without webhook URL is still returned: it logs a warning on
    every event instead of delivering it.

    Args:
        config (Config, optional): Configuration to use. Defaults to the global config.
        webhook_url (str, optional): Override the webhook URL from config.
        http_client (httpx.AsyncClient, optional): Shared HTTP client.

    Returns:
        SlackNotifier: Configured notifier.
    """
    config = config or default_config
    if webhook_url is None:
        webhook_url = config.slack.webhook_url

    if not webhook_url:
        logger.warning("Slack webhook URL is not configured, notifications disabled")

    return SlackNotifier(
        webhook_url=webhook_url,
        safe_url=config.safe.web_url,
        http_client=http_client,
        request_timeout=config.http.request_timeout,
    )
