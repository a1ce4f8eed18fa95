from typing import Dict, Optional, Type

import httpx

from safe_watcher.config import Config
from safe_watcher.config import config as default_config
from safe_watcher.lib.logger import configure_logger

from .base import BaseSafeApi
from .gateway_api import SafeClientGatewayApi
from .transaction_service_api import SafeTransactionServiceApi
from .utils import ApiKind

logger = configure_logger(__name__)

API_CLASSES: Dict[ApiKind, Type[BaseSafeApi]] = {
    ApiKind.GATEWAY: SafeClientGatewayApi,
    ApiKind.TRANSACTION_SERVICE: SafeTransactionServiceApi,
}


def create_safe_api(
    config: Optional[Config] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> BaseSafeApi:
    """
    Create the transaction-index client selected by configuration.

    Args:
        config (Config, optional): Configuration to use. Defaults to the global config.
        http_client (httpx.AsyncClient, optional): Shared HTTP client.

    Returns:
        BaseSafeApi: Client for the configured Safe.

    Raises:
        ValueError: If the Safe address or the API kind is not configured correctly.
    """
    config = config or default_config
    safe = config.safe
    if not safe.address:
        raise ValueError("SAFE_ADDRESS environment variable is required")

    try:
        api_kind = ApiKind(safe.api_kind)
    except ValueError:
        raise ValueError(
            f"Invalid SAFE_API_KIND: {safe.api_kind}. "
            f"Must be one of {[kind.value for kind in ApiKind]}"
        ) from None

    api = API_CLASSES[api_kind](
        address=safe.address,
        api_url=safe.api_url,
        http_client=http_client,
        request_timeout=config.http.request_timeout,
    )
    logger.info(
        "Safe API client created",
        extra={"safe": safe.address, "api_kind": str(api_kind), "api_url": safe.api_url},
    )
    return api
