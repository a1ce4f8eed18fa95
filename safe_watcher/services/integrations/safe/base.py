"""Base client for Safe transaction-index services."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from safe_watcher.lib.logger import configure_logger

from .models import ListedSafeTx, SafeTx
from .utils import (
    InvalidTxIdError,
    SafeApiError,
    SafeApiRequestError,
    SafeApiResponseError,
    SafeApiStatusError,
)


class SafeApi(ABC):
    """Read-only view of the multisig transactions of one Safe."""

    @abstractmethod
    async def fetch_all(self) -> List[ListedSafeTx]:
        """Return the whole transaction history, following pagination.

        Never raises on remote failures: paging stops at the first failed
        page and the transactions collected so far are returned.
        """

    @abstractmethod
    async def fetch_latest(self) -> List[ListedSafeTx]:
        """Return the first page only. Returns an empty list on failure."""

    @abstractmethod
    async def fetch_detailed(self, safe_tx_hash: str) -> SafeTx[str]:
        """Return the full record of one transaction.

        Raises:
            SafeApiError: If the transaction cannot be loaded or normalized
        """


@dataclass
class TransactionPage:
    """One normalized list page."""

    transactions: List[ListedSafeTx] = field(default_factory=list)
    next: Optional[str] = None


class BaseSafeApi(SafeApi):
    """Shared HTTP handling and pagination for Safe API clients.

    Subclasses provide the endpoint URLs and the normalization of their
    response shapes.
    """

    def __init__(
        self,
        address: str,
        api_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        request_timeout: float = 30.0,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the client.

        Args:
            address: Safe address whose transactions are tracked
            api_url: Base URL of the transaction-index service
            http_client: Optional shared client. If None, the API owns one
            request_timeout: Timeout in seconds for clients created here
            logger: Optional logger, defaults to one named after the class
        """
        self.address = address
        self.api_url = api_url.rstrip("/")
        self.logger = logger or configure_logger(self.__class__.__name__)
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            timeout=request_timeout,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        """Close the HTTP client if it was created by this instance."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "BaseSafeApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    @abstractmethod
    def _list_url(self) -> str:
        """URL of the first transaction list page."""

    @abstractmethod
    def _detail_url(self, safe_tx_hash: str) -> str:
        """URL of a single transaction."""

    @abstractmethod
    def _normalize_page(self, data: Any) -> TransactionPage:
        """Turn a raw list response into a TransactionPage."""

    @abstractmethod
    def _normalize_detailed(self, data: Any) -> SafeTx[str]:
        """Turn a raw detail response into a SafeTx."""

    async def fetch_all(self) -> List[ListedSafeTx]:
        url: Optional[str] = None
        results: List[ListedSafeTx] = []
        pages = 0
        while True:
            page = await self._fetch_list(url)
            pages += 1
            results.extend(page.transactions)
            url = page.next
            if not url:
                break

        self.logger.debug(
            "Loaded transaction history",
            extra={"safe": self.address, "pages": pages, "count": len(results)},
        )
        return results

    async def fetch_latest(self) -> List[ListedSafeTx]:
        page = await self._fetch_list()
        return page.transactions

    async def fetch_detailed(self, safe_tx_hash: str) -> SafeTx[str]:
        url = self._detail_url(safe_tx_hash)
        self.logger.debug("Loading transaction", extra={"safe_tx_hash": safe_tx_hash})
        try:
            data = await self._fetch(url)
            tx = self._normalize_detailed(data)
        except SafeApiError as e:
            self.logger.error(
                "Failed to load transaction",
                extra={"safe_tx_hash": safe_tx_hash, "error": str(e)},
            )
            raise
        except (ValidationError, InvalidTxIdError) as e:
            self.logger.error(
                "Unexpected transaction payload",
                extra={"safe_tx_hash": safe_tx_hash, "error": str(e)},
            )
            raise SafeApiResponseError(
                f"Unexpected transaction payload from {url}", endpoint=url
            ) from e

        self.logger.debug("Loaded transaction", extra={"safe_tx_hash": safe_tx_hash})
        return tx

    async def _fetch_list(self, url: Optional[str] = None) -> TransactionPage:
        """Fetch and normalize one list page, or an empty page on failure."""
        target = url or self._list_url()
        try:
            data = await self._fetch(target)
            return self._normalize_page(data)
        except (SafeApiError, ValidationError, InvalidTxIdError) as e:
            self.logger.error(
                "Failed to load transaction list page",
                extra={"url": target, "error": str(e)},
            )
            return TransactionPage()

    async def _fetch(self, url: str) -> Any:
        """GET a URL and decode its JSON body.

        Raises:
            SafeApiRequestError: On transport failures
            SafeApiStatusError: On non-success status codes
            SafeApiResponseError: If the body is not valid JSON
        """
        self.logger.debug(
            "API request initiated", extra={"request": {"method": "GET", "url": url}}
        )
        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            raise SafeApiRequestError(
                f"Request failed for {url}: {e}", endpoint=url
            ) from e

        if not response.is_success:
            raise SafeApiStatusError(
                f"HTTP {response.status_code} error for {url}",
                status_code=response.status_code,
                endpoint=url,
                response_body=response.text[:500],
            )

        try:
            return response.json()
        except ValueError as e:
            raise SafeApiResponseError(
                f"Invalid JSON response from {url}",
                status_code=response.status_code,
                endpoint=url,
            ) from e
