import os
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv

from safe_watcher.lib.logger import configure_logger

logger = configure_logger(__name__)

load_dotenv()


def parse_signers(raw: str) -> Dict[str, str]:
    """Parse a ``0xabc=Alice,0xdef=Bob`` list into an address -> name mapping.

    Entries without a name are skipped.
    """
    signers: Dict[str, str] = {}
    for entry in raw.split(","):
        address, _, name = entry.partition("=")
        address, name = address.strip(), name.strip()
        if address and name:
            signers[address] = name
    return signers


@dataclass
class SafeConfig:
    address: str = field(default_factory=lambda: os.getenv("SAFE_ADDRESS", ""))
    chain_prefix: str = field(
        default_factory=lambda: os.getenv("SAFE_CHAIN_PREFIX", "camp")
    )
    api_url: str = field(
        default_factory=lambda: os.getenv(
            "SAFE_API_URL", "https://safe-transaction-camp.onchainden.com"
        )
    )
    # "gateway" or "transaction_service"
    api_kind: str = field(default_factory=lambda: os.getenv("SAFE_API_KIND", "gateway"))
    web_url: str = field(
        default_factory=lambda: os.getenv(
            "SAFE_WEB_URL", "https://app.safe.global/transactions/tx?"
        )
    )
    signers: Dict[str, str] = field(
        default_factory=lambda: parse_signers(os.getenv("SAFE_SIGNERS", ""))
    )


@dataclass
class HttpConfig:
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("SAFE_REQUEST_TIMEOUT", "30"))
    )


@dataclass
class SlackConfig:
    webhook_url: str = field(
        default_factory=lambda: os.getenv("SLACK_WEBHOOK_URL", "")
    )


@dataclass
class Config:
    safe: SafeConfig = field(default_factory=SafeConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    slack: SlackConfig = field(default_factory=SlackConfig)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the environment"""
        config = cls()
        logger.debug(
            "Configuration loaded",
            extra={
                "safe": config.safe.address,
                "chain_prefix": config.safe.chain_prefix,
                "api_kind": config.safe.api_kind,
            },
        )
        return config


# Global configuration instance
config = Config.load()
