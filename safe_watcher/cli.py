#!/usr/bin/env python3
"""
Command-line interface for safe-watcher

Inspect the multisig transactions of the configured Safe and push
lifecycle notifications by hand.
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

import httpx

from safe_watcher import __version__
from safe_watcher.config import Config
from safe_watcher.services.communication import (
    Event,
    EventType,
    NotificationDispatcher,
    create_notifiers,
)
from safe_watcher.services.integrations.safe import (
    ListedSafeTx,
    SafeApiError,
    SignerDirectory,
    create_safe_api,
)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Track multisig transactions of a Safe",
        prog="safe-watcher",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"safe-watcher {__version__}",
    )
    parser.add_argument("--safe", type=str, help="Safe address (default: SAFE_ADDRESS)")
    parser.add_argument("--api-url", type=str, help="Transaction-index API URL")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List the whole transaction history")
    subparsers.add_parser("latest", help="List the first page of transactions")

    show = subparsers.add_parser("show", help="Show one transaction")
    show.add_argument("safe_tx_hash", type=str)
    show.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")

    notify = subparsers.add_parser("notify", help="Send a notification for one transaction")
    notify.add_argument("safe_tx_hash", type=str)
    notify.add_argument(
        "--event",
        choices=[event_type.value for event_type in EventType],
        default=EventType.CREATED.value,
        help="Lifecycle event to report (default: created)",
    )

    return parser


def format_summary(tx: ListedSafeTx) -> str:
    status = "executed" if tx.is_executed else "pending"
    return (
        f"{tx.nonce:>6}  {tx.safe_tx_hash}  "
        f"[{tx.confirmations}/{tx.confirmations_required}]  {status}"
    )


async def run(
    args: argparse.Namespace,
    config: Config,
    http_client: Optional[httpx.AsyncClient] = None,
) -> int:
    """Execute a parsed command.

    Returns:
        Process exit code
    """
    if args.safe:
        config.safe.address = args.safe
    if args.api_url:
        config.safe.api_url = args.api_url

    async with create_safe_api(config, http_client=http_client) as api:
        if args.command in ("list", "latest"):
            if args.command == "list":
                transactions = await api.fetch_all()
            else:
                transactions = await api.fetch_latest()
            for tx in transactions:
                print(format_summary(tx))
            return 0

        try:
            tx = await api.fetch_detailed(args.safe_tx_hash)
        except SafeApiError as e:
            print(f"❌ Cannot load transaction {args.safe_tx_hash}: {e}", file=sys.stderr)
            return 1

        if args.command == "show":
            json.dump(tx.model_dump(), sys.stdout, indent=2 if args.pretty else None)
            print()
            return 0

        event = Event(
            type=EventType(args.event),
            chain_prefix=config.safe.chain_prefix,
            safe=config.safe.address,
            tx=SignerDirectory(config.safe.signers).resolve(tx),
        )
        dispatcher = NotificationDispatcher(create_notifiers(config))
        delivered = await dispatcher.dispatch(event)
        print(f"Delivered to {delivered}/{len(dispatcher.notifiers)} notifiers")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        return asyncio.run(run(args, Config.load()))
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n❌ Interrupted by user", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
