"""
safe-watcher

Tracks multisig Safe transactions through a transaction-index service and
reports their lifecycle to notification channels.
"""

__version__ = "0.1.0"
