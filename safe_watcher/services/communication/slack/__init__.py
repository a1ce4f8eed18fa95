"""
Slack service package for sending lifecycle events to Slack via incoming webhooks.
"""

from safe_watcher.services.communication.slack.slack_factory import (
    create_slack_notifier,
)
from safe_watcher.services.communication.slack.slack_service import SlackNotifier

__all__ = ["SlackNotifier", "create_slack_notifier"]
