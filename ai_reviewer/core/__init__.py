"""Shared library utilities."""

from ai_reviewer.core.event import PullRequestContext, PullRequestEvent, TriggerAction, read_event
from ai_reviewer.core.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "PullRequestContext",
    "PullRequestEvent",
    "TriggerAction",
    "read_event",
]
