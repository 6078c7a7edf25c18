"""Read pull request identity from the CI trigger payload."""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ai_reviewer.core.exceptions import EventPayloadError


class TriggerAction(str, Enum):
    """Pull request actions the reviewer distinguishes."""

    OPENED = "opened"
    SYNCHRONIZE = "synchronize"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TriggerAction":
        for action in (cls.OPENED, cls.SYNCHRONIZE):
            if value == action.value:
                return action
        return cls.OTHER

    @property
    def is_reviewable(self) -> bool:
        return self is not TriggerAction.OTHER


@dataclass(frozen=True)
class PullRequestEvent:
    """PR identity as found in the event payload."""

    owner: str
    repo: str
    pr_number: int
    action: TriggerAction
    raw_action: Optional[str] = None


@dataclass(frozen=True)
class PullRequestContext:
    """Everything downstream stages need to know about the PR."""

    owner: str
    repo: str
    pr_number: int
    title: str
    description: str
    action: TriggerAction

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}#{self.pr_number}"


def parse_event_payload(payload: dict) -> PullRequestEvent:
    """
    Extract PR identity from a ``pull_request`` event payload.

    The PR number is taken from the top-level ``number`` field and falls
    back to ``pull_request.number``.
    """
    repository = payload.get("repository") or {}
    owner = (repository.get("owner") or {}).get("login")
    repo = repository.get("name")
    number = payload.get("number")
    if number is None:
        number = (payload.get("pull_request") or {}).get("number")

    raw_action = payload.get("action")
    action = TriggerAction.parse(raw_action)

    # Unsupported events are a no-op, whatever else the payload holds
    if not action.is_reviewable:
        return PullRequestEvent(
            owner=owner or "",
            repo=repo or "",
            pr_number=number if isinstance(number, int) else 0,
            action=action,
            raw_action=raw_action,
        )

    if not owner or not repo or number is None:
        raise EventPayloadError(None, "missing repository owner, name or PR number")

    try:
        pr_number = int(number)
    except (TypeError, ValueError):
        raise EventPayloadError(None, f"invalid PR number {number!r}")

    return PullRequestEvent(
        owner=owner,
        repo=repo,
        pr_number=pr_number,
        action=action,
        raw_action=raw_action,
    )


def read_event(path: Optional[str]) -> PullRequestEvent:
    """Load and parse the event payload file pointed to by GITHUB_EVENT_PATH."""
    if not path:
        raise EventPayloadError(path, "GITHUB_EVENT_PATH is not set")
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise EventPayloadError(path, str(e)) from e

    try:
        return parse_event_payload(payload)
    except EventPayloadError as e:
        raise EventPayloadError(path, e.reason) from e
