"""GitHub service - business logic layer."""

from typing import Optional

from github import Github
from github.PullRequest import PullRequest

from ai_reviewer.config import Settings
from ai_reviewer.core.event import PullRequestContext, PullRequestEvent
from ai_reviewer.core.exceptions import ExternalServiceError
from ai_reviewer.core.logging import get_logger
from ai_reviewer.services.github.client import (
    RESOLVED_MARKER,
    create_review,
    fetch_pr_diff,
    fetch_pull_request,
    fetch_review_comments,
    update_review_comment,
)
from ai_reviewer.services.reviewer.schemas import ReviewComment

logger = get_logger("github.service")


def get_pull_request(client: Github, event: PullRequestEvent) -> PullRequest:
    """Get the pull request named by the trigger event."""
    logger.info(f"Fetching PR: {event.owner}/{event.repo}#{event.pr_number}")
    return fetch_pull_request(client, event.owner, event.repo, event.pr_number)


def build_pr_context(pr: PullRequest, event: PullRequestEvent) -> PullRequestContext:
    """Combine event identity with the PR's title and description."""
    return PullRequestContext(
        owner=event.owner,
        repo=event.repo,
        pr_number=event.pr_number,
        title=pr.title or "No Title",
        description=pr.body or "No Description",
        action=event.action,
    )


def get_pr_diff(settings: Settings, pr: PullRequestContext) -> Optional[str]:
    """Get the unified diff of a PR, or None when it cannot be fetched."""
    try:
        diff = fetch_pr_diff(settings, pr.owner, pr.repo, pr.pr_number)
    except ExternalServiceError as e:
        logger.error(f"Failed to fetch diff for {pr.slug}: {e.message}")
        return None
    logger.info(f"Fetched diff for {pr.slug} ({len(diff)} bytes)")
    return diff


def resolve_existing_comments(pr: PullRequest) -> int:
    """Mark every existing review comment as resolved.

    Failures are logged per comment and do not stop the loop.

    Returns:
        Number of comments updated
    """
    comments = fetch_review_comments(pr)
    resolved = 0
    for comment in comments:
        try:
            update_review_comment(comment, (comment.body or "") + RESOLVED_MARKER)
            resolved += 1
        except Exception as e:
            logger.error(f"Failed to resolve review comment {comment.id}: {e}")
    logger.info(f"Resolved {resolved}/{len(comments)} existing review comments")
    return resolved


def submit_review(
    pr: PullRequest,
    comments: list[ReviewComment],
    event: str = "COMMENT",
) -> None:
    """Submit the assembled comments as one review.

    The summary comment (empty path, line 0) becomes the review body, since
    GitHub cannot anchor a line comment to the PR as a whole.
    """
    body = "\n\n".join(c.body for c in comments if c.is_summary)
    line_comments = [
        {"path": c.path, "line": c.line, "body": c.body}
        for c in comments
        if not c.is_summary
    ]
    try:
        create_review(pr, body, line_comments, event)
        logger.info(f"Submitted review with {len(line_comments)} line comments")
    except Exception as e:
        logger.error(f"Failed to submit review: {e}")
        raise
