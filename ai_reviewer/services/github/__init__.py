"""GitHub service."""

from ai_reviewer.services.github.client import get_github_client
from ai_reviewer.services.github.service import (
    build_pr_context,
    get_pr_diff,
    get_pull_request,
    resolve_existing_comments,
    submit_review,
)

__all__ = [
    "build_pr_context",
    "get_github_client",
    "get_pr_diff",
    "get_pull_request",
    "resolve_existing_comments",
    "submit_review",
]
