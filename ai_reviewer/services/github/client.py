"""GitHub API client - data layer."""

import requests
from github import Auth, Github, GithubException, UnknownObjectException
from github.PullRequest import PullRequest
from github.PullRequestComment import PullRequestComment
from loguru import logger

from ai_reviewer.config import Settings
from ai_reviewer.core.exceptions import ExternalServiceError, PRNotFoundError

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"

RESOLVED_MARKER = "\n\n> **Resolved automatically by system.**"


def get_github_client(settings: Settings) -> Github:
    """Get a GitHub client authenticated with the action token."""
    if not settings.github_token:
        raise ValueError("GITHUB_TOKEN not configured")

    client = Github(
        auth=Auth.Token(settings.github_token),
        base_url=settings.github_api_url,
        timeout=int(settings.request_timeout),
    )
    logger.debug(f"GitHub client initialized for {settings.github_api_url}")
    return client


def fetch_pull_request(client: Github, owner: str, repo: str, pr_number: int) -> PullRequest:
    """Fetch a pull request from GitHub API."""
    try:
        repository = client.get_repo(f"{owner}/{repo}")
        return repository.get_pull(pr_number)
    except UnknownObjectException as e:
        raise PRNotFoundError(owner, repo, pr_number) from e


def fetch_pr_diff(settings: Settings, owner: str, repo: str, pr_number: int) -> str:
    """Fetch the unified diff of a PR.

    PyGithub does not expose the diff media type, so this goes through
    requests directly.
    """
    url = f"{settings.github_api_url.rstrip('/')}/repos/{owner}/{repo}/pulls/{pr_number}"
    headers = {
        "Authorization": f"Bearer {settings.github_token}",
        "Accept": DIFF_MEDIA_TYPE,
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "ai-pr-reviewer",
    }
    try:
        response = requests.get(url, headers=headers, timeout=settings.request_timeout)
    except requests.RequestException as e:
        raise ExternalServiceError("GitHub", f"diff request failed: {e}") from e

    if response.status_code != 200:
        raise ExternalServiceError("GitHub", f"diff request returned {response.status_code}: {response.text[:200]}")
    return response.text


def fetch_review_comments(pr: PullRequest) -> list[PullRequestComment]:
    """List the existing review comments of a PR."""
    return list(pr.get_review_comments())


def update_review_comment(comment: PullRequestComment, body: str) -> None:
    """Replace the body of a review comment."""
    comment.edit(body=body)


def create_review(
    pr: PullRequest,
    body: str,
    comments: list[dict],
    event: str = "COMMENT",
) -> None:
    """Create a review on a PR."""
    review_comments = []
    for c in comments:
        if c.get("line") and c.get("path"):
            review_comments.append({
                "path": c["path"],
                "line": c["line"],
                "side": "RIGHT",
                "body": c["body"],
            })

    try:
        pr.create_review(
            body=body,
            event=event,
            comments=review_comments,
        )
    except GithubException as e:
        raise ExternalServiceError("GitHub", f"create review failed ({e.status}): {e.data}") from e
    logger.info(f"Created review with {len(review_comments)} comments")
