"""Reviewer service - orchestration layer."""

from typing import Optional

from github import Github

from ai_reviewer.config import Settings
from ai_reviewer.core.event import PullRequestEvent
from ai_reviewer.core.logging import get_logger
from ai_reviewer.services.github.client import get_github_client
from ai_reviewer.services.github.service import (
    build_pr_context,
    get_pr_diff,
    get_pull_request,
    resolve_existing_comments,
    submit_review,
)
from ai_reviewer.services.reviewer.assembler import assemble_comments
from ai_reviewer.services.reviewer.diff_parser import parse_diff
from ai_reviewer.services.reviewer.engine import ReviewEngine
from ai_reviewer.services.reviewer.path_filter import filter_files
from ai_reviewer.services.reviewer.schemas import ReviewResult
from ai_reviewer.services.reviewer.scoring import (
    ScoreWeights,
    build_score_summary,
    calculate_score,
    extract_diff_stats,
)

logger = get_logger("reviewer.service")


async def review_pull_request(
    settings: Settings,
    event: PullRequestEvent,
    client: Optional[Github] = None,
    engine: Optional[ReviewEngine] = None,
) -> ReviewResult:
    """Review a pull request hunk by hunk and publish one review."""
    slug = f"{event.owner}/{event.repo}#{event.pr_number}"
    logger.info(f"Starting review: {slug} (action={event.action.value})")

    client = client or get_github_client(settings)
    pr = get_pull_request(client, event)
    context = build_pr_context(pr, event)

    resolve_existing_comments(pr)

    diff = get_pr_diff(settings, context)
    if not diff:
        logger.info("No diff found")
        return ReviewResult(pr=slug, summary="No diff found.")

    files = parse_diff(diff)
    stats = extract_diff_stats(files)
    weights = ScoreWeights.from_settings(settings)
    score = calculate_score(stats, weights)
    logger.info(
        f"Diff stats: +{stats.lines_added}/-{stats.lines_deleted}, "
        f"{stats.files_changed} files, score={score:.2f}"
    )

    reviewable_files = filter_files(files, settings.exclude_patterns)
    skipped = len(files) - len(reviewable_files)
    if skipped:
        logger.info(f"Skipping {skipped} deleted or excluded files")

    engine = engine or ReviewEngine(settings)
    file_reviews = await engine.review_files(reviewable_files, context)

    summary_body = build_score_summary(stats, weights)
    comments = assemble_comments(file_reviews, summary_body)

    submit_review(pr, comments)

    return ReviewResult(
        pr=slug,
        files_reviewed=len(reviewable_files),
        comments=len(comments) - 1,
        score=score,
        summary=summary_body,
    )
