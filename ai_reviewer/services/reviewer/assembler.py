"""Build the ordered comment list of a review."""

import re

from ai_reviewer.services.reviewer.schemas import FileReview, Finding, ReviewComment

SUMMARY_PATH = ""
SUMMARY_LINE = 0


def code_fence(text: str) -> str:
    """Backtick fence longer than any backtick run inside ``text``."""
    longest = max((len(run) for run in re.findall(r"`+", text)), default=0)
    return "`" * max(3, longest + 1)


def format_finding(finding: Finding, language: str = "") -> str:
    """Critique text, followed by the suggested fix as a fenced block."""
    if finding.suggested_fix is None:
        return finding.review_comment
    fence = code_fence(finding.suggested_fix)
    return (
        f"{finding.review_comment}\n\n"
        f"Suggested Fix:\n"
        f"{fence}{language}\n{finding.suggested_fix}\n{fence}"
    )


def assemble_comments(file_reviews: list[FileReview], summary_body: str) -> list[ReviewComment]:
    """Flatten findings file by file, hunk by hunk, and append the summary.

    The summary is always the last comment and the only one with an empty
    path and line 0.
    """
    comments = [
        ReviewComment(
            body=format_finding(finding, review.language),
            path=review.path,
            line=finding.line_number,
        )
        for review in file_reviews
        for findings in review.hunk_findings
        for finding in findings
    ]
    comments.append(ReviewComment(body=summary_body, path=SUMMARY_PATH, line=SUMMARY_LINE))
    return comments
