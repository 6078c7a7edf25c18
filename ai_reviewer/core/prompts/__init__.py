"""Prompt templates using Jinja2."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

PROMPTS_DIR = Path(__file__).parent
_env = Environment(loader=FileSystemLoader(PROMPTS_DIR), undefined=StrictUndefined)


def render_code_review_prompt(
    filename: str,
    hunk_content: str,
    numbered_lines: list[tuple[int, str]],
    pr_title: str,
    pr_description: str | None,
) -> str:
    """Render the per-hunk critique prompt."""
    template = _env.get_template("code_review.jinja2")
    return template.render(
        filename=filename,
        hunk_content=hunk_content,
        numbered_lines=numbered_lines,
        pr_title=pr_title,
        pr_description=pr_description or "No Description",
    )


def render_fix_suggestion_prompt(
    filename: str,
    hunk_content: str,
    review_comment: str,
    language: str,
    language_name: str,
) -> str:
    """Render the single-suggestion fix prompt."""
    template = _env.get_template("fix_suggestion.jinja2")
    return template.render(
        filename=filename,
        hunk_content=hunk_content,
        review_comment=review_comment,
        language=language,
        language_name=language_name,
    )


def render_score_summary(score_text: str, progress: int, stats=None) -> str:
    """Render the PR-level score comment."""
    template = _env.get_template("score_summary.jinja2")
    return template.render(score_text=score_text, progress=progress, stats=stats)
