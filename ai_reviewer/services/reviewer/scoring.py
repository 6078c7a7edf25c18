"""Heuristic PR score from diff statistics."""

from dataclasses import dataclass

from ai_reviewer.config import Settings
from ai_reviewer.core.prompts import render_score_summary
from ai_reviewer.services.reviewer.schemas import ChangeKind, DiffFile, DiffStats


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of the linear score.

    Added code weighs more than deleted code and every touched file costs
    a flat penalty.
    """

    added: float = 0.5
    deleted: float = 0.3
    changed: float = 0.2
    files: float = 5.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScoreWeights":
        return cls(
            added=settings.score_weight_added,
            deleted=settings.score_weight_deleted,
            changed=settings.score_weight_changed,
            files=settings.score_weight_files,
        )


DEFAULT_WEIGHTS = ScoreWeights()


def extract_diff_stats(files: list[DiffFile]) -> DiffStats:
    """Count added, deleted and context lines over the whole diff."""
    added = deleted = context = 0
    for diff_file in files:
        for hunk in diff_file.hunks:
            for change in hunk.changes:
                if change.kind is ChangeKind.ADDED:
                    added += 1
                elif change.kind is ChangeKind.DELETED:
                    deleted += 1
                else:
                    context += 1
    return DiffStats(
        lines_added=added,
        lines_deleted=deleted,
        lines_changed=context,
        files_changed=len(files),
    )


def calculate_score(stats: DiffStats, weights: ScoreWeights = DEFAULT_WEIGHTS) -> float:
    return (
        weights.added * stats.lines_added
        + weights.deleted * stats.lines_deleted
        + weights.changed * stats.lines_changed
        - weights.files * stats.files_changed
    )


def clamp_score(score: float) -> float:
    """Limit the score to [0, 100] for the progress bar."""
    return min(max(score, 0.0), 100.0)


def format_score(score: float) -> str:
    """Fixed-point text, two decimals at most, trailing zeros dropped."""
    # adding 0.0 turns -0.0 into 0.0
    value = round(score, 2) + 0.0
    return f"{value:.2f}".rstrip("0").rstrip(".")


def build_score_summary(stats: DiffStats, weights: ScoreWeights = DEFAULT_WEIGHTS) -> str:
    """Markdown body of the PR-level score comment."""
    score = calculate_score(stats, weights)
    return render_score_summary(
        score_text=format_score(score),
        progress=int(round(clamp_score(score))),
        stats=stats,
    )
