"""Data types for the reviewer pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel

DELETED_FILE_PATH = "/dev/null"


class ChangeKind(str, Enum):
    ADDED = "added"
    DELETED = "deleted"
    CONTEXT = "context"


@dataclass(frozen=True)
class DiffLineChange:
    """One line of a hunk.

    ``line_number`` is the new-file line. Deleted lines have no new-file
    position and carry the new-file line just before them instead.
    """

    kind: ChangeKind
    line_number: int
    text: str


@dataclass(frozen=True)
class DiffHunk:
    """A hunk with its raw text (``@@`` header included) and its lines."""

    content: str
    changes: tuple[DiffLineChange, ...] = ()

    @property
    def commentable_lines(self) -> set[int]:
        """New-file lines a review comment may be attached to."""
        return {c.line_number for c in self.changes if c.kind is not ChangeKind.DELETED}


@dataclass(frozen=True)
class DiffFile:
    path: str
    hunks: tuple[DiffHunk, ...] = ()

    @property
    def is_deleted(self) -> bool:
        return self.path == DELETED_FILE_PATH


@dataclass(frozen=True)
class DiffStats:
    """Aggregate counts over a whole diff.

    ``lines_changed`` counts the unchanged context lines shown in the diff.
    """

    lines_added: int = 0
    lines_deleted: int = 0
    lines_changed: int = 0
    files_changed: int = 0

    def __add__(self, other: "DiffStats") -> "DiffStats":
        return DiffStats(
            lines_added=self.lines_added + other.lines_added,
            lines_deleted=self.lines_deleted + other.lines_deleted,
            lines_changed=self.lines_changed + other.lines_changed,
            files_changed=self.files_changed + other.files_changed,
        )


@dataclass(frozen=True)
class Finding:
    line_number: int
    review_comment: str
    suggested_fix: Optional[str] = None


@dataclass(frozen=True)
class ReviewComment:
    """A comment in the published review.

    ``path=""`` with ``line=0`` marks the PR-level summary.
    """

    body: str
    path: str
    line: int

    @property
    def is_summary(self) -> bool:
        return self.path == "" and self.line == 0


@dataclass
class FileReview:
    """Findings for one file, grouped per hunk in diff order."""

    path: str
    hunk_findings: list[list[Finding]] = field(default_factory=list)
    language: str = ""


class ReviewResult(BaseModel):
    """Result of a reviewer run."""

    success: bool = True
    pr: str
    files_reviewed: int = 0
    comments: int = 0
    score: float = 0.0
    summary: str = ""
