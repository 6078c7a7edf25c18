"""Schemas for model replies."""

from ai_reviewer.schemas.review import HunkReviewEntry, HunkReviewReply

__all__ = ["HunkReviewEntry", "HunkReviewReply"]
