"""Schemas for the model's review reply."""

from pydantic import BaseModel, ConfigDict, Field


class HunkReviewEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    line_number: int = Field(alias="lineNumber")
    review_comment: str = Field(alias="reviewComment")


class HunkReviewReply(BaseModel):
    reviews: list[HunkReviewEntry]
