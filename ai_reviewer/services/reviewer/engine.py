"""Per-hunk code review with the language model."""

import json
from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.runnables import Runnable
from pydantic import ValidationError

from ai_reviewer.config import Settings
from ai_reviewer.core.event import PullRequestContext
from ai_reviewer.core.exceptions import ModelResponseError
from ai_reviewer.core.llm import get_chat_llm, message_text
from ai_reviewer.core.logging import get_logger
from ai_reviewer.core.prompts import render_code_review_prompt, render_fix_suggestion_prompt
from ai_reviewer.schemas.review import HunkReviewEntry, HunkReviewReply
from ai_reviewer.services.reviewer.languages import detect_language
from ai_reviewer.services.reviewer.schemas import ChangeKind, DiffFile, DiffHunk, FileReview, Finding

logger = get_logger("reviewer.engine")

NO_FIX_AVAILABLE = "no fix available"

REVIEW_TEMPERATURE = 0.2
FIX_TEMPERATURE = 0.5

FIX_SYSTEM_PROMPT = "You are a senior engineer who answers with code only."


def parse_review_reply(raw: str) -> list[HunkReviewEntry]:
    """Parse and validate the model's ``{"reviews": [...]}`` reply.

    Models without JSON mode sometimes wrap the object in prose or a
    markdown fence, so the outermost ``{...}`` is tried as a fallback.

    Raises:
        ModelResponseError: the reply is not JSON or does not match the schema.
    """
    text = raw.strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        json_start = text.find("{")
        json_end = text.rfind("}") + 1
        if json_start == -1 or json_end <= json_start:
            raise ModelResponseError(f"Reply is not JSON: {e}", raw) from e
        try:
            data = json.loads(text[json_start:json_end])
        except json.JSONDecodeError as inner:
            raise ModelResponseError(f"Reply is not JSON: {inner}", raw) from inner

    try:
        return HunkReviewReply.model_validate(data).reviews
    except ValidationError as e:
        raise ModelResponseError(f"Reply does not match review schema: {e.error_count()} errors", raw) from e


def numbered_lines(hunk: DiffHunk) -> list[tuple[int, str]]:
    """(new-file line, content) for every added or context line.

    Deleted lines have no new-file position and are left out; the raw hunk
    text still shows them.
    """
    return [(c.line_number, c.text) for c in hunk.changes if c.kind is not ChangeKind.DELETED]


def strip_code_fence(text: str) -> str:
    lines = text.strip().splitlines()
    if len(lines) >= 2 and lines[0].startswith("```") and lines[-1].strip() == "```":
        lines = lines[1:-1]
    return "\n".join(lines).strip()


class ReviewEngine:
    """Critiques hunks one at a time and optionally asks for a fix per finding."""

    def __init__(
        self,
        settings: Settings,
        review_llm: Optional[Runnable] = None,
        fix_llm: Optional[Runnable] = None,
    ) -> None:
        self.settings = settings
        self.review_llm = review_llm or get_chat_llm(
            settings,
            temperature=REVIEW_TEMPERATURE,
            max_tokens=settings.max_tokens,
            json_mode=True,
        )
        if fix_llm is None and settings.suggest_fixes:
            fix_llm = get_chat_llm(
                settings,
                temperature=FIX_TEMPERATURE,
                max_tokens=settings.fix_max_tokens,
            )
        self.fix_llm = fix_llm if settings.suggest_fixes else None

    async def review_files(self, files: list[DiffFile], pr: PullRequestContext) -> list[FileReview]:
        reviews = []
        for idx, diff_file in enumerate(files):
            logger.info(f"Reviewing file {idx + 1}/{len(files)}: {diff_file.path}")
            reviews.append(await self.review_file(diff_file, pr))
        return reviews

    async def review_file(self, diff_file: DiffFile, pr: PullRequestContext) -> FileReview:
        language, _ = detect_language(diff_file.path)
        review = FileReview(path=diff_file.path, language=language)
        for hunk in diff_file.hunks:
            review.hunk_findings.append(await self.review_hunk(diff_file, hunk, pr))
        return review

    async def review_hunk(self, diff_file: DiffFile, hunk: DiffHunk, pr: PullRequestContext) -> list[Finding]:
        """Findings for one hunk, in the order the model returned them.

        Never raises: transport and parse failures yield no findings.
        """
        prompt = render_code_review_prompt(
            filename=diff_file.path,
            hunk_content=hunk.content,
            numbered_lines=numbered_lines(hunk),
            pr_title=pr.title,
            pr_description=pr.description,
        )

        raw = await self._request_review(prompt, diff_file.path)
        if raw is None:
            return []

        try:
            entries = parse_review_reply(raw)
        except ModelResponseError as e:
            logger.warning(f"Failed to parse review for {diff_file.path}: {e.message}")
            logger.warning(f"Faulty reply: {e.raw[:2000]}")
            return []

        valid_lines = hunk.commentable_lines
        findings = []
        for entry in entries:
            comment = entry.review_comment.strip()
            if not comment:
                continue
            if entry.line_number not in valid_lines:
                logger.warning(
                    f"Dropping comment on {diff_file.path}:{entry.line_number}, line is outside the hunk"
                )
                continue

            suggested_fix = None
            if self.fix_llm is not None:
                suggested_fix = await self.suggest_fix(diff_file, hunk, comment)

            findings.append(
                Finding(
                    line_number=entry.line_number,
                    review_comment=comment,
                    suggested_fix=suggested_fix,
                )
            )

        logger.info(f"Processed hunk of {diff_file.path}: {len(findings)} findings")
        return findings

    async def suggest_fix(self, diff_file: DiffFile, hunk: DiffHunk, review_comment: str) -> str:
        """One code suggestion for a critique, or the fallback text."""
        language, language_name = detect_language(diff_file.path)
        prompt = render_fix_suggestion_prompt(
            filename=diff_file.path,
            hunk_content=hunk.content,
            review_comment=review_comment,
            language=language,
            language_name=language_name,
        )
        try:
            response = await self.fix_llm.ainvoke(
                [SystemMessage(content=FIX_SYSTEM_PROMPT), HumanMessage(content=prompt)]
            )
        except Exception as e:
            logger.warning(f"Fix suggestion failed for {diff_file.path}: {e}")
            return NO_FIX_AVAILABLE

        fix = strip_code_fence(message_text(response))
        return fix or NO_FIX_AVAILABLE

    async def _request_review(self, prompt: str, path: str) -> Optional[str]:
        try:
            response = await self.review_llm.ainvoke([SystemMessage(content=prompt)])
        except Exception as e:
            logger.error(f"Review request failed for {path}: {e}")
            return None

        raw = message_text(response)
        logger.debug(f"Raw review reply for {path}: {raw}")
        return raw
