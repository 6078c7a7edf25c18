#!/usr/bin/env python3
"""Run a PR review locally against a real pull request."""
import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from ai_reviewer.config import load_settings
from ai_reviewer.core.event import PullRequestEvent, TriggerAction
from ai_reviewer.core.logging import configure_logging
from ai_reviewer.services.reviewer.service import review_pull_request


async def main(owner: str, repo: str, pr_number: int):
    settings = load_settings()
    configure_logging(debug=True)
    event = PullRequestEvent(
        owner=owner,
        repo=repo,
        pr_number=pr_number,
        action=TriggerAction.SYNCHRONIZE,
        raw_action="synchronize",
    )
    result = await review_pull_request(settings, event)
    print(f"Review result: {result}")


if __name__ == "__main__":
    if len(sys.argv) != 4:
        sys.exit("usage: run_review.py OWNER REPO PR_NUMBER")
    asyncio.run(main(sys.argv[1], sys.argv[2], int(sys.argv[3])))
