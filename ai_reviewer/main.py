"""AI PR Reviewer - GitHub Action entry point."""

import asyncio
import sys

from ai_reviewer.config import load_settings
from ai_reviewer.core.event import read_event
from ai_reviewer.core.exceptions import ConfigurationError
from ai_reviewer.core.logging import configure_logging, get_logger
from ai_reviewer.services.reviewer.service import review_pull_request

logger = get_logger("main")


def main() -> int:
    """Run one review for the current CI event and return the exit code."""
    configure_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        return 1

    configure_logging(debug=settings.debug, environment=settings.environment)

    try:
        event = read_event(settings.github_event_path)
        if not event.action.is_reviewable:
            logger.info(f"Unsupported event: {settings.github_event_name} (action={event.raw_action})")
            return 0

        result = asyncio.run(review_pull_request(settings, event))
        logger.info(f"Review completed: {result.pr}, {result.comments} comments, score={result.score:.2f}")
        return 0
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
