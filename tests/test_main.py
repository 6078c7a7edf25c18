"""Tests for the action entry point."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from ai_reviewer.main import main
from ai_reviewer.services.reviewer.schemas import ReviewResult

REQUIRED_INPUTS = {
    "INPUT_GITHUB_TOKEN": "ghp_test",
    "INPUT_OPENAI_API_KEY": "sk-test",
    "INPUT_OPENAI_API_MODEL": "gpt-4o-mini",
    "INPUT_MAX_TOKENS": "700",
}


@pytest.fixture
def action_env(monkeypatch, tmp_path):
    """Runner environment with an event payload file."""
    monkeypatch.chdir(tmp_path)
    for name, value in REQUIRED_INPUTS.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")

    def write_event(action):
        """Write a payload with the given action and point the runner at it."""
        path = tmp_path / "event.json"
        path.write_text(
            json.dumps({
                "action": action,
                "number": 7,
                "repository": {"name": "shop", "owner": {"login": "acme"}},
            }),
            encoding="utf-8",
        )
        monkeypatch.setenv("GITHUB_EVENT_PATH", str(path))

    return write_event


class TestMain:
    """Tests for main."""

    def test_unsupported_action_is_a_noop(self, action_env):
        """Other actions exit 0 without touching GitHub."""
        action_env("closed")

        with patch("ai_reviewer.main.review_pull_request", new_callable=AsyncMock) as review, \
                patch("ai_reviewer.services.github.client.requests.get") as http_get:
            assert main() == 0

        review.assert_not_called()
        http_get.assert_not_called()

    @pytest.mark.parametrize("action", ["opened", "synchronize"])
    def test_supported_actions_run_review(self, action_env, action):
        """opened and synchronize run the review with the loaded settings."""
        action_env(action)

        with patch("ai_reviewer.main.review_pull_request", new_callable=AsyncMock) as review:
            review.return_value = ReviewResult(pr="acme/shop#7", comments=2, score=1.6)
            assert main() == 0

        settings, event = review.call_args.args
        assert event.pr_number == 7
        assert settings.openai_api_model == "gpt-4o-mini"

    def test_unhandled_error_exits_1(self, action_env):
        """An unexpected error fails the step."""
        action_env("opened")

        with patch("ai_reviewer.main.review_pull_request", new_callable=AsyncMock) as review:
            review.side_effect = RuntimeError("boom")
            assert main() == 1

    def test_missing_input_exits_1(self, action_env, monkeypatch):
        """A missing required input fails before any review."""
        action_env("opened")
        monkeypatch.delenv("INPUT_OPENAI_API_KEY")

        with patch("ai_reviewer.main.review_pull_request", new_callable=AsyncMock) as review:
            assert main() == 1

        review.assert_not_called()

    def test_missing_event_file_exits_1(self, action_env, monkeypatch, tmp_path):
        """A missing event file fails the step."""
        action_env("opened")
        monkeypatch.setenv("GITHUB_EVENT_PATH", str(tmp_path / "missing.json"))

        assert main() == 1
