"""Custom exceptions for the reviewer."""


class ReviewerError(Exception):
    """Base exception for all reviewer errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ReviewerError):
    """Missing or invalid action input."""


class EventPayloadError(ReviewerError):
    """The CI trigger payload is missing or unreadable."""

    def __init__(self, path: str | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read event payload {path!r}: {reason}")


class ExternalServiceError(ReviewerError):
    """External service (GitHub, model endpoint) error."""

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        super().__init__(f"{service} error: {message}")


class PRNotFoundError(ExternalServiceError):
    """Pull request not found."""

    def __init__(self, owner: str, repo: str, pr_number: int) -> None:
        super().__init__("GitHub", f"Pull request not found: {owner}/{repo}#{pr_number}")


class ModelResponseError(ReviewerError):
    """Model reply is not valid JSON or does not match the review schema."""

    def __init__(self, message: str, raw: str) -> None:
        self.raw = raw
        super().__init__(message, details={"raw": raw})
