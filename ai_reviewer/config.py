"""Configuration for the AI PR Reviewer action."""

from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ai_reviewer.core.exceptions import ConfigurationError
from ai_reviewer.services.reviewer.path_filter import parse_exclude_patterns


class Settings(BaseSettings):
    """Action inputs and runner environment.

    GitHub exposes every action input as ``INPUT_<NAME>``; runner variables
    such as ``GITHUB_EVENT_PATH`` are read without the prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    # Required action inputs
    github_token: str = Field(min_length=1)
    openai_api_key: str = Field(min_length=1)
    openai_api_model: str = Field(min_length=1)
    max_tokens: int = Field(gt=0)

    # Optional action inputs
    exclude: str = Field(default="")
    suggest_fixes: bool = Field(default=True)
    fix_max_tokens: int = Field(default=150, gt=0)
    openai_base_url: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=60.0, gt=0)
    model_max_attempts: int = Field(default=1, ge=1)
    debug: bool = Field(default=False)

    # Score weights
    score_weight_added: float = Field(default=0.5)
    score_weight_deleted: float = Field(default=0.3)
    score_weight_changed: float = Field(default=0.2)
    score_weight_files: float = Field(default=5.0)

    # Runner environment
    github_event_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_EVENT_PATH", "github_event_path"),
    )
    github_event_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_EVENT_NAME", "github_event_name"),
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        validation_alias=AliasChoices("GITHUB_API_URL", "github_api_url"),
    )
    github_actions: bool = Field(
        default=False,
        validation_alias=AliasChoices("GITHUB_ACTIONS", "github_actions"),
    )

    @field_validator("openai_base_url", mode="before")
    @classmethod
    def _empty_as_none(cls, value):
        # Unset action inputs arrive as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def exclude_patterns(self) -> list[str]:
        return parse_exclude_patterns(self.exclude)

    @property
    def environment(self) -> str:
        return "ci" if self.github_actions else "development"


def load_settings(**overrides) -> Settings:
    """Build the settings once at process start.

    Raises:
        ConfigurationError: a required input is missing or malformed.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ConfigurationError(
            f"Invalid or missing action inputs: {', '.join(fields)}",
            details={"errors": e.errors(include_url=False)},
        ) from e
