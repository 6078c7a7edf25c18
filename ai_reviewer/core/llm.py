"""LLM client for an OpenAI-compatible chat endpoint."""

from langchain_core.messages import BaseMessage
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from ai_reviewer.config import Settings
from ai_reviewer.core.exceptions import ConfigurationError
from ai_reviewer.core.logging import get_logger

logger = get_logger("llm")

# Models that accept response_format={"type": "json_object"}
JSON_MODE_MODELS = {
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4-turbo",
    "gpt-4-turbo-preview",
    "gpt-4-1106-preview",
    "gpt-4-0125-preview",
    "gpt-3.5-turbo",
    "gpt-3.5-turbo-1106",
    "gpt-3.5-turbo-0125",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
}


def supports_json_mode(model: str) -> bool:
    """Whether the model declares support for structured JSON output."""
    return model in JSON_MODE_MODELS or model.startswith(("gpt-4o-", "gpt-4.1-"))


def get_chat_llm(
    settings: Settings,
    temperature: float = 0.2,
    max_tokens: int | None = None,
    json_mode: bool = False,
) -> Runnable:
    """Get a chat LLM runnable for the configured model.

    The runnable applies the request timeout to every call and, when
    ``model_max_attempts`` is above one, retries with exponential backoff.
    """
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY not configured")

    model = settings.openai_api_model
    use_json = json_mode and supports_json_mode(model)
    logger.debug(f"[LLM] {model}: temperature={temperature}, json_mode={use_json}")

    llm: Runnable = ChatOpenAI(
        model=model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        temperature=temperature,
        max_tokens=max_tokens or settings.max_tokens,
        top_p=1,
        frequency_penalty=0,
        presence_penalty=0,
        timeout=settings.request_timeout,
        max_retries=0,
    )

    if use_json:
        llm = llm.bind(response_format={"type": "json_object"})

    if settings.model_max_attempts > 1:
        llm = llm.with_retry(
            stop_after_attempt=settings.model_max_attempts,
            wait_exponential_jitter=True,
        )

    return llm


def message_text(message: BaseMessage) -> str:
    """Flatten a chat message's content to plain text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
