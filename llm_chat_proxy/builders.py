"""
Provider request builders.

Each builder turns a ChatRequest into the provider's own request shape.
Builders are pure: they read the request and return a new ProviderRequest.
"""

from typing import Any, Callable, Dict

from .models import ChatRequest, LLMProvider, ProviderRequest

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"
GOOGLE_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

ANTHROPIC_VERSION = "2023-06-01"

DEFAULT_MODELS = {
    LLMProvider.OPENAI: "gpt-3.5-turbo",
    LLMProvider.ANTHROPIC: "claude-3-sonnet-20240229",
    LLMProvider.GOOGLE: "gemini-pro",
}

TEMPERATURE = 0.7
MAX_TOKENS = 500


def resolve_model(request: ChatRequest) -> str:
    """Return the requested model, or the provider default when unset or empty."""
    return request.model or DEFAULT_MODELS[request.provider]


def content_text(content: Any) -> str:
    """Plain text of a message body; list bodies keep only their text parts."""
    if isinstance(content, list):
        return " ".join(
            part["text"] for part in content
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
    return str(content)


def build_openai_request(request: ChatRequest) -> ProviderRequest:
    """Messages go through unchanged."""
    return ProviderRequest(
        url=OPENAI_URL,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {request.api_key}",
        },
        payload={
            "model": resolve_model(request),
            "messages": [m.model_dump(exclude_unset=True) for m in request.messages],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        },
    )


def build_anthropic_request(request: ChatRequest) -> ProviderRequest:
    """
    Anthropic takes the system prompt as a top-level field.

    The first system message becomes ``system``; every system message is
    dropped from the conversation list. ``system`` is omitted when there is
    no system message.
    """
    system_message = next(
        (m for m in request.messages if m.role == "system"),
        None,
    )
    conversation = [
        m.model_dump(exclude_unset=True)
        for m in request.messages
        if m.role != "system"
    ]

    payload = {
        "model": resolve_model(request),
        "max_tokens": MAX_TOKENS,
        "messages": conversation,
    }
    if system_message is not None:
        payload["system"] = system_message.content

    return ProviderRequest(
        url=ANTHROPIC_URL,
        headers={
            "Content-Type": "application/json",
            "x-api-key": request.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        },
        payload=payload,
    )


def build_google_request(request: ChatRequest) -> ProviderRequest:
    """Flatten the whole conversation into one content block, one part per message."""
    return ProviderRequest(
        url=GOOGLE_URL.format(model=resolve_model(request)),
        headers={"Content-Type": "application/json"},
        params={"key": request.api_key},
        payload={
            "contents": [{
                "parts": [{"text": f"{m.role}: {content_text(m.content)}"} for m in request.messages],
            }],
            "generationConfig": {
                "temperature": TEMPERATURE,
                "maxOutputTokens": MAX_TOKENS,
            },
        },
    )


PROVIDER_BUILDERS: Dict[LLMProvider, Callable[[ChatRequest], ProviderRequest]] = {
    LLMProvider.OPENAI: build_openai_request,
    LLMProvider.ANTHROPIC: build_anthropic_request,
    LLMProvider.GOOGLE: build_google_request,
}


def build_provider_request(request: ChatRequest) -> ProviderRequest:
    """Build the outbound request for the request's provider."""
    return PROVIDER_BUILDERS[request.provider](request)
