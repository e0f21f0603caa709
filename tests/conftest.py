"""Shared fixtures for LLM chat proxy tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from llm_chat_proxy.models import ChatRequest, LLMProvider


def make_mock_session(captured: dict, status: int = 200, response_data=None, text: str = "", json_error=None):
    """Create a mock aiohttp session that records the arguments passed to post()."""
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=response_data, side_effect=json_error)
    mock_response.text = AsyncMock(return_value=text)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=False)

    mock_session = MagicMock()
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=False)

    def capture_post(url, **kwargs):
        captured["url"] = url
        captured["headers"] = kwargs.get("headers", {})
        captured["params"] = kwargs.get("params", {})
        captured["json"] = kwargs.get("json", {})
        return mock_response

    mock_session.post = MagicMock(side_effect=capture_post)
    return mock_session


@pytest.fixture
def openai_request():
    """Create a sample OpenAI request."""
    return ChatRequest(
        provider=LLMProvider.OPENAI,
        apiKey="sk-test",
        messages=[{"role": "user", "content": "Hello"}],
    )


@pytest.fixture
def anthropic_request():
    """Create a sample Anthropic request with a system prompt."""
    return ChatRequest(
        provider=LLMProvider.ANTHROPIC,
        apiKey="sk-ant-test",
        messages=[
            {"role": "system", "content": "S"},
            {"role": "user", "content": "U"},
        ],
    )


@pytest.fixture
def google_request():
    """Create a sample Google request."""
    return ChatRequest(
        provider=LLMProvider.GOOGLE,
        apiKey="g-test",
        messages=[{"role": "user", "content": "hi"}],
    )


@pytest.fixture
def chat_body():
    """A valid raw inbound body."""
    return {
        "messages": [{"role": "user", "content": "Hello"}],
        "provider": "openai",
        "apiKey": "sk-test",
    }


@pytest.fixture
def mock_session_factory():
    """Expose make_mock_session to tests."""
    return make_mock_session
