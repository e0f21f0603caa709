"""
Data models for the LLM chat proxy.
"""

import os
from enum import Enum
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, ConfigDict, Field


class LLMProvider(str, Enum):
    """Supported upstream LLM providers."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"


# Request Models

class ChatMessage(BaseModel):
    """A single chat turn. Shapes are not checked; every key is forwarded as sent."""
    model_config = ConfigDict(extra="allow")

    role: Any = None
    content: Any = None


class ChatRequest(BaseModel):
    """An inbound chat request."""
    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatMessage]
    provider: LLMProvider
    api_key: str = Field(alias="apiKey", repr=False)
    model: Optional[str] = None


class ProviderRequest(BaseModel):
    """Provider-specific outbound request, built per call and never stored."""
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    params: Dict[str, str] = Field(default_factory=dict)  # query string
    payload: Dict[str, Any] = Field(default_factory=dict)


# Server Configuration

class ProxyConfig(BaseModel):
    """Configuration for the proxy server process."""

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv('LLM_PROXY_HOST', '0.0.0.0'),
            port=int(os.getenv('LLM_PROXY_PORT', '8000')),
            log_level=os.getenv('LLM_PROXY_LOG_LEVEL', 'info').lower(),
        )
