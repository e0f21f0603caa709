"""
LLM Chat Proxy

A single-endpoint proxy that forwards chat requests to OpenAI, Anthropic or
Google, translating the request shape and relaying the provider's response.
"""

from .router import RequestRouter
from .models import ChatRequest, LLMProvider

__all__ = ["RequestRouter", "ChatRequest", "LLMProvider"]
