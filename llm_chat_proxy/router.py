"""
Request router for the LLM chat proxy.

Validates an inbound chat request, builds the provider-specific request
and performs the single outbound call.
"""

import logging
from typing import Any

import aiohttp

from .builders import build_provider_request, resolve_model
from .errors import BadRequestError, UpstreamError
from .models import ChatRequest, LLMProvider, ProviderRequest

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("messages", "provider", "apiKey")


class RequestRouter:
    """Routes chat requests to the matching provider API."""

    def validate(self, body: Any) -> ChatRequest:
        """
        Check the inbound body and parse it into a ChatRequest.

        Args:
            body: Decoded JSON body (anything that is not an object counts as empty)

        Returns:
            Parsed chat request

        Raises:
            BadRequestError: missing fields or unknown provider
        """
        if not isinstance(body, dict):
            body = {}

        if not all(body.get(field) for field in REQUIRED_FIELDS):
            logger.warning("Rejected request: missing required fields")
            raise BadRequestError("Missing required fields")

        provider = body["provider"]
        if not isinstance(provider, str) or provider not in {p.value for p in LLMProvider}:
            logger.warning(f"Rejected request: unsupported provider {provider!r}")
            raise BadRequestError("Unsupported provider")

        return ChatRequest.model_validate(body)

    async def dispatch(self, request: ChatRequest) -> Any:
        """
        Send the request to its provider and return the decoded response.

        Args:
            request: Validated chat request

        Returns:
            Upstream JSON payload, untouched

        Raises:
            UpstreamError: provider answered with a non-2xx status
        """
        provider_request = build_provider_request(request)

        logger.debug(
            f"Dispatching to {request.provider.value} "
            f"(model={resolve_model(request)}) "
            f"at {provider_request.url}"
        )

        return await self._send(provider_request)

    async def handle(self, body: Any) -> Any:
        """Validate and dispatch a decoded request body."""
        request = self.validate(body)
        return await self.dispatch(request)

    async def _send(self, provider_request: ProviderRequest) -> Any:
        """Perform the outbound POST. The session is closed whatever the outcome."""
        async with aiohttp.ClientSession() as session:
            async with session.post(
                provider_request.url,
                headers=provider_request.headers,
                params=provider_request.params,
                json=provider_request.payload,
            ) as resp:
                if not 200 <= resp.status < 300:
                    error = await resp.text()
                    logger.error(f"Upstream request failed: {resp.status} - {error}")
                    raise UpstreamError(resp.status, error)

                return await resp.json(content_type=None)
