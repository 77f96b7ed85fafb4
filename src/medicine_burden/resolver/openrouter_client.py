# ============================================================================
# src/medicine_burden/resolver/openrouter_client.py
# ============================================================================
"""
OpenRouter Name Resolver Client

Calls an OpenAI-compatible chat-completions endpoint (OpenRouter by
default) to identify which medicine a free-text name refers to.

Provider failures are mapped onto the ResolutionError hierarchy:
- missing API key  → ResolverConfigurationError
- HTTP 429         → RateLimitError
- HTTP 402         → ServiceUnavailableError
- other non-2xx    → UpstreamError
- no content       → EmptyResponseError
- timeout          → ResolverTimeoutError

Setup:
    export OPENROUTER_API_KEY=sk-or-...
"""

import aiohttp
import asyncio
import json
from typing import Dict, Any, Optional, Tuple

from ..config.resolver_config import resolver_settings
from ..utils.exceptions import (
    EmptyResponseError,
    RateLimitError,
    ResolutionError,
    ResolverConfigurationError,
    ResolverTimeoutError,
    ServiceUnavailableError,
    UpstreamError,
)
from .base import BaseResolverClient
from .prompts import build_messages


class OpenRouterResolverClient(BaseResolverClient):
    """
    OpenRouter-based medicine name resolver.

    Config options (defaults come from resolver_settings):
        api_key: OpenRouter API key
        base_url: API base URL (default: https://openrouter.ai/api/v1)
        model: Model name
        temperature: Sampling temperature (default: 0.0)
        timeout: Request timeout in seconds
        referer: HTTP-Referer attribution header
        title: X-Title attribution header
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

        self.api_key = self.config.get('api_key', resolver_settings.OPENROUTER_API_KEY)
        self.base_url = self.config.get('base_url', resolver_settings.OPENROUTER_BASE_URL).rstrip('/')
        self._model_name = self.config.get('model', resolver_settings.OPENROUTER_MODEL)
        self.temperature = self.config.get('temperature', resolver_settings.RESOLVER_TEMPERATURE)
        self.timeout = self.config.get('timeout', resolver_settings.RESOLVER_TIMEOUT)
        self.referer = self.config.get('referer', resolver_settings.APP_REFERER)
        self.title = self.config.get('title', resolver_settings.APP_TITLE)

        # HTTP session (created lazily, tied to event loop)
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

        self.logger.info(f"Initialized OpenRouter resolver: {self.base_url} / {self._model_name}")

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session for current event loop."""
        current_loop = asyncio.get_running_loop()

        needs_new_session = (
            self._session is None
            or self._session.closed
            or self._session_loop is not current_loop
        )

        if needs_new_session:
            if self._session is not None and not self._session.closed:
                try:
                    await self._session.close()
                except RuntimeError as e:
                    # Session bound to a loop that is already gone
                    self.logger.debug(f"Could not close stale session: {e}")

            timeout = aiohttp.ClientTimeout(total=None, sock_connect=30)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._session_loop = current_loop

        return self._session

    async def close(self):
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        self._session_loop = None

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.referer,
            "X-Title": self.title,
        }

    def _build_payload(self, medicine_name: str) -> Dict[str, Any]:
        return {
            "model": self._model_name,
            "temperature": self.temperature,
            "messages": build_messages(medicine_name),
        }

    async def _post_chat_completion(self, payload: Dict[str, Any]) -> Tuple[int, str]:
        """
        POST the payload and return (status, body text).
        """
        session = await self._get_session()
        async with session.post(
            self.completions_url,
            json=payload,
            headers=self._build_headers(),
        ) as response:
            return response.status, await response.text()

    async def complete(self, medicine_name: str) -> str:
        """
        Ask the model to identify one medicine name.

        Returns:
            The assistant message content
        """
        if not self.api_key:
            raise ResolverConfigurationError("OPENROUTER_API_KEY is not configured")

        payload = self._build_payload(medicine_name)

        try:
            status, body = await asyncio.wait_for(
                self._post_chat_completion(payload),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            self.logger.error(
                f"OpenRouter request timed out after {self.timeout}s "
                f"(model={self._model_name})"
            )
            raise ResolverTimeoutError(
                f"Name resolution timed out after {self.timeout}s"
            )
        except aiohttp.ClientError as e:
            self.logger.error(f"OpenRouter request failed: {e}")
            raise UpstreamError("Failed to reach OpenRouter", status=0, details=str(e)) from e

        if status == 429:
            raise RateLimitError("Rate limit exceeded. Please try again shortly.")
        if status == 402:
            raise ServiceUnavailableError("Service temporarily unavailable. Please try again later.")
        if not 200 <= status < 300:
            self.logger.error(f"OpenRouter error ({status}): {body[:200]}")
            raise UpstreamError("Failed to reach OpenRouter", status=status, details=body or None)

        content = self._extract_content(body)
        if not content:
            raise EmptyResponseError("No response from AI")
        return content

    def _extract_content(self, body: str) -> Optional[str]:
        """Pull choices[0].message.content out of a completion body."""
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ResolutionError(f"Malformed completion response: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None
