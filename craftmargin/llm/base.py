# craftmargin/llm/base.py
"""
Base class for HTTP provider adapters.

An adapter makes exactly one request per call and converts every failure
into ``AIResponse(success=False)``. Retries and fallback are the
orchestrator's job, never the adapter's.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from craftmargin.errors import ProviderTransportError

from .types import AIResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_TEMPERATURE = 0.7


class ProviderAdapter(ABC):
    """
    Uniform call contract for one AI backend.

    Subclasses pin the endpoint and model as class attributes and
    implement payload construction and envelope extraction.
    """

    provider_id: str = ""
    endpoint: str = ""
    model: str = ""
    credential_env: str = ""

    def __init__(
        self,
        api_key: str | None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize adapter.

        Args:
            api_key: Provider credential (None/empty makes every call fail fast)
            timeout: Transport timeout in seconds
            transport: Optional httpx transport (test doubles)
        """
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    @abstractmethod
    def build_payload(self, prompt: str, system_prompt: str) -> dict[str, Any]:
        """JSON body for the provider request."""

    @abstractmethod
    def extract_text(self, body: dict[str, Any]) -> str:
        """Pull the generated text out of the provider's response envelope."""

    def request_url(self) -> str:
        return self.endpoint

    def request_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    def request_params(self) -> dict[str, str]:
        return {}

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        # Fresh client per call: concurrent calls share no connection state
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout), transport=self._transport
        ) as http:
            response = await http.post(
                self.request_url(),
                headers=self.request_headers(),
                params=self.request_params(),
                json=payload,
            )

        if response.is_error:
            raise ProviderTransportError(
                self.provider_id,
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderTransportError(self.provider_id, f"Invalid JSON body: {e}")

    async def call(self, prompt: str, system_prompt: str) -> AIResponse:
        """
        Send one prompt to the provider.

        Args:
            prompt: User prompt
            system_prompt: System instructions

        Returns:
            AIResponse with the generated text, or success=False with the error.
            Never raises.
        """
        if not self.has_credential:
            error = ProviderTransportError(
                self.provider_id, f"missing credential ({self.credential_env} not set)"
            )
            logger.warning(str(error))
            return AIResponse.fail(error)

        try:
            body = await self._post(self.build_payload(prompt, system_prompt))
            try:
                text = self.extract_text(body)
            except (KeyError, IndexError, TypeError) as e:
                raise ProviderTransportError(
                    self.provider_id, f"Unexpected response envelope: {e!r}"
                )
            if not isinstance(text, str):
                raise ProviderTransportError(
                    self.provider_id, f"Expected text, got {type(text).__name__}"
                )
        except ProviderTransportError as e:
            logger.warning(f"{self.provider_id} call failed: {e}")
            return AIResponse.fail(e)
        except httpx.TimeoutException as e:
            error = ProviderTransportError(self.provider_id, f"timed out after {self._timeout}s")
            logger.warning(f"{self.provider_id} call failed: {error} ({e!r})")
            return AIResponse.fail(error)
        except httpx.HTTPError as e:
            error = ProviderTransportError(self.provider_id, f"{type(e).__name__}: {e}")
            logger.warning(f"{self.provider_id} call failed: {error}")
            return AIResponse.fail(error)

        logger.info(f"{self.provider_id} returned {len(text)} chars")
        return AIResponse.ok(text, provider=self.provider_id)
