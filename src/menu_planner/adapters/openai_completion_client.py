"""OpenAI Responses API client for text completions."""

import asyncio
import logging
from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from menu_planner.domain.errors import (
    AuthError,
    CompletionError,
    CompletionTimeoutError,
    ProviderError,
    RateLimitedError,
)
from menu_planner.services.completion import CompletionClient, CompletionOptions

_RETRYABLE_STATUS_CODES = {408, 409}

_logger = logging.getLogger(__name__)


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by the OpenAI Responses API.

    SDK-level retries are disabled; transient failures are retried here with
    bounded exponential backoff, separately for every call.
    """

    client: AsyncOpenAI
    retry_base_delay_seconds: float = 1.0
    retry_max_delay_seconds: float = 30.0

    @classmethod
    def create(
        cls,
        api_key: str | None,
        *,
        timeout_seconds: float = 60.0,
        retry_base_delay_seconds: float = 1.0,
        retry_max_delay_seconds: float = 30.0,
    ) -> "OpenAICompletionClient":
        """Create a client, failing fast when no API key is configured."""
        if not api_key or not api_key.strip():
            raise AuthError("OPENAI_API_KEY is not set")
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, max_retries=0, timeout=timeout_seconds
            ),
            retry_base_delay_seconds=retry_base_delay_seconds,
            retry_max_delay_seconds=retry_max_delay_seconds,
        )

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Send ``prompt`` and return the output text, retrying transient errors."""
        attempt = 0
        while True:
            try:
                return await self._request(prompt, options)
            except CompletionError as exc:
                attempt += 1
                if not _is_retryable(exc) or attempt > options.max_retries:
                    raise
                delay = self._backoff(attempt)
                _logger.warning(
                    "Completion failed (attempt %s/%s), retrying in %.1fs: %s",
                    attempt,
                    options.max_retries + 1,
                    delay,
                    exc,
                )
                await asyncio.sleep(delay)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()

    async def _request(self, prompt: str, options: CompletionOptions) -> str:
        """Issue a single request and translate SDK errors."""
        try:
            response = await self.client.responses.create(
                model=options.model,
                input=prompt,
                max_output_tokens=options.max_output_tokens,
            )
        except openai.APIError as exc:
            raise _translate(exc) from exc
        output_text = response.output_text
        if not output_text:
            raise ProviderError("OpenAI returned an empty response")
        return output_text

    def _backoff(self, attempt: int) -> float:
        """Return the delay before retry number ``attempt``."""
        delay = self.retry_base_delay_seconds * 2 ** (attempt - 1)
        return min(delay, self.retry_max_delay_seconds)


def _translate(exc: openai.APIError) -> CompletionError:
    """Map an OpenAI SDK error onto the completion error taxonomy."""
    if isinstance(exc, openai.APITimeoutError):
        return CompletionTimeoutError(str(exc))
    if isinstance(exc, openai.APIConnectionError):
        return ProviderError(str(exc), retryable=True)
    if isinstance(exc, openai.AuthenticationError | openai.PermissionDeniedError):
        return AuthError(str(exc))
    if isinstance(exc, openai.RateLimitError):
        return RateLimitedError(str(exc))
    if isinstance(exc, openai.APIStatusError):
        retryable = (
            exc.status_code >= 500 or exc.status_code in _RETRYABLE_STATUS_CODES
        )
        return ProviderError(
            f"OpenAI request failed (status={exc.status_code}): {exc}",
            retryable=retryable,
        )
    return ProviderError(str(exc))


def _is_retryable(exc: CompletionError) -> bool:
    """Return whether ``exc`` is a transient failure."""
    if isinstance(exc, RateLimitedError | CompletionTimeoutError):
        return True
    if isinstance(exc, ProviderError):
        return exc.retryable
    return False
