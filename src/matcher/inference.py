"""
Text-generation client with bounded retry and exponential backoff.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import httpx
from loguru import logger
from openai import AsyncOpenAI

from shared.config import Settings, get_settings

from .errors import EmptyInputError, ProviderFailureError

GenerateFn = Callable[[str], Awaitable[str]]
SleepFn = Callable[[float], Awaitable[None]]


class InferenceClient:
    """
    Sends prompts to the text-generation provider.

    Transient failures are retried up to ``max_retries`` times after the
    first attempt, sleeping ``initial_backoff`` seconds before the first
    retry and doubling each time. Only raised errors are retried: any
    returned text, however useless, ends the loop.

    Cancellation is never retried. ``asyncio.CancelledError`` is not an
    ``Exception``, so cancelling the calling task (or hitting ``timeout``)
    aborts the in-flight request or the backoff sleep immediately.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        generate: Optional[GenerateFn] = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.settings = settings or get_settings()
        self.max_retries = self.settings.inference_max_retries
        self.initial_backoff = self.settings.inference_initial_backoff
        self._generate = generate or self._generate_openai
        self._sleep = sleep

    async def _generate_openai(self, prompt: str) -> str:
        """Single provider round trip on a fresh client."""
        # max_retries=0: the SDK must not retry behind our loop
        async with AsyncOpenAI(
            api_key=self.settings.openai_api_key.get_secret_value(),
            timeout=httpx.Timeout(self.settings.inference_request_timeout),
            max_retries=0,
        ) as client:
            response = await client.chat.completions.create(
                model=self.settings.openai_model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.settings.openai_temperature,
            )
        return response.choices[0].message.content or ""

    async def invoke(self, prompt: str, timeout: Optional[float] = None) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Full prompt text
            timeout: Overall deadline in seconds for all attempts and sleeps

        Returns:
            Raw response text

        Raises:
            EmptyInputError: prompt is blank; nothing is sent
            ProviderFailureError: every attempt failed
            asyncio.TimeoutError: the deadline passed
        """
        if not prompt or not prompt.strip():
            raise EmptyInputError("prompt is empty")

        if timeout is None:
            timeout = self.settings.inference_call_timeout
        if timeout is not None:
            return await asyncio.wait_for(self._invoke_with_retry(prompt), timeout)
        return await self._invoke_with_retry(prompt)

    async def _invoke_with_retry(self, prompt: str) -> str:
        total_attempts = self.max_retries + 1
        backoff = self.initial_backoff

        for attempt in range(1, total_attempts + 1):
            try:
                return await self._generate(prompt)
            except Exception as e:
                if attempt == total_attempts:
                    logger.error(f"Inference failed after {attempt} attempts: {e}")
                    raise ProviderFailureError(
                        f"provider failed after {attempt} attempts",
                        attempts=attempt,
                        last_error=e,
                    ) from e

                logger.warning(
                    f"Inference attempt {attempt}/{total_attempts} failed: {e}. "
                    f"Retrying in {backoff:g}s"
                )
                await self._sleep(backoff)
                backoff *= 2

        # Unreachable with max_retries >= 0
        raise ProviderFailureError("provider was never called", attempts=0)
