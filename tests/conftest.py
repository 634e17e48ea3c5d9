"""
Shared fixtures for matcher tests.
"""

import pytest

from shared.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        openai_api_key="test-key",
        inference_max_retries=3,
        inference_initial_backoff=1.0,
        inference_call_timeout=None,
    )


class FakeSleep:
    """Records backoff delays instead of sleeping."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FlakyProvider:
    """Fails a fixed number of times, then returns a canned response."""

    def __init__(self, failures: int, response: str = '["go"]'):
        self.failures = failures
        self.response = response
        self.calls = 0
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.calls += 1
        self.prompts.append(prompt)
        if self.calls <= self.failures:
            raise ConnectionError(f"transient failure #{self.calls}")
        return self.response


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def flaky_provider():
    """Factory for FlakyProvider instances."""
    return FlakyProvider
