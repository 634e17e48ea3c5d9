"""
Failure types raised by the AI skill extraction and match scoring pipeline.
"""

from typing import Optional


class AIExtractionError(Exception):
    """Base class for every failure the pipeline reports to its caller."""

    kind = "ai_extraction_failed"


class EmptyInputError(AIExtractionError):
    """Caller text was empty or whitespace-only."""

    kind = "empty_input"


class ProviderFailureError(AIExtractionError):
    """The text-generation provider failed on every attempt."""

    kind = "provider_failure"

    def __init__(self, message: str, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class FragmentError(AIExtractionError):
    """No bracket-delimited payload could be isolated from a response."""

    kind = "fragment_error"


class NoStructuredFragmentError(FragmentError):
    kind = "no_structured_fragment"


class MalformedFragmentError(FragmentError):
    kind = "malformed_fragment"


class UnparsableSkillsError(AIExtractionError):
    kind = "unparsable_skills"


class UnparsableScoreError(AIExtractionError):
    kind = "unparsable_score"
