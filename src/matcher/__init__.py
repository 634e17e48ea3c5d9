"""
Matcher Service - LLM-based skill extraction and job matching.

Extracts skill labels from user bios and scores how well a skill list
matches a job description on a 0-100 scale.
"""

from .errors import (
    AIExtractionError,
    EmptyInputError,
    FragmentError,
    MalformedFragmentError,
    NoStructuredFragmentError,
    ProviderFailureError,
    UnparsableScoreError,
    UnparsableSkillsError,
)
from .inference import InferenceClient
from .llm_matcher import LLMMatcher

__all__ = [
    "AIExtractionError",
    "EmptyInputError",
    "FragmentError",
    "MalformedFragmentError",
    "NoStructuredFragmentError",
    "ProviderFailureError",
    "UnparsableScoreError",
    "UnparsableSkillsError",
    "InferenceClient",
    "LLMMatcher",
]
