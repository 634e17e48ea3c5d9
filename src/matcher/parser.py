"""
Tolerant parsing of free-form LLM responses.

The provider is asked for JSON but is free to wrap it in prose, code fences
or loose quoting. Each entry point runs a fixed fallback chain:
isolate fragment -> strict parse -> repair -> scan.
"""

import math
import re
from typing import Any, Optional

from loguru import logger
from pydantic import StrictStr, TypeAdapter, ValidationError

from .errors import (
    FragmentError,
    MalformedFragmentError,
    NoStructuredFragmentError,
    UnparsableScoreError,
    UnparsableSkillsError,
)
from .scoring import clamp_score

SCORE_FIELD = "match_score"

_SKILLS_ADAPTER = TypeAdapter(list[StrictStr])
_MAPPING_ADAPTER = TypeAdapter(dict[str, Any])

_FIRST_NUMBER = re.compile(r"[0-9]{1,3}")
_INTEGER_STRING = re.compile(r"[+-]?[0-9]+")


def isolate_fragment(text: str) -> str:
    """
    Locate the JSON-looking region of a response.

    The earlier of the first "{" and the first "[" picks the shape. The
    fragment runs from that opener to the LAST matching closer anywhere in
    the text, so prose between two bracketed regions is captured too.

    Raises:
        NoStructuredFragmentError: no opening bracket at all
        MalformedFragmentError: no matching closer after the opener
    """
    obj_start = text.find("{")
    arr_start = text.find("[")
    if obj_start == -1 and arr_start == -1:
        raise NoStructuredFragmentError("no JSON object or array found in response")

    if obj_start != -1 and (arr_start == -1 or obj_start < arr_start):
        start, closer, shape = obj_start, "}", "object"
    else:
        start, closer, shape = arr_start, "]", "array"

    end = text.rfind(closer)
    if end <= start:
        raise MalformedFragmentError(f"malformed JSON {shape}: no closing {closer!r}")
    return text[start : end + 1]


def _load_skills(text: str) -> Optional[list[str]]:
    try:
        return _SKILLS_ADAPTER.validate_json(text)
    except ValidationError:
        return None


def _load_mapping(text: str) -> Optional[dict[str, Any]]:
    try:
        return _MAPPING_ADAPTER.validate_json(text)
    except ValidationError:
        return None


def parse_skills(raw: str) -> list[str]:
    """
    Extract a list of skill labels from a response.

    Raises:
        FragmentError: no fragment and the whole response is not a JSON array
        UnparsableSkillsError: a fragment was found but is not a list of strings
    """
    text = raw.strip()
    try:
        fragment = isolate_fragment(text)
    except FragmentError:
        skills = _load_skills(text)
        if skills is None:
            raise
        return skills

    skills = _load_skills(fragment)
    if skills is not None:
        return skills

    logger.debug("Skills fragment is not strict JSON, retrying with double quotes")
    skills = _load_skills(fragment.replace("'", '"'))
    if skills is not None:
        return skills

    raise UnparsableSkillsError(f"could not parse skills from fragment: {fragment[:200]!r}")


def _coerce_score(value: Any) -> Optional[int]:
    """Interpret a match_score field value, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str) and _INTEGER_STRING.fullmatch(value):
        return int(value)
    return None


def _scan_first_number(text: str) -> int:
    match = _FIRST_NUMBER.search(text)
    if match is None:
        raise UnparsableScoreError("no digits found in response")
    return int(match.group())


def parse_score(raw: str) -> int:
    """
    Extract a match score in [0, 100] from a response.

    Any recovered number is clamped, including one scraped from prose.

    Raises:
        UnparsableScoreError: no score field and no digits anywhere
    """
    text = raw.strip()
    try:
        fragment = isolate_fragment(text)
    except FragmentError as e:
        logger.debug(f"No JSON fragment in score response ({e.kind}), scanning text for digits")
        return clamp_score(_scan_first_number(text))

    mapping = _load_mapping(fragment)
    if mapping is not None:
        score = _coerce_score(mapping.get(SCORE_FIELD))
        if score is not None:
            return clamp_score(score)
        logger.debug(f"Score object has no numeric {SCORE_FIELD!r}, scanning fragment for digits")
    else:
        logger.debug("Score fragment is not a JSON object, scanning fragment for digits")

    return clamp_score(_scan_first_number(fragment))
