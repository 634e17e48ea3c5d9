"""
Prompt templates for skill extraction and match scoring.

Caller text is embedded verbatim. The templates ask for an exact output
shape but nothing here enforces it; see matcher.parser.
"""

import json
from enum import Enum
from typing import Optional, Sequence

from .errors import EmptyInputError


class PromptTask(str, Enum):
    """Task a prompt is built for."""

    EXTRACT_SKILLS = "extract_skills"
    MATCH_SCORE = "match_score"


SKILLS_SYSTEM_PROMPT = (
    "You are a helpful assistant that extracts relevant professional skills from a textual bio. "
    "Return the top skills as a JSON array only. "
    "Use short skill names (e.g., go, react, nodejs, postgres)."
)

SKILLS_USER_PROMPT = """Extract top skills from the following bio and return ONLY a JSON array (e.g. ["go","react"]). Do not add any explanation or text.

BIO:
{bio}"""

MATCH_SYSTEM_PROMPT = (
    "You are a helpful assistant that scores how well a candidate's skills match a job."
)

MATCH_USER_PROMPT = """Given the user's skills JSON array:
{skills_json}

And the job description below:
{job_description}

Return ONLY a JSON object with a single numeric field `match_score` with an integer value between 0 and 100 indicating the match percentage. Example: {{"match_score":78}}. Return no other text."""


def _require_text(value: Optional[str], name: str) -> str:
    if value is None or not value.strip():
        raise EmptyInputError(f"{name} is empty")
    return value


def build_skills_prompt(bio: str) -> str:
    """Build the skill extraction prompt for a bio or resume text."""
    bio = _require_text(bio, "bio")
    return SKILLS_SYSTEM_PROMPT + "\n\n" + SKILLS_USER_PROMPT.format(bio=bio)


def build_match_score_prompt(skills: Sequence[str], job_description: str) -> str:
    """Build the match scoring prompt. An empty skills list is allowed."""
    job_description = _require_text(job_description, "job description")
    skills_json = json.dumps(list(skills), ensure_ascii=False, separators=(",", ":"))
    return MATCH_SYSTEM_PROMPT + "\n\n" + MATCH_USER_PROMPT.format(
        skills_json=skills_json,
        job_description=job_description,
    )


def build_prompt(
    task: PromptTask,
    *,
    bio: Optional[str] = None,
    skills: Optional[Sequence[str]] = None,
    job_description: Optional[str] = None,
) -> str:
    """Build the prompt for a task from its inputs."""
    task = PromptTask(task)
    if task is PromptTask.EXTRACT_SKILLS:
        return build_skills_prompt(bio)
    return build_match_score_prompt(skills or [], job_description)
