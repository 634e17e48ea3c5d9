"""
Tests for prompt construction.
"""

import pytest

from matcher.errors import EmptyInputError
from matcher.prompts import (
    PromptTask,
    build_match_score_prompt,
    build_prompt,
    build_skills_prompt,
)


def test_skills_prompt_embeds_bio_verbatim():
    bio = 'I write Go and "React" {daily}\n  with trailing spaces  '
    prompt = build_skills_prompt(bio)

    assert prompt.endswith(bio)
    assert "return ONLY a JSON array" in prompt


def test_skills_prompt_is_deterministic():
    assert build_skills_prompt("go dev") == build_skills_prompt("go dev")


@pytest.mark.parametrize("bio", ["", "   ", "\n\t "])
def test_skills_prompt_rejects_blank_bio(bio):
    with pytest.raises(EmptyInputError):
        build_skills_prompt(bio)


def test_match_prompt_contains_compact_skills_and_description():
    prompt = build_match_score_prompt(["go", "react"], "Backend engineer, Go required")

    assert '["go","react"]' in prompt
    assert "Backend engineer, Go required" in prompt
    assert "`match_score`" in prompt
    assert '{"match_score":78}' in prompt


def test_match_prompt_allows_empty_skills():
    prompt = build_match_score_prompt([], "Any job")
    assert "[]" in prompt


def test_match_prompt_rejects_blank_description():
    with pytest.raises(EmptyInputError):
        build_match_score_prompt(["go"], "  ")


def test_build_prompt_dispatches_by_task():
    assert build_prompt(PromptTask.EXTRACT_SKILLS, bio="go") == build_skills_prompt("go")
    assert build_prompt("match_score", skills=["go"], job_description="job") == (
        build_match_score_prompt(["go"], "job")
    )


def test_build_prompt_missing_input_is_empty_input():
    with pytest.raises(EmptyInputError):
        build_prompt(PromptTask.EXTRACT_SKILLS)
