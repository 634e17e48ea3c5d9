"""
LLM-based skill extraction and job-skill match scoring.
"""

from typing import Optional, Sequence

from loguru import logger

from shared.config import Settings, get_settings

from .inference import InferenceClient
from .parser import parse_score, parse_skills
from .prompts import build_match_score_prompt, build_skills_prompt


class LLMMatcher:
    """Extracts skills from bios and scores skills against job descriptions."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[InferenceClient] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or InferenceClient(self.settings)

    async def extract_skills(self, bio: str, timeout: Optional[float] = None) -> list[str]:
        """
        Extract skill labels from a bio or resume text.

        Returns:
            Skills in the order the model listed them. Duplicates and
            casing are passed through untouched.
        """
        prompt = build_skills_prompt(bio)
        response = await self.client.invoke(prompt, timeout=timeout)
        skills = parse_skills(response)

        logger.info(f"Extracted {len(skills)} skills: {skills[:5]}")
        return skills

    async def compute_match_score(
        self,
        skills: Sequence[str],
        job_description: str,
        timeout: Optional[float] = None,
    ) -> int:
        """
        Score how well a skill list matches a job description.

        Returns:
            Match score between 0 and 100
        """
        prompt = build_match_score_prompt(skills, job_description)
        response = await self.client.invoke(prompt, timeout=timeout)
        score = parse_score(response)

        logger.info(f"Computed match score {score} for {len(skills)} skills")
        return score
