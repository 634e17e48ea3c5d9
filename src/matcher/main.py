"""
Matcher Service - Main entry point.
Extracts skills from bios and scores jobs against user skills.
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from shared.config import get_settings
from shared.database import Database, JobNotFoundError, UserNotFoundError
from shared.models import JobWithScore, ProfileUpdate

from .errors import AIExtractionError
from .llm_matcher import LLMMatcher

# Shown to end users instead of parser or provider details
AI_FAILURE_MESSAGE = "ai extraction failed"


def setup_logging():
    """Configure loguru logging."""
    settings = get_settings()
    logger.remove()

    if settings.log_format == "json":
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            level=settings.log_level,
        )


async def extract_skills_for_user(
    db: Database,
    matcher: LLMMatcher,
    user_id: str,
    bio: str,
    timeout: Optional[float] = None,
) -> list[str]:
    """
    Extract skills from a bio and store them on the user's profile.

    Nothing is written when extraction fails.
    """
    skills = await matcher.extract_skills(bio, timeout=timeout)
    await db.update_user(user_id, ProfileUpdate(skills=skills))
    logger.info(f"Saved {len(skills)} skills for user {user_id}")
    return skills


async def score_job_for_user(
    db: Database,
    matcher: LLMMatcher,
    job_id: str,
    user_id: str,
    timeout: Optional[float] = None,
) -> JobWithScore:
    """Load a job and a user and score the user's skills against the job."""
    job = await db.get_job(job_id)
    user = await db.get_user(user_id)

    score = await matcher.compute_match_score(user.skills, job.description, timeout=timeout)
    logger.info(f"Job {job_id} scored {score} for user {user_id}")
    return JobWithScore(job=job, match_score=score)


def _read_text(path: Optional[Path]) -> str:
    if path is None:
        return click.get_text_stream("stdin").read()
    return path.read_text(encoding="utf-8")


async def _run_skills(bio: str, user_id: Optional[str], timeout: Optional[float]) -> list[str]:
    matcher = LLMMatcher()
    if user_id is None:
        return await matcher.extract_skills(bio, timeout=timeout)

    db = Database()
    await db.connect()
    try:
        return await extract_skills_for_user(db, matcher, user_id, bio, timeout=timeout)
    finally:
        await db.disconnect()


async def _run_score(
    skills: list[str],
    job_description: Optional[str],
    job_id: Optional[str],
    user_id: Optional[str],
    timeout: Optional[float],
) -> int:
    matcher = LLMMatcher()
    if job_id is None:
        return await matcher.compute_match_score(skills, job_description or "", timeout=timeout)

    db = Database()
    await db.connect()
    try:
        result = await score_job_for_user(db, matcher, job_id, user_id, timeout=timeout)
        return result.match_score
    finally:
        await db.disconnect()


def _fail(e: Exception) -> None:
    """Log the concrete failure and exit with a generic message."""
    if isinstance(e, AIExtractionError):
        logger.error(f"AI extraction failed ({e.kind}): {e}")
        raise click.ClickException(AI_FAILURE_MESSAGE)
    if isinstance(e, asyncio.TimeoutError):
        logger.error("AI extraction timed out")
        raise click.ClickException(AI_FAILURE_MESSAGE)
    raise click.ClickException(str(e))


@click.group()
def main():
    """Job Match AI - skill extraction and job match scoring."""
    setup_logging()


@main.command()
@click.option(
    "--bio-file",
    "-f",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File with bio/resume text (defaults to stdin)",
)
@click.option(
    "--user-id",
    "-u",
    default=None,
    help="Save the extracted skills on this user's profile",
)
@click.option(
    "--timeout",
    "-t",
    type=float,
    default=None,
    help="Overall deadline in seconds",
)
def skills(bio_file: Optional[Path], user_id: Optional[str], timeout: Optional[float]):
    """Extract skills from a bio."""
    bio = _read_text(bio_file)
    try:
        result = asyncio.run(_run_skills(bio, user_id, timeout))
    except (AIExtractionError, asyncio.TimeoutError, UserNotFoundError) as e:
        _fail(e)
    click.echo(", ".join(result))


@main.command()
@click.option("--skill", "-s", "skill_list", multiple=True, help="Skill (repeatable)")
@click.option(
    "--job-file",
    "-f",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File with the job description",
)
@click.option("--job-id", "-j", default=None, help="Score a stored job")
@click.option("--user-id", "-u", default=None, help="Use this user's stored skills")
@click.option(
    "--timeout",
    "-t",
    type=float,
    default=None,
    help="Overall deadline in seconds",
)
def score(
    skill_list: tuple[str, ...],
    job_file: Optional[Path],
    job_id: Optional[str],
    user_id: Optional[str],
    timeout: Optional[float],
):
    """Score skills against a job description."""
    if (job_id is None) != (user_id is None):
        raise click.UsageError("--job-id and --user-id must be given together")
    if job_id is None and job_file is None:
        raise click.UsageError("Provide --job-file, or --job-id with --user-id")

    job_description = _read_text(job_file) if job_id is None else None
    try:
        result = asyncio.run(
            _run_score(list(skill_list), job_description, job_id, user_id, timeout)
        )
    except (
        AIExtractionError,
        asyncio.TimeoutError,
        JobNotFoundError,
        UserNotFoundError,
    ) as e:
        _fail(e)
    click.echo(f"Match score: {result}/100")


if __name__ == "__main__":
    main()
