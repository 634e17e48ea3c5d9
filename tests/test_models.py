"""
Tests for shared pydantic models.
"""

import pytest
from pydantic import ValidationError

from shared.models import Job, JobWithScore, ProfileUpdate

VALID_TX = "0x" + "ab" * 32


def test_profile_update_only_set_fields():
    update = ProfileUpdate(bio="New bio", skills=["go"])
    assert update.to_update_fields() == {"bio": "New bio", "skills": ["go"]}


def test_profile_update_keeps_empty_values():
    update = ProfileUpdate(name="", skills=[])
    assert update.to_update_fields() == {"name": "", "skills": []}


def test_profile_update_empty():
    assert ProfileUpdate().is_empty()
    assert not ProfileUpdate(wallet_address="0x1").is_empty()


def test_profile_update_rejects_unknown_types():
    with pytest.raises(ValidationError):
        ProfileUpdate(skills="go")


def test_job_accepts_valid_tx_hash():
    job = Job(id="j1", title="Dev", description="Go", user_id="u1", payment_tx_hash=VALID_TX)
    assert job.payment_tx_hash == VALID_TX


@pytest.mark.parametrize("tx", ["0x123", "ab" * 33, "0x" + "zz" * 32])
def test_job_rejects_malformed_tx_hash(tx):
    with pytest.raises(ValidationError):
        Job(id="j1", title="Dev", description="Go", user_id="u1", payment_tx_hash=tx)


def test_job_with_score_bounds():
    job = Job(id="j1", title="Dev", description="Go", user_id="u1")
    assert JobWithScore(job=job, match_score=100).match_score == 100
    with pytest.raises(ValidationError):
        JobWithScore(job=job, match_score=101)
