"""
Pydantic models for users, jobs and profile updates.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

# "0x" followed by 64 hex characters. Format check only, nothing is verified on-chain.
TX_HASH_PATTERN = r"^0x[0-9a-fA-F]{64}$"


class User(BaseModel):
    """Registered platform user."""

    id: str = Field(..., description="User ID (UUID string)")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Login email")
    bio: str = Field(default="", description="Free-form biography or resume text")
    linkedin_url: str = Field(default="")
    skills: list[str] = Field(default_factory=list, description="Skill labels used for matching")
    wallet_address: str = Field(default="")
    created_at: datetime = Field(default_factory=lambda: datetime.now())


class Job(BaseModel):
    """Job posting."""

    id: str = Field(..., description="Job ID (UUID string)")
    title: str = Field(..., description="Job title")
    description: str = Field(..., description="Full job description")
    skills: list[str] = Field(default_factory=list)
    salary: str = Field(default="")
    location: str = Field(default="")
    user_id: str = Field(..., description="ID of the user who posted the job")
    payment_tx_hash: Optional[str] = Field(
        default=None,
        pattern=TX_HASH_PATTERN,
        description="Payment transaction hash attached when the job was posted",
    )
    created_at: datetime = Field(default_factory=lambda: datetime.now())


class JobWithScore(BaseModel):
    """Job detail enriched with the requesting user's match score."""

    job: Job
    match_score: int = Field(..., ge=0, le=100)


class ProfileUpdate(BaseModel):
    """Partial profile update. Only fields that are set get written."""

    name: Optional[str] = None
    bio: Optional[str] = None
    linkedin_url: Optional[str] = None
    skills: Optional[list[str]] = None
    wallet_address: Optional[str] = None

    def to_update_fields(self) -> dict[str, Any]:
        """Build the field map for a partial update."""
        fields: dict[str, Any] = {}
        if self.name is not None:
            fields["name"] = self.name
        if self.bio is not None:
            fields["bio"] = self.bio
        if self.linkedin_url is not None:
            fields["linkedin_url"] = self.linkedin_url
        if self.skills is not None:
            fields["skills"] = list(self.skills)
        if self.wallet_address is not None:
            fields["wallet_address"] = self.wallet_address
        return fields

    def is_empty(self) -> bool:
        return not self.to_update_fields()
