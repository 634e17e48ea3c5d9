# Shared module for common utilities, models, and configuration
from .config import Settings, get_settings
from .database import Database, JobNotFoundError, UserNotFoundError
from .models import Job, JobWithScore, ProfileUpdate, User

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "JobNotFoundError",
    "UserNotFoundError",
    "Job",
    "JobWithScore",
    "ProfileUpdate",
    "User",
]
