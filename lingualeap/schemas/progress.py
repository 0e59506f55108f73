"""
Progress tracking schemas for LinguaLeap.

Defines Pydantic models for student progress including:
- Per-language lesson results (last score, high score, lesson count)
- Admin gate state
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class AuthState(str, Enum):
    GUEST = "guest"
    ADMIN = "admin"


class LanguageProgress(BaseModel):
    """
    Progress for one language. Percentages are whole numbers in [0, 100].

    An entry only exists once a lesson was completed, so the counters start
    at 1. Saves from the web version used camelCase keys; both spellings load.
    """
    model_config = ConfigDict(populate_by_name=True)

    last_score: int = Field(..., ge=0, le=100, alias="lastScore")
    total_questions: int = Field(..., ge=1, alias="totalQuestions")   # size of the most recent lesson
    completed_lessons: int = Field(..., ge=1, alias="completedLessons")
    high_score: int = Field(..., ge=0, le=100, alias="highScore")
    last_completed: Optional[datetime] = Field(None, alias="lastCompleted")


class ProgressSnapshot(BaseModel):
    """Everything the progress store persists."""
    languages: dict[str, LanguageProgress] = {}
    total_xp: int = Field(0, ge=0)
