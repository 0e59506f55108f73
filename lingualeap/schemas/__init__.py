"""
LinguaLeap Schemas - Pydantic models for the quiz application.

This module exports all schema classes for:
- Progress: per-language results, XP snapshot, admin gate state
- Question: multiple choice questions and the question bank
"""

# Progress schemas
from .progress import (
    AuthState,
    LanguageProgress,
    ProgressSnapshot,
)

# Question schemas
from .question import (
    OPTION_COUNT,
    Question,
    QuestionBankData,
)

__all__ = [
    # Progress
    "AuthState",
    "LanguageProgress",
    "ProgressSnapshot",
    # Question
    "OPTION_COUNT",
    "Question",
    "QuestionBankData",
]
