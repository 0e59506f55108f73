"""
LinguaLeap Classroom - Runtime components for quizzes and progress.

This module provides:
- KeyValueStore: JSON values in a local SQLite file
- ProgressStore: Per-language results and total XP
- AuthStore: Shared-password admin gate
- QuestionBank: Editable multiple choice questions
- LessonSession: One playthrough of a lesson
- AppServices: Container that builds and loads all stores
"""

from .storage import KeyValueStore

from .progress import (
    ProgressStore,
    PROGRESS_KEY,
    XP_KEY,
    XP_PER_CORRECT_ANSWER,
    percentage_score,
)

from .auth import (
    AuthStore,
    ADMIN_FLAG_KEY,
)

from .questions import (
    QuestionBank,
    QUESTION_BANK_KEY,
    build_question,
    load_default_questions,
)

from .languages import (
    Language,
    LANGUAGES,
    get_language,
    get_language_by_name,
    get_speech_lang,
    get_flag_url,
    display_name,
    country_info,
)

from .lesson import LessonSession

from .stats import (
    OverallStats,
    StudentLanguageStats,
    compute_overall_stats,
    student_stats,
)

from .services import AppServices

__all__ = [
    # Storage
    "KeyValueStore",
    # Progress
    "ProgressStore",
    "PROGRESS_KEY",
    "XP_KEY",
    "XP_PER_CORRECT_ANSWER",
    "percentage_score",
    # Auth
    "AuthStore",
    "ADMIN_FLAG_KEY",
    # Questions
    "QuestionBank",
    "QUESTION_BANK_KEY",
    "build_question",
    "load_default_questions",
    # Languages
    "Language",
    "LANGUAGES",
    "get_language",
    "get_language_by_name",
    "get_speech_lang",
    "get_flag_url",
    "display_name",
    "country_info",
    # Lesson
    "LessonSession",
    # Stats
    "OverallStats",
    "StudentLanguageStats",
    "compute_overall_stats",
    "student_stats",
    # Services
    "AppServices",
]
