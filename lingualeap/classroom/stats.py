"""
Progress statistics for the stats dashboard and the admin students view.
"""

from dataclasses import dataclass
from typing import Iterable

from lingualeap.schemas import LanguageProgress

from .languages import LANGUAGES, Language


@dataclass
class OverallStats:
    total_lessons: int
    total_correct_answers: int
    languages_started: int


@dataclass
class StudentLanguageStats:
    """One row of the admin students table."""
    language: str
    completed_lessons: int
    high_score: int
    last_completed: str   # date string, or "Never"


def estimated_correct_answers(entry: LanguageProgress) -> int:
    """Correct answers implied by the high score over every completed lesson (half up)."""
    exact = entry.high_score * entry.total_questions * entry.completed_lessons
    return (exact * 2 + 100) // 200


def compute_overall_stats(progress: dict[str, LanguageProgress]) -> OverallStats:
    """
    Summarize progress across all languages.

    Every entry has at least one completed lesson, so each counts as started.
    """
    total_lessons = 0
    total_correct = 0
    started = 0
    for entry in progress.values():
        started += 1
        total_lessons += entry.completed_lessons
        total_correct += estimated_correct_answers(entry)

    return OverallStats(
        total_lessons=total_lessons,
        total_correct_answers=total_correct,
        languages_started=started,
    )


def format_completed_date(entry: LanguageProgress) -> str:
    if entry.last_completed is None:
        return "Never"
    return entry.last_completed.date().isoformat()


def student_stats(
    progress: dict[str, LanguageProgress],
    languages: Iterable[Language] = LANGUAGES,
) -> list[StudentLanguageStats]:
    """Rows for catalog languages that have progress, in catalog order."""
    rows = []
    for lang in languages:
        entry = progress.get(lang.id)
        if entry is None:
            continue
        rows.append(StudentLanguageStats(
            language=lang.name,
            completed_lessons=entry.completed_lessons,
            high_score=entry.high_score,
            last_completed=format_completed_date(entry),
        ))
    return rows
