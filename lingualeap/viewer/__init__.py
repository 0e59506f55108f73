"""
LinguaLeap Viewer - Rendering components for the quiz UI.

This module provides:
- Language cards, question cards and lesson results
- Progress dashboard cards
- Browser speech synthesis snippets
"""

from .quiz import (
    get_quiz_css,
    render_language_card,
    start_button_label,
    option_state,
    render_question_card,
    render_answer_feedback,
    render_lesson_complete,
)

from .stats import (
    get_stats_css,
    render_stat_cards,
    render_language_progress_card,
)

from .audio import (
    SPEECH_RATE,
    build_speech_script,
    render_speech_html,
)

__all__ = [
    # Quiz
    "get_quiz_css",
    "render_language_card",
    "start_button_label",
    "option_state",
    "render_question_card",
    "render_answer_feedback",
    "render_lesson_complete",
    # Stats
    "get_stats_css",
    "render_stat_cards",
    "render_language_progress_card",
    # Audio
    "SPEECH_RATE",
    "build_speech_script",
    "render_speech_html",
]
