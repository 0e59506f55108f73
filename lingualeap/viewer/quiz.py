"""
Quiz renderer - Language cards, question cards and lesson results.

Provides:
- Language selection card rendering
- Question display with answer-state styling
- Lesson complete summary
"""

import html
from typing import Optional

from lingualeap.classroom import Language, LessonSession
from lingualeap.schemas import LanguageProgress, Question


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .language-card {
        background: white;
        border-radius: 16px;
        padding: 1.5em;
        margin-bottom: 1em;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.08);
        border-top: 4px solid #58CC02;
    }
    .language-card-header {
        display: flex;
        align-items: center;
        gap: 0.6em;
    }
    .language-flag {
        font-size: 2em;
    }
    .language-name {
        font-size: 1.3em;
        font-weight: 700;
        color: #3C3C3C;
    }
    .language-description {
        color: #777;
        margin: 0.5em 0;
    }
    .language-progress {
        display: flex;
        gap: 1.5em;
        font-size: 0.9em;
        color: #555;
    }
    .question-card {
        background: #f7f7f7;
        border-radius: 12px;
        padding: 1.5em;
        margin: 1em 0;
    }
    .question-text {
        font-size: 1.3em;
        font-weight: 600;
        color: #3C3C3C;
    }
    .option {
        border: 2px solid #e5e5e5;
        border-radius: 10px;
        padding: 0.7em 1em;
        margin: 0.4em 0;
        background: white;
    }
    .option.correct {
        border-color: #58CC02;
        background: #d7ffb8;
    }
    .option.incorrect {
        border-color: #FF4B4B;
        background: #ffdfe0;
    }
    .lesson-complete {
        text-align: center;
        background: #e8f5e9;
        border-radius: 12px;
        padding: 2em;
    }
    .lesson-complete-score {
        font-size: 2.5em;
        font-weight: 700;
        color: #388E3C;
    }
    .lesson-complete-xp {
        font-size: 1.2em;
        color: #FF9600;
        font-weight: 600;
    }
    </style>
    """


def render_language_card(language: Language, progress: Optional[LanguageProgress]) -> str:
    """
    Render a language selection card.

    Args:
        language: Catalog language
        progress: Progress for the language, or None if never played

    Returns:
        HTML string for the card
    """
    parts = ['<div class="language-card">']
    parts.append('<div class="language-card-header">')
    parts.append(f'<span class="language-flag">{language.flag}</span>')
    parts.append(f'<span class="language-name">{html.escape(language.name)}</span>')
    parts.append('</div>')
    parts.append(f'<div class="language-description">{html.escape(language.description)}</div>')

    if progress is not None:
        parts.append('<div class="language-progress">')
        parts.append(f'<span>High Score: <b>{progress.high_score}%</b></span>')
        parts.append(f'<span>Lessons: <b>{progress.completed_lessons}</b></span>')
        parts.append('</div>')

    parts.append('</div>')
    return ''.join(parts)


def start_button_label(progress: Optional[LanguageProgress]) -> str:
    return "Continue →" if progress is not None else "Start →"


def option_state(question: Question, option_index: int, selected: Optional[int], show_result: bool) -> str:
    """
    CSS state for an option: "correct", "incorrect" or "".

    Once the result is shown the right option is always marked correct and a
    wrong selection is marked incorrect.
    """
    if not show_result:
        return ""
    if option_index == question.correct:
        return "correct"
    if option_index == selected:
        return "incorrect"
    return ""


def render_question_card(session: LessonSession) -> str:
    """Render the current question with its options."""
    question = session.current_question
    parts = ['<div class="question-card">']
    parts.append(
        f'<div class="question-text">{html.escape(question.question)}</div>'
    )
    for idx, option in enumerate(question.options):
        state = option_state(question, idx, session.selected_answer, session.show_result)
        css_class = f"option {state}".strip()
        parts.append(f'<div class="{css_class}">{html.escape(option)}</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_answer_feedback(session: LessonSession) -> str:
    """Short feedback line after answering."""
    if not session.show_result:
        return ""
    question = session.current_question
    if session.selected_answer == question.correct:
        return "Correct!"
    return f"Not quite. The answer is: {question.correct_option}"


def render_lesson_complete(session: LessonSession) -> str:
    """Render the lesson complete summary."""
    return f"""
    <div class="lesson-complete">
        <h2>Lesson Complete!</h2>
        <div class="lesson-complete-score">{session.percentage}%</div>
        <div>{session.score} of {session.total_questions} correct</div>
        <div class="lesson-complete-xp">+{session.xp_earned} XP</div>
    </div>
    """
