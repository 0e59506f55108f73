"""
LinguaLeap - Language Learning Quiz

Streamlit application for practicing vocabulary in Spanish, French, German
and Japanese. Students earn XP per correct answer; an admin can edit the
question bank.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st
import streamlit.components.v1 as components

from lingualeap.classroom import (
    AppServices,
    LANGUAGES,
    LessonSession,
    compute_overall_stats,
    get_language,
    student_stats,
)
from lingualeap.config import LOG_FORMAT, load_settings
from lingualeap.errors import InvalidLessonData, InvalidQuestion, QuestionNotFound
from lingualeap.schemas import OPTION_COUNT
from lingualeap.viewer import (
    get_quiz_css,
    get_stats_css,
    render_answer_feedback,
    render_language_card,
    render_language_progress_card,
    render_lesson_complete,
    render_question_card,
    render_speech_html,
    render_stat_cards,
    start_button_label,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

settings = load_settings()

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="LinguaLeap",
    page_icon="🦉",
    layout="centered",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "services" not in st.session_state:
        st.session_state.services = AppServices(settings).init()

    if "view" not in st.session_state:
        st.session_state.view = "home"  # home, lesson, stats, admin_login

    if "lesson" not in st.session_state:
        st.session_state.lesson = None

    if "confirm_reset" not in st.session_state:
        st.session_state.confirm_reset = False

    if "editing_question_id" not in st.session_state:
        st.session_state.editing_question_id = None


def go_to(view: str):
    st.session_state.view = view
    st.session_state.lesson = None
    st.session_state.confirm_reset = False
    st.rerun()


# -----------------------------------------------------------------------------
# Home: Language Selection
# -----------------------------------------------------------------------------

def render_home(services: AppServices):
    """Render the language grid."""
    st.title("🦉 LinguaLeap")
    st.caption("Learn a new language today!")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("📊 My Progress", use_container_width=True):
            go_to("stats")
    with col2:
        if st.button("🔐 Admin", use_container_width=True):
            go_to("admin_login")

    st.markdown(get_quiz_css(), unsafe_allow_html=True)

    columns = st.columns(2)
    for idx, language in enumerate(LANGUAGES):
        progress = services.progress.get_language_progress(language.id)
        with columns[idx % 2]:
            st.markdown(render_language_card(language, progress), unsafe_allow_html=True)
            if st.button(start_button_label(progress), key=f"start_{language.id}", use_container_width=True):
                start_lesson(services, language.id)


def start_lesson(services: AppServices, language_id: str):
    language = get_language(language_id)
    try:
        st.session_state.lesson = LessonSession(
            language=language,
            questions=services.questions.get_questions(language.name),
        )
    except InvalidLessonData as e:
        st.error(str(e))
        return
    st.session_state.view = "lesson"
    st.rerun()


# -----------------------------------------------------------------------------
# Lesson View
# -----------------------------------------------------------------------------

def render_lesson(services: AppServices):
    """Render the current lesson question or the completion summary."""
    session: LessonSession = st.session_state.lesson
    if session is None:
        go_to("home")
        return

    st.markdown(get_quiz_css(), unsafe_allow_html=True)

    if session.complete:
        st.markdown(render_lesson_complete(session), unsafe_allow_html=True)
        if st.button("Continue", type="primary", use_container_width=True):
            go_to("home")
        return

    col1, col2 = st.columns([1, 3])
    with col1:
        if st.button("✕ Exit"):
            go_to("home")
    with col2:
        st.progress(
            session.progress_fraction,
            text=f"Question {session.current_index + 1} of {session.total_questions}",
        )

    question = session.current_question
    if question.audio_text and st.button("🔊 Listen"):
        components.html(render_speech_html(question.audio_text, session.language.name), height=0)

    st.markdown(render_question_card(session), unsafe_allow_html=True)

    if not session.show_result:
        for idx, option in enumerate(question.options):
            if st.button(option, key=f"option_{session.current_index}_{idx}", use_container_width=True):
                session.answer(idx)
                st.rerun()
        return

    feedback = render_answer_feedback(session)
    if session.selected_answer == question.correct:
        st.success(feedback)
    else:
        st.error(feedback)

    label = "Finish" if session.is_last_question else "Next"
    if st.button(label, type="primary", use_container_width=True):
        session.next(services.progress)
        st.rerun()


# -----------------------------------------------------------------------------
# Stats View
# -----------------------------------------------------------------------------

def render_stats(services: AppServices):
    """Render the progress dashboard."""
    if st.button("← Back"):
        go_to("home")

    st.title("📊 Your Progress")

    progress = services.progress.progress
    stats = compute_overall_stats(progress)

    st.markdown(get_stats_css(), unsafe_allow_html=True)
    st.markdown(render_stat_cards(services.progress.total_xp, stats), unsafe_allow_html=True)

    st.subheader("Progress by Language")
    if not progress:
        st.info("No progress yet. Start learning to see your stats here!")
        return

    for language_id, entry in progress.items():
        st.markdown(render_language_progress_card(language_id, entry), unsafe_allow_html=True)

    st.divider()
    render_reset_section(services)


def render_reset_section(services: AppServices):
    """Reset button with an explicit confirmation step."""
    if not st.session_state.confirm_reset:
        if st.button("🔄 Reset All Progress"):
            st.session_state.confirm_reset = True
            st.rerun()
        st.caption("Warning: This will permanently delete all your progress data.")
        return

    st.warning("Are you sure you want to reset all progress? This cannot be undone.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Yes, reset everything", type="primary", use_container_width=True):
            services.progress.reset()
            st.session_state.confirm_reset = False
            st.rerun()
    with col2:
        if st.button("Cancel", use_container_width=True):
            st.session_state.confirm_reset = False
            st.rerun()


# -----------------------------------------------------------------------------
# Admin Login
# -----------------------------------------------------------------------------

def render_admin_login(services: AppServices):
    """Render the admin password form."""
    if st.button("← Back to Home"):
        go_to("home")

    st.title("🔐 Admin Login")
    st.caption("Enter admin credentials to continue")

    with st.form("admin_login", clear_on_submit=True):
        password = st.text_input("Password", type="password", placeholder="Enter admin password")
        submitted = st.form_submit_button("Login", type="primary")

    if submitted:
        if services.auth.login(password):
            go_to("home")
        else:
            st.error("Incorrect password. Please try again.")


# -----------------------------------------------------------------------------
# Admin Dashboard
# -----------------------------------------------------------------------------

def render_admin_dashboard(services: AppServices):
    """Render question management and student overview."""
    col1, col2 = st.columns([4, 1])
    with col1:
        st.title("🎓 Admin Dashboard")
    with col2:
        if st.button("Logout"):
            services.auth.logout()
            go_to("home")

    tab1, tab2 = st.tabs(["📝 Manage Questions", "👥 View Students"])

    with tab1:
        render_question_manager(services)

    with tab2:
        render_student_overview(services)


def render_question_manager(services: AppServices):
    bank = services.questions
    language_name = st.selectbox("Select Language", [lang.name for lang in LANGUAGES])

    editing_id = st.session_state.editing_question_id
    editing = None
    if editing_id is not None:
        try:
            editing = bank.get_question(language_name, editing_id)
        except QuestionNotFound:
            st.session_state.editing_question_id = None

    st.subheader("Edit Question" if editing else "Add New Question")
    with st.form("question_form", clear_on_submit=True):
        text = st.text_input("Question", value=editing.question if editing else "")
        audio_text = st.text_input("Audio Text (pronounced phrase)", value=editing.audio_text if editing else "")
        options = [
            st.text_input(f"Option {i + 1}", value=editing.options[i] if editing else "")
            for i in range(OPTION_COUNT)
        ]
        correct = st.selectbox(
            "Correct Answer",
            list(range(OPTION_COUNT)),
            index=editing.correct if editing else 0,
            format_func=lambda i: f"Option {i + 1}",
        )
        submitted = st.form_submit_button("Update Question" if editing else "Add Question", type="primary")

    if submitted:
        try:
            if editing:
                bank.update_question(language_name, editing.id, text, audio_text, options, correct)
                st.session_state.editing_question_id = None
                st.success("Question updated successfully!")
            else:
                bank.add_question(language_name, text, audio_text, options, correct)
                st.success("Question added successfully!")
        except InvalidQuestion as e:
            st.error(f"Question not saved: {e}")

    if editing and st.button("Cancel Edit"):
        st.session_state.editing_question_id = None
        st.rerun()

    st.subheader(f"{language_name} Questions ({bank.count(language_name)})")
    for question in bank.stored_questions(language_name):
        with st.expander(question.question):
            for idx, option in enumerate(question.options):
                marker = "✓" if idx == question.correct else "·"
                st.markdown(f"{marker} {option}")
            col1, col2 = st.columns(2)
            with col1:
                if st.button("Edit", key=f"edit_{question.id}"):
                    st.session_state.editing_question_id = question.id
                    st.rerun()
            with col2:
                confirm = st.checkbox("Confirm delete", key=f"confirm_delete_{question.id}")
                if st.button("Delete", key=f"delete_{question.id}", disabled=not confirm):
                    try:
                        bank.delete_question(language_name, question.id)
                    except QuestionNotFound as e:
                        st.error(str(e))
                    st.rerun()


def render_student_overview(services: AppServices):
    rows = student_stats(services.progress.progress)
    if not rows:
        st.info("No student progress recorded yet.")
        return

    st.metric("Total XP", services.progress.total_xp)
    st.table([
        {
            "Language": row.language,
            "Lessons": row.completed_lessons,
            "High Score": f"{row.high_score}%",
            "Last Completed": row.last_completed,
        }
        for row in rows
    ])


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    services: AppServices = st.session_state.services

    if services.auth.is_admin:
        render_admin_dashboard(services)
        return

    view = st.session_state.view
    if view == "lesson":
        render_lesson(services)
    elif view == "stats":
        render_stats(services)
    elif view == "admin_login":
        render_admin_login(services)
    else:
        render_home(services)


if __name__ == "__main__":
    main()
