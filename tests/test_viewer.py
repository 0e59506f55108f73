"""
Render helper tests.
"""

import json
from datetime import datetime

from lingualeap.classroom import LessonSession, OverallStats, get_language
from lingualeap.schemas import LanguageProgress, Question
from lingualeap.viewer import (
    build_speech_script,
    option_state,
    render_answer_feedback,
    render_language_card,
    render_language_progress_card,
    render_lesson_complete,
    render_question_card,
    render_speech_html,
    render_stat_cards,
    start_button_label,
)


QUESTION = Question(id=1, question="What does <b>'Hola'</b> mean?", audio_text="Hola",
                    options=["Hello", "Goodbye", "Thank you", "Please"], correct=0)


class TestQuizRendering:

    def test_language_card_without_progress(self):
        html = render_language_card(get_language("french"), None)
        assert "French" in html
        assert "High Score" not in html
        assert start_button_label(None) == "Start →"

    def test_language_card_with_progress(self):
        progress = LanguageProgress(last_score=60, total_questions=5, completed_lessons=2, high_score=80)
        html = render_language_card(get_language("french"), progress)
        assert "80%" in html
        assert "<b>2</b>" in html
        assert start_button_label(progress) == "Continue →"

    def test_option_states(self):
        assert option_state(QUESTION, 0, None, show_result=False) == ""
        assert option_state(QUESTION, 0, 2, show_result=True) == "correct"
        assert option_state(QUESTION, 2, 2, show_result=True) == "incorrect"
        assert option_state(QUESTION, 3, 2, show_result=True) == ""

    def test_question_card_escapes_text(self):
        session = LessonSession(language=get_language("spanish"), questions=[QUESTION])
        html = render_question_card(session)
        assert "&lt;b&gt;" in html
        assert "<b>'Hola'</b>" not in html

    def test_feedback(self):
        session = LessonSession(language=get_language("spanish"), questions=[QUESTION])
        assert render_answer_feedback(session) == ""
        session.answer(1)
        assert "Hello" in render_answer_feedback(session)
        assert 'class="option incorrect"' in render_question_card(session)

    def test_lesson_complete(self, progress):
        session = LessonSession(language=get_language("spanish"), questions=[QUESTION])
        session.answer(0)
        session.next(progress)
        html = render_lesson_complete(session)
        assert "100%" in html
        assert "+10 XP" in html


class TestStatsRendering:

    def test_stat_cards(self):
        html = render_stat_cards(120, OverallStats(total_lessons=3, total_correct_answers=12, languages_started=2))
        assert "120" in html
        assert "Languages Started" in html

    def test_progress_card(self):
        entry = LanguageProgress(last_score=40, total_questions=5, completed_lessons=2,
                                 high_score=80, last_completed=datetime(2024, 5, 6))
        html = render_language_progress_card("spanish", entry)
        assert "https://flagcdn.com/w80/es.png" in html
        assert "width: 80%" in html
        assert "2024-05-06" in html

    def test_progress_card_unknown_language(self):
        html = render_language_progress_card(
            "klingon", LanguageProgress(last_score=0, total_questions=5, completed_lessons=1, high_score=0)
        )
        assert "Klingon" in html
        assert "flagcdn.com/w80/un.png" in html
        assert "Last completed" not in html


class TestSpeech:

    def test_script_uses_language_tag(self):
        script = build_speech_script("Bonjour", "fr-FR")
        assert 'u.lang = "fr-FR"' in script
        assert "u.rate = 0.9" in script

    def test_text_is_json_encoded(self):
        script = build_speech_script("S'il vous plaît", "fr-FR")
        assert json.dumps("S'il vous plaît") in script

    def test_html_for_known_language(self):
        assert '"ja-JP"' in render_speech_html("はい", "Japanese")

    def test_unknown_language_falls_back(self):
        assert '"en-US"' in render_speech_html("Hi", "Klingon")

    def test_script_tag_cannot_be_closed(self):
        html = render_speech_html("</script><b>", "Spanish")
        assert html.count("</script>") == 1

    def test_blank_text(self):
        assert render_speech_html("  ", "Spanish") == ""
