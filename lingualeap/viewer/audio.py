"""
Audio viewer - Browser speech synthesis for question phrases.

Pronunciation uses the browser's Web Speech API, so no audio files are
generated. The snippet is meant for an embedded HTML component.
"""

import json

from lingualeap.classroom import get_speech_lang


# Slightly slower than normal for learners
SPEECH_RATE = 0.9


def build_speech_script(text: str, speech_lang: str, rate: float = SPEECH_RATE) -> str:
    """
    JavaScript that speaks text in the given language.

    Args:
        text: Phrase to pronounce
        speech_lang: BCP-47 tag (e.g., "es-ES")
        rate: Speaking rate

    Returns:
        Script source (values are JSON-encoded, safe to embed)
    """
    return (
        "if ('speechSynthesis' in window) {"
        " window.speechSynthesis.cancel();"
        f" const u = new SpeechSynthesisUtterance({json.dumps(text)});"
        f" u.lang = {json.dumps(speech_lang)};"
        f" u.rate = {float(rate)};"
        " window.speechSynthesis.speak(u);"
        " }"
    )


def render_speech_html(text: str, language_name: str, rate: float = SPEECH_RATE) -> str:
    """
    HTML that pronounces a phrase as soon as it is rendered.

    Args:
        text: Phrase to pronounce (a question's audio_text)
        language_name: Display name; unknown languages use en-US

    Returns:
        HTML string, empty if there is nothing to say
    """
    if not text or not text.strip():
        return ""
    # </ would end the script element early
    script = build_speech_script(text, get_speech_lang(language_name), rate).replace("</", "<\\/")
    return f"<script>{script}</script>"
