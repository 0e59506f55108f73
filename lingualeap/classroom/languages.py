"""
Language catalog - The languages a student can pick.

Progress is keyed by Language.id ("spanish"); the question bank is keyed by
Language.name ("Spanish").
"""

from dataclasses import dataclass
from typing import Optional


FALLBACK_SPEECH_LANG = "en-US"
FALLBACK_COUNTRY_CODE = "un"
FALLBACK_COUNTRY_NAME = "International"
FALLBACK_FLAG = "🌍"

FLAG_URL_TEMPLATE = "https://flagcdn.com/w80/{code}.png"


@dataclass(frozen=True)
class Language:
    """A learnable language with display metadata."""
    id: str
    name: str
    flag: str
    description: str
    speech_lang: str    # BCP-47 tag for speech synthesis
    country_code: str   # flagcdn.com country code
    country_name: str

    @property
    def flag_url(self) -> str:
        return get_flag_url(self.country_code)


LANGUAGES: tuple[Language, ...] = (
    Language(
        id="spanish",
        name="Spanish",
        flag="🇪🇸",
        description="Learn the basics of Spanish",
        speech_lang="es-ES",
        country_code="es",
        country_name="Spain",
    ),
    Language(
        id="french",
        name="French",
        flag="🇫🇷",
        description="Learn the basics of French",
        speech_lang="fr-FR",
        country_code="fr",
        country_name="France",
    ),
    Language(
        id="german",
        name="German",
        flag="🇩🇪",
        description="Learn the basics of German",
        speech_lang="de-DE",
        country_code="de",
        country_name="Germany",
    ),
    Language(
        id="japanese",
        name="Japanese",
        flag="🇯🇵",
        description="Learn the basics of Japanese",
        speech_lang="ja-JP",
        country_code="jp",
        country_name="Japan",
    ),
)

_BY_ID = {lang.id: lang for lang in LANGUAGES}
_BY_NAME = {lang.name: lang for lang in LANGUAGES}


def get_language(language_id: str) -> Optional[Language]:
    """Look up a language by id ("spanish")."""
    return _BY_ID.get(language_id)


def get_language_by_name(name: str) -> Optional[Language]:
    """Look up a language by display name ("Spanish")."""
    return _BY_NAME.get(name)


def get_speech_lang(name: str) -> str:
    """Speech synthesis tag for a display name, en-US if unknown."""
    lang = get_language_by_name(name)
    return lang.speech_lang if lang else FALLBACK_SPEECH_LANG


def get_flag_url(country_code: str) -> str:
    return FLAG_URL_TEMPLATE.format(code=country_code)


def display_name(language_id: str) -> str:
    """Display name for an id; unknown ids are capitalized."""
    lang = get_language(language_id)
    if lang:
        return lang.name
    return language_id[:1].upper() + language_id[1:]


def country_info(language_id: str) -> tuple[str, str, str]:
    """(country_code, country_name, flag emoji) with an International fallback."""
    lang = get_language(language_id)
    if lang:
        return lang.country_code, lang.country_name, lang.flag
    return FALLBACK_COUNTRY_CODE, FALLBACK_COUNTRY_NAME, FALLBACK_FLAG
