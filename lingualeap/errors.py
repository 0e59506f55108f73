"""
Exception types for LinguaLeap.

Storage errors are recovered inside the stores (logged, then defaults are
used). Lesson and question errors signal caller mistakes.
"""


class LinguaLeapError(Exception):
    """Base class for all LinguaLeap errors."""


class InvalidLessonData(LinguaLeapError, ValueError):
    """Lesson result or lesson setup is out of range."""


class StorageUnavailable(LinguaLeapError):
    """The key-value storage could not be read or written."""


class CorruptPersistedState(LinguaLeapError):
    """A stored value exists but cannot be decoded."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored value for '{key}' is corrupt: {reason}")


class InvalidQuestion(LinguaLeapError, ValueError):
    """A question record failed validation."""


class QuestionNotFound(LinguaLeapError, KeyError):
    """No question with the given id exists for the language."""

    def __init__(self, language: str, question_id: int):
        self.language = language
        self.question_id = question_id
        super().__init__(f"No question {question_id} for {language}")

    def __str__(self):
        return self.args[0]
