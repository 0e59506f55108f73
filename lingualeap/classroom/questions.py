"""
QuestionBank - Multiple choice questions per language, editable by admins.

The bank lives under the question_bank key as
{language display name: [question, ...]}. When nothing usable is stored,
the bundled default_questions.yaml is written as the starting bank.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from lingualeap.errors import (
    CorruptPersistedState,
    InvalidQuestion,
    QuestionNotFound,
    StorageUnavailable,
)
from lingualeap.schemas import Question, QuestionBankData

from .storage import KeyValueStore


logger = logging.getLogger(__name__)

QUESTION_BANK_KEY = "question_bank"
DEFAULT_QUESTIONS_PATH = Path(__file__).parent.parent / "data" / "default_questions.yaml"


def load_default_questions(path: Optional[Path] = None) -> dict[str, list[Question]]:
    """
    Read the starter questions, keyed by language display name.

    Raises:
        FileNotFoundError: the file does not exist
        pydantic.ValidationError: a record is not a valid question
    """
    with open(path or DEFAULT_QUESTIONS_PATH, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return QuestionBankData.model_validate({"languages": raw}).languages


def build_question(
    question_id: int,
    question: str,
    audio_text: str,
    options: list[str],
    correct: int,
) -> Question:
    """
    Validate form input into a Question.

    Raises:
        InvalidQuestion: with a readable summary of what is wrong
    """
    try:
        return Question(
            id=question_id,
            question=question,
            audio_text=audio_text,
            options=list(options),
            correct=correct,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidQuestion(problems) from e


class QuestionBank:
    """
    Admin-editable question bank.

    Lesson screens only read from it; the admin dashboard adds, edits and
    deletes questions. Every change is persisted immediately.
    """

    def __init__(self, storage: KeyValueStore, defaults_path: Optional[Path] = None):
        """
        Initialize question bank.

        Args:
            storage: KeyValueStore to persist into
            defaults_path: Optional replacement for the bundled default_questions.yaml
        """
        self.storage = storage
        self.defaults_path = defaults_path
        self._defaults: Optional[dict[str, list[Question]]] = None
        self._bank: dict[str, list[Question]] = {}

    @property
    def defaults(self) -> dict[str, list[Question]]:
        if self._defaults is None:
            self._defaults = load_default_questions(self.defaults_path)
        return self._defaults

    # -------------------------------------------------------------------------
    # Loading / saving
    # -------------------------------------------------------------------------

    def load(self):
        """Read the stored bank, seeding it with the defaults when missing or corrupt."""
        try:
            raw = self.storage.get(QUESTION_BANK_KEY)
        except (StorageUnavailable, CorruptPersistedState) as e:
            logger.warning(f"Discarding stored question bank: {e}")
            raw = None

        bank = None
        if raw is not None:
            try:
                bank = QuestionBankData.model_validate({"languages": raw}).languages
            except ValidationError as e:
                logger.warning(
                    f"Discarding stored question bank: {e.error_count()} validation error(s)"
                )

        if bank is None:
            logger.info("Seeding question bank with default questions")
            bank = {name: list(questions) for name, questions in self.defaults.items()}
            self._bank = bank
            self._persist()
        else:
            self._bank = bank

        total = sum(len(questions) for questions in self._bank.values())
        logger.info(f"Question bank loaded: {total} question(s) in {len(self._bank)} language(s)")

    def _persist(self):
        try:
            self.storage.set(QUESTION_BANK_KEY, {
                name: [q.to_storage() for q in questions]
                for name, questions in self._bank.items()
            })
        except StorageUnavailable as e:
            logger.error(f"Question bank not saved: {e}")

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def languages(self) -> list[str]:
        return list(self._bank)

    def get_questions(self, language_name: str) -> list[Question]:
        """
        Questions for a language, in order.

        Falls back to the bundled defaults for that language when the bank
        has none. The stored bank is left untouched.
        """
        questions = self._bank.get(language_name)
        if questions:
            return list(questions)
        return list(self.defaults.get(language_name, []))

    def stored_questions(self, language_name: str) -> list[Question]:
        """Questions actually in the bank, without the default fallback."""
        return list(self._bank.get(language_name, []))

    def get_question(self, language_name: str, question_id: int) -> Question:
        for q in self._bank.get(language_name, []):
            if q.id == question_id:
                return q
        raise QuestionNotFound(language_name, question_id)

    def count(self, language_name: str) -> int:
        return len(self._bank.get(language_name, []))

    def _next_id(self) -> int:
        ids = [q.id for questions in self._bank.values() for q in questions]
        return max(ids, default=0) + 1

    # -------------------------------------------------------------------------
    # Admin edits
    # -------------------------------------------------------------------------

    def add_question(
        self,
        language_name: str,
        question: str,
        audio_text: str,
        options: list[str],
        correct: int,
    ) -> Question:
        """Append a new question. Raises InvalidQuestion on bad input."""
        new_question = build_question(self._next_id(), question, audio_text, options, correct)
        self._bank.setdefault(language_name, []).append(new_question)
        self._persist()
        logger.info(f"Added question {new_question.id} to {language_name}")
        return new_question

    def update_question(
        self,
        language_name: str,
        question_id: int,
        question: str,
        audio_text: str,
        options: list[str],
        correct: int,
    ) -> Question:
        """Replace a question in place, keeping its id and position."""
        questions = self._bank.get(language_name, [])
        for idx, existing in enumerate(questions):
            if existing.id == question_id:
                updated = build_question(question_id, question, audio_text, options, correct)
                questions[idx] = updated
                self._persist()
                logger.info(f"Updated question {question_id} in {language_name}")
                return updated
        raise QuestionNotFound(language_name, question_id)

    def delete_question(self, language_name: str, question_id: int):
        """Remove a question. The caller confirms with the user first."""
        questions = self._bank.get(language_name, [])
        remaining = [q for q in questions if q.id != question_id]
        if len(remaining) == len(questions):
            raise QuestionNotFound(language_name, question_id)
        self._bank[language_name] = remaining
        self._persist()
        logger.info(f"Deleted question {question_id} from {language_name}")
