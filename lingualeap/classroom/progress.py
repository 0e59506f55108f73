"""
ProgressStore - Track per-language quiz results and total XP.

Stores progress through the KeyValueStore:
- progress_data: language id -> LanguageProgress
- progress_xp: total experience points

Reporting a completion is deliberately not idempotent. Each call counts as
one more finished lesson; the lesson session guarantees one report per
playthrough.
"""

import logging
from datetime import datetime
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from lingualeap.errors import CorruptPersistedState, InvalidLessonData, StorageUnavailable
from lingualeap.schemas import LanguageProgress, ProgressSnapshot

from .storage import KeyValueStore


logger = logging.getLogger(__name__)

PROGRESS_KEY = "progress_data"
XP_KEY = "progress_xp"

XP_PER_CORRECT_ANSWER = 10

_progress_adapter = TypeAdapter(dict[str, LanguageProgress])


def percentage_score(score: int, total_questions: int) -> int:
    """
    Percentage of correct answers, rounded half up (1 of 8 -> 13).

    Raises:
        InvalidLessonData: total_questions <= 0 or score outside [0, total]
    """
    validate_lesson_result(score, total_questions)
    # Integer form of floor(score / total * 100 + 0.5)
    return (score * 200 + total_questions) // (2 * total_questions)


def validate_lesson_result(score: int, total_questions: int):
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidLessonData(f"score must be an integer, got {score!r}")
    if isinstance(total_questions, bool) or not isinstance(total_questions, int):
        raise InvalidLessonData(f"total_questions must be an integer, got {total_questions!r}")
    if total_questions <= 0:
        raise InvalidLessonData(f"total_questions must be positive, got {total_questions}")
    if not 0 <= score <= total_questions:
        raise InvalidLessonData(
            f"score must be between 0 and {total_questions}, got {score}"
        )


class ProgressStore:
    """
    Per-language progress plus a cumulative XP counter.

    Construct once per process, call load(), then pass the instance to
    whatever needs it.
    """

    def __init__(self, storage: KeyValueStore):
        """
        Initialize progress store.

        Args:
            storage: KeyValueStore to persist into
        """
        self.storage = storage
        self._snapshot = ProgressSnapshot()

    # -------------------------------------------------------------------------
    # Loading / saving
    # -------------------------------------------------------------------------

    def load(self):
        """
        Read persisted progress and XP.

        Missing or unreadable data falls back to empty progress / zero XP.
        Never raises.
        """
        languages = self._load_languages()
        total_xp = self._load_xp()
        self._snapshot = ProgressSnapshot(languages=languages, total_xp=total_xp)
        logger.info(
            f"Loaded progress for {len(languages)} language(s), {total_xp} XP"
        )

    def _load_languages(self) -> dict[str, LanguageProgress]:
        try:
            raw = self.storage.get(PROGRESS_KEY)
        except (StorageUnavailable, CorruptPersistedState) as e:
            logger.warning(f"Discarding stored progress: {e}")
            return {}

        if raw is None:
            return {}
        try:
            return _progress_adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                f"Discarding stored progress: {e.error_count()} validation error(s)"
            )
            return {}

    def _load_xp(self) -> int:
        try:
            raw = self.storage.get(XP_KEY)
        except (StorageUnavailable, CorruptPersistedState) as e:
            logger.warning(f"Discarding stored XP: {e}")
            return 0

        if raw is None:
            return 0
        # Older saves wrote the counter as a string
        if isinstance(raw, str):
            try:
                raw = int(raw.strip())
            except ValueError:
                logger.warning(f"Discarding stored XP: not a number {raw!r}")
                return 0
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            logger.warning(f"Discarding stored XP: unexpected value {raw!r}")
            return 0
        return raw

    def _persist(self):
        """Write progress and XP together. Failures are logged, not raised."""
        try:
            self.storage.set_many({
                PROGRESS_KEY: _progress_adapter.dump_python(
                    self._snapshot.languages, mode="json"
                ),
                XP_KEY: self._snapshot.total_xp,
            })
        except StorageUnavailable as e:
            logger.error(f"Progress not saved: {e}")

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def total_xp(self) -> int:
        return self._snapshot.total_xp

    @property
    def progress(self) -> dict[str, LanguageProgress]:
        """Copy of the language id -> progress mapping."""
        return {
            lang_id: entry.model_copy()
            for lang_id, entry in self._snapshot.languages.items()
        }

    def get_language_progress(self, language_id: str) -> Optional[LanguageProgress]:
        """Progress for one language, or None if no lesson was completed yet."""
        entry = self._snapshot.languages.get(language_id)
        return entry.model_copy() if entry else None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def record_completion(self, language_id: str, score: int, total_questions: int) -> int:
        """
        Record one finished lesson.

        Args:
            language_id: Language identifier (e.g. "spanish")
            score: Number of correct answers
            total_questions: Number of questions in the lesson

        Returns:
            XP earned for this lesson (10 per correct answer)

        Raises:
            InvalidLessonData: total_questions <= 0 or score outside [0, total]
        """
        percentage = percentage_score(score, total_questions)
        xp_earned = score * XP_PER_CORRECT_ANSWER

        current = self._snapshot.languages.get(language_id)
        self._snapshot.languages[language_id] = LanguageProgress(
            last_score=percentage,
            total_questions=total_questions,
            completed_lessons=current.completed_lessons + 1 if current else 1,
            high_score=max(current.high_score, percentage) if current else percentage,
            last_completed=datetime.now(),
        )
        self._snapshot.total_xp += xp_earned
        self._persist()

        logger.info(
            f"Lesson completed for {language_id}: {score}/{total_questions} "
            f"({percentage}%), +{xp_earned} XP"
        )
        return xp_earned

    def reset(self):
        """
        Clear all progress and XP.

        The caller must have confirmed this with the user.
        """
        self._snapshot = ProgressSnapshot()
        self._persist()
        logger.info("All progress reset")
