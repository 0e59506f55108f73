"""
LessonSession - State of one playthrough of a language's questions.

Provides:
- Answer checking with one answer per question
- Advancing through the questions
- A single completion report to the ProgressStore when the lesson ends
"""

import logging
from dataclasses import dataclass
from typing import Optional

from lingualeap.errors import InvalidLessonData
from lingualeap.schemas import Question

from .languages import Language
from .progress import ProgressStore, percentage_score


logger = logging.getLogger(__name__)


@dataclass
class LessonSession:
    """
    One lesson for one language.

    XP is awarded once, when the last question is passed, never per answer.
    """
    language: Language
    questions: list[Question]
    current_index: int = 0
    score: int = 0
    selected_answer: Optional[int] = None
    show_result: bool = False
    complete: bool = False
    xp_earned: int = 0

    def __post_init__(self):
        if not self.questions:
            raise InvalidLessonData(f"No questions available for {self.language.name}")

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index + 1 >= self.total_questions

    @property
    def progress_fraction(self) -> float:
        """Share of the lesson reached, counting the current question."""
        return (self.current_index + 1) / self.total_questions

    @property
    def percentage(self) -> int:
        return percentage_score(self.score, self.total_questions)

    def answer(self, option_index: int) -> bool:
        """
        Answer the current question.

        Returns:
            True if the answer was correct. A second answer to the same
            question, or an answer after completion, is ignored and returns False.
        """
        if self.show_result or self.complete:
            return False

        self.selected_answer = option_index
        self.show_result = True
        correct = option_index == self.current_question.correct
        if correct:
            self.score += 1
        return correct

    def next(self, progress: ProgressStore) -> bool:
        """
        Move to the next question, or finish the lesson after the last one.

        Args:
            progress: Store that receives the completion report

        Returns:
            True if the lesson is now complete
        """
        if self.complete:
            return True

        if not self.is_last_question:
            self.current_index += 1
            self.selected_answer = None
            self.show_result = False
            return False

        self._finish(progress)
        return True

    def _finish(self, progress: ProgressStore):
        self.xp_earned = progress.record_completion(
            self.language.id, self.score, self.total_questions
        )
        self.complete = True
        logger.debug(f"Lesson for {self.language.id} finished with {self.xp_earned} XP")
