"""
Question bank schemas for LinguaLeap.

A question is a four-option multiple choice item with an optional phrase
to pronounce. The stored form keeps the camelCase ``audioText`` key.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


OPTION_COUNT = 4


class Question(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    question: str = Field(..., min_length=1)
    audio_text: str = Field("", alias="audioText")
    options: list[str] = Field(..., min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct: int = Field(..., ge=0, lt=OPTION_COUNT)  # index into options

    @field_validator('question')
    @classmethod
    def question_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Question text must not be blank')
        return v

    @field_validator('options')
    @classmethod
    def options_not_blank(cls, v):
        if any(not option.strip() for option in v):
            raise ValueError('Every answer option must be filled in')
        return v

    @property
    def correct_option(self) -> str:
        return self.options[self.correct]

    def to_storage(self) -> dict:
        """Serialize with the stored key names."""
        return self.model_dump(by_alias=True)


class QuestionBankData(BaseModel):
    """Language display name -> ordered questions."""
    languages: dict[str, list[Question]] = {}
