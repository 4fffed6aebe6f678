"""题目、练习、作答相关写入模型。"""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from quizbowl.models.enums import Difficulty


class QuestionCreate(BaseModel):
    user_id: int
    category: str = Field(..., max_length=100)
    difficulty: Difficulty
    question_text: str
    answer: str
    source: str = Field("generated", max_length=50, description="来源标记")


class PracticeSessionCreate(BaseModel):
    user_id: int
    category: str | None = Field(None, max_length=100)
    difficulty: Difficulty | None = None
    total_questions: int = Field(..., ge=0)
    correct_answers: int = Field(..., ge=0)
    score: int
    started_at: datetime | None = None
    completed_at: datetime | None = None


class PracticeSessionUpdate(BaseModel):
    """练习会话部分更新，只写入显式传入的字段。"""
    category: str | None = Field(None, max_length=100)
    difficulty: Difficulty | None = None
    total_questions: int | None = Field(None, ge=0)
    correct_answers: int | None = Field(None, ge=0)
    score: int | None = None
    completed_at: datetime | None = None

    @field_validator("total_questions", "correct_answers", "score")
    @classmethod
    def _not_null(cls, v: int | None) -> int:
        # 这三列非空：可以不传，但不能显式传 None
        if v is None:
            raise ValueError("must not be null")
        return v


class QuestionAttemptCreate(BaseModel):
    session_id: int
    question_id: int
    user_answer: str | None = None
    is_correct: bool
    buzz_time: int | None = Field(None, ge=0, description="抢答用时（毫秒）")
