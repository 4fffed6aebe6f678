from sqlalchemy import Boolean, Column, Integer, Text

from quizbowl.models.base import CreatedAtMixin
from quizbowl.core.db import Base


class QuestionAttempt(Base, CreatedAtMixin):
    __tablename__ = "question_attempts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(Integer, nullable=False, index=True)
    question_id = Column(Integer, nullable=False, index=True)
    user_answer = Column(Text, nullable=True)
    is_correct = Column(Boolean, nullable=False)
    # 抢答用时（毫秒）
    buzz_time = Column(Integer, nullable=True)
