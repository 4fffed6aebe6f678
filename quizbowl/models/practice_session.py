from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from quizbowl.models.enums import difficulty_type
from quizbowl.core.db import Base


class PracticeSession(Base):
    __tablename__ = "practice_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    # 练习时选择的分类/难度筛选，为空表示不限
    category = Column(String(100), nullable=True)
    difficulty = Column(difficulty_type, nullable=True)
    total_questions = Column(Integer, nullable=False)
    correct_answers = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)
    started_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
