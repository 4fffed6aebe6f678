from sqlalchemy import Column, Integer, String, Text

from quizbowl.models.base import CreatedAtMixin
from quizbowl.models.enums import difficulty_type
from quizbowl.core.db import Base


class Question(Base, CreatedAtMixin):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    category = Column(String(100), nullable=False)
    difficulty = Column(difficulty_type, nullable=False)
    question_text = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    source = Column(String(50), nullable=False, default="generated", server_default="generated")
