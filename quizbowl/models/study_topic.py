from sqlalchemy import Column, Integer, String, Text

from quizbowl.models.base import CreatedAtMixin
from quizbowl.models.enums import difficulty_type
from quizbowl.core.db import Base


class StudyTopic(Base, CreatedAtMixin):
    __tablename__ = "study_topics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category = Column(String(100), nullable=False)
    topic = Column(String(255), nullable=False)
    difficulty = Column(difficulty_type, nullable=False)
    description = Column(Text, nullable=True)
    resource_links = Column(Text, nullable=True)
