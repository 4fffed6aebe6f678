"""学习主题写入模型。"""
from pydantic import BaseModel, Field

from quizbowl.models.enums import Difficulty


class StudyTopicCreate(BaseModel):
    category: str = Field(..., max_length=100)
    topic: str = Field(..., max_length=255)
    difficulty: Difficulty
    description: str | None = None
    resource_links: str | None = None
