"""Pydantic 写入模型与统计结果模型。"""
from quizbowl.schemas.chat import ChatMessageCreate
from quizbowl.schemas.progress import ProgressStats
from quizbowl.schemas.questions import (
    PracticeSessionCreate,
    PracticeSessionUpdate,
    QuestionAttemptCreate,
    QuestionCreate,
)
from quizbowl.schemas.topics import StudyTopicCreate
from quizbowl.schemas.user import UserSettingsUpsert, UserUpsert

__all__ = [
    "ChatMessageCreate",
    "ProgressStats",
    "PracticeSessionCreate",
    "PracticeSessionUpdate",
    "QuestionAttemptCreate",
    "QuestionCreate",
    "StudyTopicCreate",
    "UserSettingsUpsert",
    "UserUpsert",
]
