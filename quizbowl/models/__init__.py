from quizbowl.core.db import Base
from quizbowl.models.base import CreatedAtMixin, TimestampMixin
from quizbowl.models.enums import Difficulty, MessageRole, Role
from quizbowl.models.user import User
from quizbowl.models.user_settings import UserSettings
from quizbowl.models.question import Question
from quizbowl.models.practice_session import PracticeSession
from quizbowl.models.question_attempt import QuestionAttempt
from quizbowl.models.chat_message import ChatMessage
from quizbowl.models.study_topic import StudyTopic

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "Role",
    "Difficulty",
    "MessageRole",
    "User",
    "UserSettings",
    "Question",
    "PracticeSession",
    "QuestionAttempt",
    "ChatMessage",
    "StudyTopic",
]
