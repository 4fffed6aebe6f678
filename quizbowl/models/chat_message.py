from sqlalchemy import Column, Integer, Text

from quizbowl.models.base import CreatedAtMixin
from quizbowl.models.enums import message_role_type
from quizbowl.core.db import Base


class ChatMessage(Base, CreatedAtMixin):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    role = Column(message_role_type, nullable=False)
    content = Column(Text, nullable=False)
