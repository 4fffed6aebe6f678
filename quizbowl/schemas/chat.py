"""聊天消息写入模型。"""
from pydantic import BaseModel

from quizbowl.models.enums import MessageRole


class ChatMessageCreate(BaseModel):
    user_id: int
    role: MessageRole
    content: str
