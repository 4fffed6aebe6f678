"""聊天消息（ChatMessage）数据访问层。消息只追加，按用户整体清空。"""
from sqlalchemy import delete, select

from quizbowl.core.db import Database
from quizbowl.models.chat_message import ChatMessage
from quizbowl.schemas.chat import ChatMessageCreate


async def create_chat_message(database: Database, message: ChatMessageCreate) -> ChatMessage | None:
    async with database.session() as db:
        if db is None:
            return None
        msg = ChatMessage(**message.model_dump())
        db.add(msg)
        await db.commit()
        await db.refresh(msg)
        return msg


async def get_chat_messages(database: Database, user_id: int, limit: int = 50) -> list[ChatMessage]:
    """某用户最近的聊天消息，按 created_at 倒序。"""
    async with database.session() as db:
        if db is None:
            return []
        result = await db.execute(
            select(ChatMessage)
            .where(ChatMessage.user_id == user_id)
            .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())


async def clear_chat_messages(database: Database, user_id: int) -> None:
    """删除某用户的全部聊天消息。"""
    async with database.session() as db:
        if db is None:
            return
        await db.execute(delete(ChatMessage).where(ChatMessage.user_id == user_id))
        await db.commit()
