"""练习会话（PracticeSession）与作答记录（QuestionAttempt）数据访问层。"""
from sqlalchemy import select, update

from quizbowl.core.db import Database
from quizbowl.models.practice_session import PracticeSession
from quizbowl.models.question_attempt import QuestionAttempt
from quizbowl.schemas.questions import (
    PracticeSessionCreate,
    PracticeSessionUpdate,
    QuestionAttemptCreate,
)


async def create_practice_session(
    database: Database,
    session: PracticeSessionCreate,
) -> PracticeSession | None:
    """创建练习会话，started_at 未传时取库默认当前时间。"""
    async with database.session() as db:
        if db is None:
            return None
        ps = PracticeSession(**session.model_dump(exclude_none=True))
        db.add(ps)
        await db.commit()
        await db.refresh(ps)
        return ps


async def update_practice_session(
    database: Database,
    session_id: int,
    updates: PracticeSessionUpdate,
) -> None:
    """按 ID 部分更新练习会话，只写入 updates 中显式传入的字段。"""
    values = updates.model_dump(exclude_unset=True)
    if not values:
        return
    async with database.session() as db:
        if db is None:
            return
        await db.execute(update(PracticeSession).where(PracticeSession.id == session_id).values(**values))
        await db.commit()


async def get_practice_sessions(database: Database, user_id: int, limit: int = 20) -> list[PracticeSession]:
    """某用户最近的练习会话，按 started_at 倒序。"""
    async with database.session() as db:
        if db is None:
            return []
        result = await db.execute(
            select(PracticeSession)
            .where(PracticeSession.user_id == user_id)
            .order_by(PracticeSession.started_at.desc(), PracticeSession.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())


async def list_all_practice_sessions(database: Database, user_id: int) -> list[PracticeSession]:
    """某用户全部练习会话（不分页），供进度统计使用。"""
    async with database.session() as db:
        if db is None:
            return []
        result = await db.execute(select(PracticeSession).where(PracticeSession.user_id == user_id))
        return list(result.scalars().all())


async def get_practice_session_by_id(database: Database, session_id: int) -> PracticeSession | None:
    async with database.session() as db:
        if db is None:
            return None
        result = await db.execute(select(PracticeSession).where(PracticeSession.id == session_id))
        return result.scalars().first()


async def create_question_attempt(
    database: Database,
    attempt: QuestionAttemptCreate,
) -> QuestionAttempt | None:
    """记录一次作答，不校验 session/question 是否存在。"""
    async with database.session() as db:
        if db is None:
            return None
        qa = QuestionAttempt(**attempt.model_dump(exclude_none=True))
        db.add(qa)
        await db.commit()
        await db.refresh(qa)
        return qa


async def get_question_attempts_by_session(database: Database, session_id: int) -> list[QuestionAttempt]:
    """某练习会话下的作答记录，按 created_at 倒序。"""
    async with database.session() as db:
        if db is None:
            return []
        result = await db.execute(
            select(QuestionAttempt)
            .where(QuestionAttempt.session_id == session_id)
            .order_by(QuestionAttempt.created_at.desc(), QuestionAttempt.id.desc())
        )
        return list(result.scalars().all())
