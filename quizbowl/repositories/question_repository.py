"""题目（Question）数据访问层。"""
from sqlalchemy import select
from sqlalchemy.sql import func

from quizbowl.core.db import Database
from quizbowl.models.enums import Difficulty
from quizbowl.models.question import Question
from quizbowl.schemas.questions import QuestionCreate


async def create_question(database: Database, question: QuestionCreate) -> Question | None:
    """插入一道题目，返回落库后的记录；数据库不可用返回 None。"""
    async with database.session() as db:
        if db is None:
            return None
        q = Question(**question.model_dump(exclude_none=True))
        db.add(q)
        await db.commit()
        await db.refresh(q)
        return q


async def get_question_by_id(database: Database, question_id: int) -> Question | None:
    async with database.session() as db:
        if db is None:
            return None
        result = await db.execute(select(Question).where(Question.id == question_id))
        return result.scalars().first()


async def get_questions_by_category(
    database: Database,
    user_id: int,
    category: str,
    difficulty: Difficulty | str | None = None,
) -> list[Question]:
    """某用户某分类下的题目（可选难度），按 created_at 倒序。"""
    async with database.session() as db:
        if db is None:
            return []
        q = select(Question).where(Question.user_id == user_id, Question.category == category)
        if difficulty:
            q = q.where(Question.difficulty == Difficulty(difficulty))
        result = await db.execute(q.order_by(Question.created_at.desc(), Question.id.desc()))
        return list(result.scalars().all())


async def get_random_questions(
    database: Database,
    user_id: int,
    category: str | None = None,
    difficulty: Difficulty | str | None = None,
    limit: int = 10,
) -> list[Question]:
    """按用户（可选分类、难度）筛选后由数据库随机排序，最多取 limit 道。"""
    async with database.session() as db:
        if db is None:
            return []
        q = select(Question).where(Question.user_id == user_id)
        if category:
            q = q.where(Question.category == category)
        if difficulty:
            q = q.where(Question.difficulty == Difficulty(difficulty))
        result = await db.execute(q.order_by(func.random()).limit(limit))
        return list(result.scalars().all())
