"""学习主题（StudyTopic）数据访问层。主题是公共参考数据，不区分用户。"""
from sqlalchemy import select

from quizbowl.core.db import Database
from quizbowl.models.enums import Difficulty
from quizbowl.models.study_topic import StudyTopic
from quizbowl.schemas.topics import StudyTopicCreate


async def create_study_topic(database: Database, topic: StudyTopicCreate) -> StudyTopic | None:
    async with database.session() as db:
        if db is None:
            return None
        st = StudyTopic(**topic.model_dump(exclude_none=True))
        db.add(st)
        await db.commit()
        await db.refresh(st)
        return st


async def get_study_topics(
    database: Database,
    category: str | None = None,
    difficulty: Difficulty | str | None = None,
) -> list[StudyTopic]:
    """按分类、难度（均可选）筛选学习主题，按 category、topic 升序。"""
    async with database.session() as db:
        if db is None:
            return []
        q = select(StudyTopic)
        if category:
            q = q.where(StudyTopic.category == category)
        if difficulty:
            q = q.where(StudyTopic.difficulty == Difficulty(difficulty))
        result = await db.execute(q.order_by(StudyTopic.category.asc(), StudyTopic.topic.asc()))
        return list(result.scalars().all())
