"""Tests for chat message and study topic repositories."""

import pytest

from quizbowl.models.enums import Difficulty, MessageRole
from quizbowl.repositories.chat_repository import (
    clear_chat_messages,
    create_chat_message,
    get_chat_messages,
)
from quizbowl.repositories.topic_repository import create_study_topic, get_study_topics
from quizbowl.schemas.chat import ChatMessageCreate
from quizbowl.schemas.topics import StudyTopicCreate


class TestChatMessages:
    @pytest.mark.asyncio
    async def test_newest_first_with_limit(self, database):
        ids = []
        for i, role in enumerate(["user", "assistant", "system"]):
            msg = await create_chat_message(database, ChatMessageCreate(user_id=1, role=role, content=f"m{i}"))
            ids.append(msg.id)

        items = await get_chat_messages(database, 1, limit=2)
        assert [m.id for m in items] == [ids[2], ids[1]]
        assert items[0].role == MessageRole.SYSTEM

    @pytest.mark.asyncio
    async def test_clear_only_removes_that_user(self, database):
        await create_chat_message(database, ChatMessageCreate(user_id=1, role="user", content="hi"))
        await create_chat_message(database, ChatMessageCreate(user_id=2, role="user", content="hello"))

        await clear_chat_messages(database, 1)

        assert await get_chat_messages(database, 1) == []
        assert len(await get_chat_messages(database, 2)) == 1

    @pytest.mark.asyncio
    async def test_offline(self, offline_database):
        assert await create_chat_message(offline_database, ChatMessageCreate(user_id=1, role="user", content="x")) is None
        assert await get_chat_messages(offline_database, 1) == []
        await clear_chat_messages(offline_database, 1)


class TestStudyTopics:
    @pytest.mark.asyncio
    async def test_ordered_by_category_then_topic(self, database):
        for category, topic, difficulty in [
            ("science", "Optics", "hard"),
            ("history", "Rome", "easy"),
            ("science", "Cells", "easy"),
            ("history", "Aztecs", "medium"),
        ]:
            await create_study_topic(
                database, StudyTopicCreate(category=category, topic=topic, difficulty=difficulty)
            )

        items = await get_study_topics(database)
        assert [(t.category, t.topic) for t in items] == [
            ("history", "Aztecs"),
            ("history", "Rome"),
            ("science", "Cells"),
            ("science", "Optics"),
        ]

        science = await get_study_topics(database, category="science")
        assert [t.topic for t in science] == ["Cells", "Optics"]

        easy_science = await get_study_topics(database, category="science", difficulty="easy")
        assert [t.topic for t in easy_science] == ["Cells"]
        assert easy_science[0].difficulty == Difficulty.EASY

    @pytest.mark.asyncio
    async def test_optional_fields(self, database):
        topic = await create_study_topic(
            database,
            StudyTopicCreate(
                category="history",
                topic="Rome",
                difficulty="easy",
                description="Republic to Empire",
                resource_links="https://example.com/rome",
            ),
        )
        assert topic.description == "Republic to Empire"
        assert topic.resource_links == "https://example.com/rome"

    @pytest.mark.asyncio
    async def test_offline(self, offline_database):
        assert (
            await create_study_topic(offline_database, StudyTopicCreate(category="c", topic="t", difficulty="easy"))
            is None
        )
        assert await get_study_topics(offline_database) == []
