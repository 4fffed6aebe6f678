"""Tests for question repository."""

import pytest

from quizbowl.models.enums import Difficulty
from quizbowl.repositories.question_repository import (
    create_question,
    get_question_by_id,
    get_questions_by_category,
    get_random_questions,
)
from quizbowl.schemas.questions import QuestionCreate


def _question(user_id=1, category="history", difficulty="easy", text="Q?"):
    return QuestionCreate(
        user_id=user_id,
        category=category,
        difficulty=difficulty,
        question_text=text,
        answer="A",
    )


class TestCreateQuestion:
    @pytest.mark.asyncio
    async def test_create_returns_stored_row(self, database):
        q = await create_question(database, _question())

        assert q.id is not None
        assert q.source == "generated"
        assert q.difficulty == Difficulty.EASY
        assert q.created_at is not None

        fetched = await get_question_by_id(database, q.id)
        assert fetched.question_text == "Q?"

    @pytest.mark.asyncio
    async def test_custom_source(self, database):
        q = await create_question(
            database,
            QuestionCreate(user_id=1, category="c", difficulty="hard", question_text="t", answer="a", source="manual"),
        )
        assert q.source == "manual"

    def test_invalid_difficulty_rejected(self):
        with pytest.raises(ValueError):
            _question(difficulty="impossible")


class TestQuestionsByCategory:
    @pytest.mark.asyncio
    async def test_filters_and_newest_first(self, database):
        first = await create_question(database, _question(text="first"))
        second = await create_question(database, _question(text="second"))
        await create_question(database, _question(category="science"))
        await create_question(database, _question(user_id=2))
        await create_question(database, _question(difficulty="hard", text="hard one"))

        items = await get_questions_by_category(database, 1, "history", "easy")
        assert [q.id for q in items] == [second.id, first.id]

        all_history = await get_questions_by_category(database, 1, "history")
        assert len(all_history) == 3


class TestRandomQuestions:
    @pytest.mark.asyncio
    async def test_limit_and_filters(self, database):
        for i in range(6):
            await create_question(database, _question(category="history", difficulty="medium", text=f"m{i}"))
        await create_question(database, _question(category="history", difficulty="easy"))
        await create_question(database, _question(category="science", difficulty="medium"))
        await create_question(database, _question(user_id=2, category="history", difficulty="medium"))

        items = await get_random_questions(database, 1, "history", "medium", limit=3)
        assert len(items) == 3
        for q in items:
            assert q.user_id == 1
            assert q.category == "history"
            assert q.difficulty == Difficulty.MEDIUM

    @pytest.mark.asyncio
    async def test_default_limit_and_no_filters(self, database):
        for i in range(12):
            await create_question(database, _question(text=f"q{i}"))

        items = await get_random_questions(database, 1)
        assert len(items) == 10
        assert len({q.id for q in items}) == 10

    @pytest.mark.asyncio
    async def test_fewer_matches_than_limit(self, database):
        await create_question(database, _question())
        items = await get_random_questions(database, 1, limit=5)
        assert len(items) == 1


class TestOffline:
    @pytest.mark.asyncio
    async def test_defaults(self, offline_database):
        assert await create_question(offline_database, _question()) is None
        assert await get_question_by_id(offline_database, 1) is None
        assert await get_questions_by_category(offline_database, 1, "history") == []
        assert await get_random_questions(offline_database, 1) == []
