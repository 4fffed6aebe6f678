"""学习进度统计：汇总某用户全部练习会话。"""
import logging
from typing import Iterable

from quizbowl.core.db import Database
from quizbowl.models.practice_session import PracticeSession
from quizbowl.repositories.practice_repository import list_all_practice_sessions
from quizbowl.schemas.progress import ProgressStats

logger = logging.getLogger(__name__)


def compute_progress_stats(sessions: Iterable[PracticeSession]) -> ProgressStats:
    """汇总会话数、题目总数、答对数、正确率（%）与平均分；分母为 0 时对应项为 0。"""
    sessions = list(sessions)
    total_sessions = len(sessions)
    total_questions = sum(s.total_questions for s in sessions)
    correct_answers = sum(s.correct_answers for s in sessions)
    total_score = sum(s.score for s in sessions)
    return ProgressStats(
        totalSessions=total_sessions,
        totalQuestions=total_questions,
        correctAnswers=correct_answers,
        accuracy=(correct_answers / total_questions) * 100 if total_questions > 0 else 0.0,
        averageScore=total_score / total_sessions if total_sessions > 0 else 0.0,
    )


async def get_user_progress_stats(database: Database, user_id: int) -> ProgressStats | None:
    """
    返回某用户的进度统计。

    数据库不可用时返回 None；用户没有任何练习时返回全 0 的统计，两者调用方需区分。
    """
    if not database.available:
        logger.warning("[progress] 数据库不可用，跳过统计 user_id=%s", user_id)
        return None
    sessions = await list_all_practice_sessions(database, user_id)
    stats = compute_progress_stats(sessions)
    logger.info(
        "[progress] user_id=%s sessions=%d questions=%d",
        user_id,
        stats.totalSessions,
        stats.totalQuestions,
    )
    return stats
