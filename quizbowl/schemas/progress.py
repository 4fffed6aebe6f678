"""学习进度统计响应模型。"""
from pydantic import BaseModel, Field


class ProgressStats(BaseModel):
    totalSessions: int = 0
    totalQuestions: int = 0
    correctAnswers: int = 0
    accuracy: float = Field(0.0, description="正确率（百分比），无题目时为 0")
    averageScore: float = Field(0.0, description="平均得分，无练习时为 0")
