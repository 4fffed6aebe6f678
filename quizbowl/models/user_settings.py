from sqlalchemy import Column, Integer, String, Text

from quizbowl.models.base import TimestampMixin
from quizbowl.core.db import Base


class UserSettings(Base, TimestampMixin):
    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 每个用户至多一行，由 upsert_user_settings 保证，库里没有唯一约束
    user_id = Column(Integer, nullable=False, index=True)
    # 答疑（tutor）与出题（question generator）两个角色各自的模型与密钥
    tutor_model_name = Column(String(255), nullable=True)
    tutor_api_key = Column(Text, nullable=True)
    question_generator_model_name = Column(String(255), nullable=True)
    question_generator_api_key = Column(Text, nullable=True)
