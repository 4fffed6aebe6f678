from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from quizbowl.models.base import TimestampMixin
from quizbowl.models.enums import Role, role_type
from quizbowl.core.db import Base


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 外部认证提供方签发的身份标识，作为用户的自然键
    open_id = Column(String(64), unique=True, nullable=False)
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(role_type, nullable=False, default=Role.USER, server_default=Role.USER.value)
    last_signed_in = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
