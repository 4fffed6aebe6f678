import enum

from sqlalchemy import Enum


class Role(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class Difficulty(str, enum.Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MessageRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


def enum_column_type(enum_cls: type[enum.Enum], name: str) -> Enum:
    """按值（小写）落库的枚举类型，与 PostgreSQL 中的 enum 定义一致。"""
    return Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])


role_type = enum_column_type(Role, "role")
difficulty_type = enum_column_type(Difficulty, "difficulty")
message_role_type = enum_column_type(MessageRole, "message_role")
