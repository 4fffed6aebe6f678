"""用户（User）与用户设置（UserSettings）数据访问层。"""
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from quizbowl.core.config import settings as app_settings
from quizbowl.core.db import Database
from quizbowl.core.errors import InvalidArgumentError
from quizbowl.models.enums import Role
from quizbowl.models.user import User
from quizbowl.models.user_settings import UserSettings
from quizbowl.schemas.user import UserSettingsUpsert, UserUpsert

logger = logging.getLogger(__name__)

# 可被调用方显式清空的文本字段
_NULLABLE_TEXT_FIELDS = ("name", "email", "login_method")


def build_user_upsert(
    user: UserUpsert,
    owner_open_id: str | None,
    now: datetime,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    计算 upsert 的 INSERT 值与冲突时的 UPDATE 集合，返回 (values, update_set)。

    - 调用方传入的 name/email/login_method（包括 None）同时进入两者，未传的不动；
    - 传了 role 就用它；否则 open_id 为站长时强制 admin，其余 INSERT 走表默认、UPDATE 不设；
    - 未传 last_signed_in 时 INSERT 用 now；UPDATE 集合为空时补上 last_signed_in=now，保证冲突时一定有写入。
    """
    if not user.open_id:
        raise InvalidArgumentError("User open_id is required for upsert")

    provided = user.model_fields_set
    values: dict[str, Any] = {"open_id": user.open_id}
    update_set: dict[str, Any] = {}

    for field in _NULLABLE_TEXT_FIELDS:
        if field not in provided:
            continue
        value = getattr(user, field)
        values[field] = value
        update_set[field] = value

    if "last_signed_in" in provided and user.last_signed_in is not None:
        values["last_signed_in"] = user.last_signed_in
        update_set["last_signed_in"] = user.last_signed_in

    if "role" in provided and user.role is not None:
        values["role"] = user.role
        update_set["role"] = user.role
    elif owner_open_id and user.open_id == owner_open_id:
        values["role"] = Role.ADMIN
        update_set["role"] = Role.ADMIN

    if values.get("last_signed_in") is None:
        values["last_signed_in"] = now
    if not update_set:
        update_set["last_signed_in"] = now

    return values, update_set


def _dialect_insert(db: AsyncSession):
    """按当前连接方言选择支持 ON CONFLICT 的 insert 构造（生产为 PostgreSQL）。"""
    if db.bind.dialect.name == "sqlite":
        return sqlite.insert
    return postgresql.insert


async def upsert_user(
    database: Database,
    user: UserUpsert,
    *,
    owner_open_id: str | None = None,
) -> None:
    """按 open_id 插入或更新用户；owner_open_id 为空时取配置中的 OWNER_OPEN_ID。"""
    if owner_open_id is None:
        owner_open_id = app_settings.owner_open_id
    values, update_set = build_user_upsert(user, owner_open_id, datetime.now(timezone.utc))
    # ON CONFLICT 的 SET 不触发 onupdate，需显式刷新
    update_set["updated_at"] = func.now()

    async with database.session() as db:
        if db is None:
            logger.warning("[Database] 数据库不可用，跳过用户 upsert")
            return
        try:
            insert = _dialect_insert(db)
            stmt = insert(User).values(**values)
            stmt = stmt.on_conflict_do_update(index_elements=[User.open_id], set_=update_set)
            await db.execute(stmt)
            await db.commit()
        except Exception:
            logger.exception("[Database] 用户 upsert 失败 open_id=%s", user.open_id)
            raise


async def get_user_by_open_id(database: Database, open_id: str) -> User | None:
    """按外部身份标识查询用户，不存在返回 None。"""
    async with database.session() as db:
        if db is None:
            logger.warning("[Database] 数据库不可用，无法查询用户")
            return None
        result = await db.execute(select(User).where(User.open_id == open_id).limit(1))
        return result.scalars().first()


async def get_user_by_id(database: Database, user_id: int) -> User | None:
    """按用户 ID 查询用户，不存在返回 None。"""
    async with database.session() as db:
        if db is None:
            logger.warning("[Database] 数据库不可用，无法查询用户")
            return None
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalars().first()


async def get_user_settings(database: Database, user_id: int) -> UserSettings | None:
    async with database.session() as db:
        if db is None:
            return None
        result = await db.execute(select(UserSettings).where(UserSettings.user_id == user_id).limit(1))
        return result.scalars().first()


async def upsert_user_settings(database: Database, user_settings: UserSettingsUpsert) -> None:
    """
    先查后写：已有则更新四个模型/密钥字段并刷新 updated_at，否则插入新行。

    非原子操作，同一用户并发首次写入可能产生两行。
    """
    async with database.session() as db:
        if db is None:
            return
        result = await db.execute(
            select(UserSettings.id).where(UserSettings.user_id == user_settings.user_id).limit(1)
        )
        if result.scalar_one_or_none() is not None:
            await db.execute(
                update(UserSettings)
                .where(UserSettings.user_id == user_settings.user_id)
                .values(
                    tutor_model_name=user_settings.tutor_model_name,
                    tutor_api_key=user_settings.tutor_api_key,
                    question_generator_model_name=user_settings.question_generator_model_name,
                    question_generator_api_key=user_settings.question_generator_api_key,
                    updated_at=func.now(),
                )
            )
        else:
            db.add(UserSettings(**user_settings.model_dump()))
        await db.commit()
