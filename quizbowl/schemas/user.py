"""用户与用户设置的写入模型。"""
from datetime import datetime

from pydantic import BaseModel, Field

from quizbowl.models.enums import Role


class UserUpsert(BaseModel):
    """
    用户 upsert 请求。

    调用方显式传入的字段（包括显式传 None 表示清空）会写入；未传的字段在冲突更新时保持原值。
    是否传入通过 model_fields_set 判断。
    """
    open_id: str | None = Field(None, description="外部身份标识，必填")
    name: str | None = Field(None, description="显示名")
    email: str | None = Field(None, description="邮箱")
    login_method: str | None = Field(None, description="登录方式")
    role: Role | None = Field(None, description="角色，未传时按 owner_open_id 推断")
    last_signed_in: datetime | None = Field(None, description="最近登录时间，未传默认为当前时间")


class UserSettingsUpsert(BaseModel):
    user_id: int
    tutor_model_name: str | None = None
    tutor_api_key: str | None = None
    question_generator_model_name: str | None = None
    question_generator_api_key: str | None = None
