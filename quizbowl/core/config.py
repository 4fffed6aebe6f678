import os
from dataclasses import dataclass
from pathlib import Path

# 在读取配置前加载项目根目录 .env，已存在的环境变量优先
_root = Path(__file__).resolve().parent.parent.parent
_env = _root / ".env"
if _env.is_file():
    with open(_env, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and "=" in line and not line.startswith("#"):
                k, _, v = line.partition("=")
                k, v = k.strip(), v.strip()
                if k and os.environ.get(k) is None:
                    os.environ[k] = v


@dataclass(frozen=True)
class Settings:
    # 为空表示未配置数据库：读操作返回空结果，写操作跳过
    database_url: str = os.getenv("DATABASE_URL", "")
    db_echo: bool = os.getenv("DB_ECHO", "false").lower() == "true"
    db_pool_pre_ping: bool = os.getenv("DB_POOL_PRE_PING", "true").lower() in ("1", "true", "yes")
    # 站长的外部身份 openId，首次登录自动授予 admin
    owner_open_id: str = os.getenv("OWNER_OPEN_ID", "")


settings = Settings()
