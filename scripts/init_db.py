"""按 quizbowl.models 的声明在 DATABASE_URL 指向的库中建表（已存在的表跳过）。
与应用使用同一 DATABASE_URL（quizbowl.core.config 会从项目根目录 .env 加载环境变量）。"""
import argparse
import asyncio
import logging
import os
import sys

# 项目根目录
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from quizbowl.core.config import settings
from quizbowl.core.db import Base, Database, _redact_url

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


async def _run(url: str) -> int:
    database = Database(url, echo=settings.db_echo)
    if not database.available:
        logger.error("数据库不可用，请检查 DATABASE_URL")
        return 1
    try:
        await database.create_all()
    finally:
        await database.dispose()
    logger.info("建表完成：%s", ", ".join(sorted(Base.metadata.tables)))
    return 0


def main():
    parser = argparse.ArgumentParser(description="Create quizbowl tables")
    parser.add_argument("--url", default=settings.database_url, help="数据库 URL，默认取 DATABASE_URL")
    args = parser.parse_args()
    if not args.url:
        print("DATABASE_URL 未配置，也未通过 --url 指定")
        sys.exit(1)
    print(f"Using DB: {_redact_url(args.url)}")
    sys.exit(asyncio.run(_run(args.url)))


if __name__ == "__main__":
    main()
