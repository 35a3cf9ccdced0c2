"""
集中配置管理

从环境变量 / .env 文件加载所有配置项，
并提供校验与默认值。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

DEFAULT_TZ = "Asia/Shanghai"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def _load_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError):
        print(f"[WARN] 无法识别时区 '{name}'，回退到 {DEFAULT_TZ}")
        return ZoneInfo(DEFAULT_TZ)


def _load_log_level(name: str) -> str:
    level = name.upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"[WARN] 无法识别日志级别 '{name}'，回退到 {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


@dataclass(frozen=True)
class Config:
    """不可变配置对象，一次加载、全局使用。"""

    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo(DEFAULT_TZ))
    log_level: str = DEFAULT_LOG_LEVEL
    date_format: str = DEFAULT_DATE_FORMAT   # 命令行输入 / 输出的公历日期格式

    @classmethod
    def from_env(
        cls,
        env_path: str | Path | None = None,
        load_dotenv_file: bool = True,
    ) -> "Config":
        """从 .env 文件 + 环境变量构建 Config 实例。"""
        if env_path:
            load_dotenv(env_path, override=True)
        elif load_dotenv_file:
            # 优先级:
            # 1. 当前目录 .lunarcal/.env
            # 2. 当前目录 .env
            # 3. 项目根目录 .env (源码运行)
            # 4. ~/.lunarcal/.env

            project_root = Path(__file__).resolve().parent.parent
            candidates = [
                Path.cwd() / ".lunarcal" / ".env",
                Path.cwd() / ".env",
                project_root / ".env",
                Path.home() / ".lunarcal" / ".env",
            ]

            for candidate in candidates:
                if candidate.exists():
                    load_dotenv(candidate, override=True)
                    break

        tz_name = os.getenv("LUNARCAL_TZ", DEFAULT_TZ).strip() or DEFAULT_TZ
        level_name = os.getenv("LUNARCAL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
        date_format = os.getenv("LUNARCAL_DATE_FORMAT", DEFAULT_DATE_FORMAT).strip() or DEFAULT_DATE_FORMAT

        return cls(
            timezone=_load_timezone(tz_name),
            log_level=_load_log_level(level_name),
            date_format=date_format,
        )
