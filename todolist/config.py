"""服务配置 - 从环境变量（以及可选的 .env）加载"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODOLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _first_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(*names: str, default: int) -> int:
    raw = _first_env(*names)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    # 未知级别名时 getLevelName 返回字符串 "Level xxx"
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True)
class Settings:
    app_name: str = "To-Do List API"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    # 先校验全部字段再写入，关闭时保持 title 先写入的旧行为
    atomic_updates: bool = False
    reload: bool = False

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_first_env(_k("APP_NAME"), default="To-Do List API"),
            host=_first_env(_k("HOST"), "HOST", default="0.0.0.0"),
            port=_env_int(_k("PORT"), "PORT", default=3000),
            log_level=_env_log_level(_k("LOG_LEVEL"), "INFO"),
            cors_origins=_env_list(_k("CORS_ORIGINS"), ["*"]),
            atomic_updates=_env_bool(_k("ATOMIC_UPDATES"), False),
            reload=_env_bool(_k("RELOAD"), False),
        )


settings = Settings.from_env()


def get_settings() -> Settings:
    return settings
