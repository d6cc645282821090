import os
from dataclasses import dataclass, field
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:5173"])
    seed_demo: bool = True


def load_settings() -> Settings:
    """Settings from TASKFLOW_* environment variables."""
    return Settings(
        host=os.getenv("TASKFLOW_HOST", "127.0.0.1"),
        port=int(os.getenv("TASKFLOW_PORT", "8000")),
        log_level=os.getenv("TASKFLOW_LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("TASKFLOW_CORS_ORIGINS", "http://localhost:5173"),
        seed_demo=_env_flag("TASKFLOW_SEED_DEMO", "true"),
    )
