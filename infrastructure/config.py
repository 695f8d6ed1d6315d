import os
from dataclasses import dataclass

ENV_PREFIX = "TASKS"


def _env(suffix: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{suffix}")
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True)
class Settings:
    """Process settings, read once at startup from TASKS_* environment variables."""
    db_path: str = "tasks.db"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        port = _env("PORT", str(cls.port))
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}_PORT must be an integer, got '{port}'")
        return cls(
            db_path=_env("DB_PATH", cls.db_path),
            host=_env("HOST", cls.host),
            port=port_number,
            log_level=_env("LOG_LEVEL", cls.log_level).upper(),
        )
