from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )
    DATABASE_ECHO: bool = EnvManager.get_bool("DATABASE_ECHO", False)

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Posts API")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Authenticated CRUD API for posts"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    API_PREFIX: str = EnvManager.get_env_variable("API_PREFIX", "/api")
    CORS_ORIGINS: str = EnvManager.get_env_variable("CORS_ORIGINS", "*")

    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "UTC")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    LOG_FILE: str = EnvManager.get_env_variable("LOG_FILE", "")

    DEFAULT_PER_PAGE: int = int(EnvManager.get_env_variable("DEFAULT_PER_PAGE", "15"))
    MAX_PER_PAGE: int = int(EnvManager.get_env_variable("MAX_PER_PAGE", "100"))

    def get_now(self):
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)

    def get_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
