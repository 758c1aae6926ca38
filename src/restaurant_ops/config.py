import logging
import sys
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./restaurant_ops.db"
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    DB_ECHO: bool = False
    DB_CREATE_ALL: bool = True
    # new -> in-progress -> ready only; off keeps any-to-any status changes
    ORDER_STATUS_FORWARD_ONLY: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings) -> None:
    """
    Настраивает корневой логгер один раз на весь процесс.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
