from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: Optional[str] = None
    VERBOSE_ERRORS: bool = False
    LOG_LEVEL: str = "WARNING"
    CLIENT_ENCODING: str = "utf-8"

    @property
    def database_url(self) -> Optional[str]:
        return self.DATABASE_URL

    class Config:
        env_prefix = "PQERRORS_"
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
