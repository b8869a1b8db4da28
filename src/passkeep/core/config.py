from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    # full async URL, takes precedence over the PG* parts
    DATABASE_URL: Optional[str] = None
    PGHOST: str = 'localhost'
    PGPORT: int = 5432
    PGUSER: Optional[str] = None
    PGPASSWORD: Optional[str] = None
    PGDATABASE: Optional[str] = None
    DB_ECHO: bool = False
    USER_STORE: Literal['sql', 'memory'] = 'sql'
    PASSWORD_HASHER: Literal['argon2', 'fast'] = 'argon2'

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            'postgresql+asyncpg',
            username=self.PGUSER,
            password=self.PGPASSWORD,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        ).render_as_string(hide_password=False)


def get_settings() -> Settings:
    return Settings()
