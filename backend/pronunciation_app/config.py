"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{BASE / 'app.db'}"


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_ECHO: bool
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    ALLOW_SQLITE_IN_PROD: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DB_URL)
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.ALLOW_SQLITE_IN_PROD = os.getenv("ALLOW_SQLITE_IN_PROD", "false").lower() == "true"
        self._validate()

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def _validate(self):
        if self.ENV != "dev" and self.is_sqlite and not self.ALLOW_SQLITE_IN_PROD:
            raise RuntimeError("DATABASE_URL must point to a server database in non-dev environments")


settings = Settings()
