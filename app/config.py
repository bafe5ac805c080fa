from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- DB 設定 ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    COURSES_DB_NAME: str = "courses"
    ENROLLMENTS_DB_NAME: str = "enrollments"

    # full SQLAlchemy URLs, override the parts above (e.g. sqlite+aiosqlite://)
    COURSES_DATABASE_URL: Optional[str] = None
    ENROLLMENTS_DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    # --- 遠端服務 ---
    COURSES_SERVICE_URL: str = "http://localhost:7003"
    STUDENTS_SERVICE_URL: str = "http://localhost:7002"
    REMOTE_TIMEOUT_SECONDS: Optional[float] = None

    # --- 其他應用設定 ---
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    def _postgres_url(self, db_name: str) -> str:
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{db_name}"
        )

    @property
    def courses_database_url(self) -> str:
        return self.COURSES_DATABASE_URL or self._postgres_url(self.COURSES_DB_NAME)

    @property
    def enrollments_database_url(self) -> str:
        return self.ENROLLMENTS_DATABASE_URL or self._postgres_url(self.ENROLLMENTS_DB_NAME)


settings = Settings()
