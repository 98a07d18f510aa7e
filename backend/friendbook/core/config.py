from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    project_name: str = "Friendbook API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    backend_cors_origins: list[str] = ["*"]

    postgres_host: str = "db"
    postgres_port: int = 5432
    postgres_user: str = "friendbook"
    postgres_password: str = "friendbook"
    postgres_db: str = "friendbook"
    database_url_override: str | None = Field(default=None, validation_alias="database_url")

    log_level: str = "INFO"
    log_format: str = "json"

    sentry_dsn: str | None = None
    sentry_environment: str = "local"
    sentry_release: str = "friendbook-api@1.0.0"
    sentry_flush_timeout: float = 2.0

    api_base_url: str = "http://localhost:8000"

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
