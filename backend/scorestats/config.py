from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "ScoreStats"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "scorestats"
    postgres_password: str = "scorestats"
    postgres_db: str = "scorestats"
    database_echo: bool = False

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    model_config = {"env_prefix": "SCORESTATS_", "env_file": ".env"}


settings = Settings()
