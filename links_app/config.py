from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "Link Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Database
    database_url: str = "sqlite:///./links.db"
    sql_echo: bool = False

    # Links
    base_url: str = "http://127.0.0.1:8000"
    slug_length: int = 6
    id_length: int = 21
    slug_strategy: str = "random"  # Options: "random", "alphanumeric"
    max_retries: int = 5  # Retries for generated slugs that collide
    # Paths owned by the router, a slug can never shadow them
    reserved_slugs: List[str] = ["links", "health", "docs", "redoc"]

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
