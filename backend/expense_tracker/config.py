"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Expense Tracker"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/expenses.sqlite"
    db_timeout_seconds: float = 5.0

    # Statistics
    stats_month_limit: int = 12

    # Expense listing
    expense_list_max_limit: int = 1000

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 3500
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
