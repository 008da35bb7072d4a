
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Employees API"
    app_env: str = "development"
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./employees_dev.db",
        alias="DATABASE_URL",
    )

    # Paging — process-wide, never mutated at runtime
    default_page_size: int = Field(default=10, ge=1, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=50, ge=1, alias="MAX_PAGE_SIZE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"DEFAULT_PAGE_SIZE ({self.default_page_size}) must not exceed "
                f"MAX_PAGE_SIZE ({self.max_page_size})"
            )
        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
