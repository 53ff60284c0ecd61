"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every file the service owns is named here; nothing else hardcodes a path
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - SRMS_ prefix on every variable, optional .env file
    - Defaults match the legacy file names so an existing student.dat is picked up as-is
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SRMS_", env_file=".env", case_sensitive=False,
    )

    # Files
    data_file: Path = Path("student.dat")
    backup_file: Path = Path("student_backup.dat")
    subjects_file: Path = Path("subjects.cfg")
    reports_dir: Path = Path("reports")

    # Listing
    records_per_page: int = Field(5, ge=1)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
