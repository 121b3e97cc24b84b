"""Application settings using Pydantic Settings."""

import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"

    # --- Git ---
    # Organisation URL, repositories live at <git_root_url>/<name>.git
    git_root_url: str = "https://github.com/quattor"
    git_executable: str = "git"

    # Parent directory of the temporary clones (empty: system default)
    work_dir: str = ""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.git_root_url = self.git_root_url.rstrip("/")
        if self.work_dir:
            self.work_dir = str(Path(self.work_dir).expanduser())

    @property
    def clone_parent(self) -> str:
        return self.work_dir or tempfile.gettempdir()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
