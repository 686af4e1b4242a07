"""Runtime configuration - env-driven via pydantic-settings.

Reads from a .env file and YETZIRA_* environment variables.  The project
grid axes live here because they are a display plan, not something derived
from the unit records.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardConfig(BaseSettings):
    """Dashboard configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export YETZIRA_STORE_PATH=/data/records.db
        export YETZIRA_LOG_LEVEL=DEBUG
        export YETZIRA_FLOORS='[6, 5, 4, 3, 2]'

    Or via .env file::

        YETZIRA_ENVIRONMENT=production
        YETZIRA_FACADES='["A", "B", "C", "D"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="YETZIRA_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Record store
    store_path: Path = Path(".yetzira/records.db")

    # Project grid axes, in display order (top floor first)
    floors: list[int] = [5, 4, 3, 2]
    facades: list[str] = ["A", "B", "C"]

    # Streamlit dashboard
    host: str = "0.0.0.0"
    port: int = 8501

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton - import as `from yetzira.config import config`
config = DashboardConfig()
