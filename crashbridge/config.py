"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and CRASHBRIDGE_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BridgeConfig(BaseSettings):
    """Configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export CRASHBRIDGE_LOG_LEVEL=DEBUG
        export CRASHBRIDGE_BLOCKING_TIMEOUT_MS=250
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CRASHBRIDGE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # How long the blocking logger waits for a logged event to come back
    # through the connector listener.
    blocking_timeout_ms: int = 500

    @property
    def blocking_timeout(self) -> float:
        """Blocking logger timeout in seconds."""
        return self.blocking_timeout_ms / 1000.0

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton — import as `from crashbridge.config import config`
config = BridgeConfig()
