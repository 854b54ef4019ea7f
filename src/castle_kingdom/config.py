"""Runtime configuration for Castle Kingdom."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="CASTLE_KINGDOM_", env_file=".env", extra="ignore")

    app_name: str = "castle-kingdom"
    log_level: str = Field(
        default="WARNING",
        description="Level for castle_kingdom loggers; records go to stderr.",
    )
    telemetry_enabled: bool = Field(
        default=True,
        description="Emit menu events to the log. Events are logged at INFO, so set log_level to INFO to see them.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


settings = Settings()
