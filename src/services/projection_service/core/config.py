from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProjectionServiceConfig(BaseSettings):
    low_volume_threshold: float = Field(
        default=0.2,
        gt=0.0,
        le=1.0,
        validation_alias="LOW_VOLUME_THRESHOLD",
        description="Fill ratio strictly below which a tank is flagged low-volume",
    )
    history_hours: int = Field(
        default=24,
        ge=1,
        validation_alias="HISTORY_HOURS",
        description="Number of hourly samples in a synthetic injection history",
    )
    history_base_rate: float = Field(
        default=5.0, ge=0.0, description="Baseline synthetic injection rate (L/hr)"
    )
    history_rate_jitter: float = Field(
        default=2.0,
        ge=0.0,
        description="Width of the uniform noise added to the baseline rate (L/hr)",
    )
    history_hourly_drawdown: float = Field(
        default=5.0,
        ge=0.0,
        description="Synthetic tank volume drop per hour (L)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache
def get_projection_config() -> ProjectionServiceConfig:
    """
    Factory function to get the singleton configuration instance.
    Uses @lru_cache to ensure only one instance is created per process.
    """
    return ProjectionServiceConfig()
