from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdvisoryServiceConfig(BaseSettings):
    anthropic_api_key: SecretStr | None = Field(
        default=None,
        validation_alias="ANTHROPIC_API_KEY",
        description="API key of the advisory text generator; insights are disabled without it",
    )
    advisory_model: str = Field(
        default="claude-3-5-haiku-latest",
        validation_alias="ADVISORY_MODEL",
        description="Model used to write the advisory summary",
    )
    max_tokens: int = Field(
        default=1024, gt=0, description="Upper bound on the summary length in tokens"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        validation_alias="ADVISORY_TIMEOUT_SECONDS",
        description="Timeout in seconds for one advisory request",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @property
    def is_configured(self) -> bool:
        return (
            self.anthropic_api_key is not None
            and bool(self.anthropic_api_key.get_secret_value().strip())
        )


@lru_cache
def get_advisory_config() -> AdvisoryServiceConfig:
    """
    Factory function to get the singleton configuration instance.
    Uses @lru_cache to ensure only one instance is created per process.
    """
    return AdvisoryServiceConfig()
