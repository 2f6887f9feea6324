"""Remote travel API settings configuration."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class TravelApiSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    TRAVEL_API_URL: str = "http://localhost:5000"
    TRAVEL_API_TOKEN: SecretStr | None = None
    TRAVEL_API_TIMEOUT: float = Field(default=60.0, gt=0)  # cold starts are slow
    TRAVEL_API_MAX_RETRIES: int = Field(default=3, ge=0)
    TRAVEL_API_RETRY_DELAY: float = Field(default=1.0, ge=0)

    @property
    def base_url(self) -> str:
        return f"{self.TRAVEL_API_URL.rstrip('/')}/api"


__all__ = ["TravelApiSettings"]
