from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Expo API
    EXPO_BASE_URL: str = "https://exp.host/--/api/v2"
    EXPO_ACCESS_TOKEN: str | None = None
    EXPO_REQUEST_TIMEOUT: float = 10.0

    # Request bodies larger than this are gzipped
    COMPRESSION_THRESHOLD_BYTES: int = 1024
    COMPRESSION_LEVEL: int = Field(default=6, ge=1, le=9)

    # Subscriptions
    STORAGE_DRIVER: str = "file"
    STORAGE_PATH: str = "storage/expo.json"

    DEBUG: bool = False
    LOG_DIR: str = "logs"


settings = Settings()
