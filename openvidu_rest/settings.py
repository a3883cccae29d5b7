from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenVidu server
    OPENVIDU_URL: str | None = Field(
        None, validation_alias=AliasChoices("OPENVIDU_URL", "OpenViduServerUrl")
    )
    OPENVIDU_SECRET: str | None = Field(
        None, validation_alias=AliasChoices("OPENVIDU_SECRET", "OpenViduSecret")
    )

    # Request timeout in seconds, none by default
    OPENVIDU_TIMEOUT: float | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


settings = Settings()
