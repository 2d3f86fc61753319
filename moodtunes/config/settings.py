from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    CLIENT_ID: str = Field("", validation_alias=AliasChoices("SPOTIFY_CLIENT_ID", "CLIENT_ID"))
    CLIENT_SECRET: str = Field("", validation_alias=AliasChoices("SPOTIFY_CLIENT_SECRET", "CLIENT_SECRET"))
    REDIRECT_URI: str = Field("", validation_alias=AliasChoices("SPOTIFY_REDIRECT_URI", "REDIRECT_URI"))
    PORT: int = 5000
    SPOTIFY_AUTHENTICATION_URL: str = "https://accounts.spotify.com"
    SPOTIFY_API_URL: str = "https://api.spotify.com/v1"
    FRONT_BASE_URL: str = "http://localhost:5173"
    HTTP_TIMEOUT: float = 10.0
    LOG_LEVEL: str = "INFO"
    LOG_TIMEZONE: str = "UTC"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
