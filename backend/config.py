from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "your_openai_api_key_here"

_DEFAULT_CLIENT_URLS = {
    "production": "https://realpix.netlify.app",
    "development": "http://localhost:8501",
}


class Settings(BaseSettings):
    """Runtime configuration for the RealPix gateway."""

    #----------------------------------------------------------
    # Image provider settings
    #----------------------------------------------------------
    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("REALPIX_OPENAI_API_KEY", "OPENAI_API_KEY", "openai_api_key"),
        description="API key for the OpenAI Images endpoint. Leave unset to run in demo mode.",
    )

    openai_base_url: Optional[str] = Field(
        default=None,
        description="Override for OpenAI-compatible image endpoints.",
    )

    image_model: str = Field(
        default="dall-e-3",
        description="Model id requested from the image provider.",
    )

    image_size: str = Field(
        default="1024x1024",
        description="Square resolution requested for every generated image.",
    )

    provider_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Seconds to wait for the image provider before giving up.",
    )

    #----------------------------------------------------------
    # Server settings
    #----------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime mode. Internal error detail is only exposed in development.",
    )

    client_url: Optional[str] = Field(
        default=None,
        description="Origin allowed to call the API cross-origin.",
    )

    host: str = Field(default="0.0.0.0", description="Interface the server binds to.")

    port: int = Field(default=3001, description="Port the server listens on.")

    uploads_dir: Path = Field(
        default=Path(__file__).resolve().parent / "uploads",
        description="Directory served under /uploads.",
    )

    model_config = SettingsConfigDict(
        env_prefix="REALPIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def demo_mode(self) -> bool:
        """True when no usable provider credential is configured."""
        if self.openai_api_key is None:
            return True
        key = self.openai_api_key.get_secret_value().strip()
        return not key or key == PLACEHOLDER_API_KEY

    @property
    def allowed_origin(self) -> str:
        if self.client_url:
            return self.client_url
        if self.is_production:
            return _DEFAULT_CLIENT_URLS["production"]
        return _DEFAULT_CLIENT_URLS["development"]


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
