from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Configuration for the RealPix Streamlit client."""

    api_url: str = Field(
        default="http://localhost:3001/api",
        description="Base URL of the RealPix gateway, including the /api prefix.",
    )

    app_name: str = Field(default="RealPix", description="Title shown in the page header.")

    # Documented limit only; prompts are not truncated or rejected by length.
    max_prompt_length: int = Field(
        default=1000,
        description="Advertised prompt length limit.",
    )

    default_image_size: str = Field(
        default="1024x1024",
        description="Resolution the gateway is expected to return.",
    )

    request_timeout: float = Field(
        default=90.0,
        gt=0,
        description="Seconds to wait for the gateway before falling back to a sample image.",
    )

    model_config = SettingsConfigDict(
        env_prefix="REALPIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()  # type: ignore[call-arg]
