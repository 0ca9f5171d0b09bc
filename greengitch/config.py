from functools import lru_cache
from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the GreenGitch backend and UI."""

    #----------------------------------------------------------
    # Stability AI settings
    #----------------------------------------------------------
    stability_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("GREENGITCH_STABILITY_API_KEY", "STABILITY_API_KEY"),
        description="API key for authenticating with the Stability AI text-to-image service.",
    )

    stability_api_host: str = Field(
        default="https://api.stability.ai",
        description="Base URL of the Stability AI REST API.",
    )

    stability_engine_id: str = Field(
        default="stable-diffusion-xl-1024-v1-0",
        description="Stability AI engine used for text-to-image generation.",
    )

    stability_timeout_seconds: float = Field(
        default=120.0,
        gt=0.0,
        description="Transport timeout for a single call to the provider.",
    )

    #----------------------------------------------------------
    # Result settings
    #----------------------------------------------------------
    placeholder_url: str = Field(
        default="/placeholder.svg?height=1024&width=1024",
        description="Static image path returned for the alternative (non-generated) slots.",
    )

    #----------------------------------------------------------
    # Runtime settings
    #----------------------------------------------------------
    backend_url: str = Field(
        default="http://localhost:8000",
        description="Where the Streamlit UI reaches the GreenGitch API.",
    )

    public_url: str = Field(
        default="http://localhost:8501",
        description="Public address of the UI, used as the link in share intents.",
    )

    log_level: str = Field(
        default="info",
        description="Log level handed to uvicorn.",
    )

    model_config = SettingsConfigDict(
        env_prefix="GREENGITCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_stability_api_key(self) -> bool:
        return bool(self.stability_api_key.get_secret_value().strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
