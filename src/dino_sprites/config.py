"""Configuration and environment loading."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

load_dotenv()


class MissingCredentialError(ValueError):
    """Raised when the image API key is not configured."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Image Generation
    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY")
    image_model: str = Field(default="gemini-2.0-flash-exp", alias="IMAGE_MODEL")

    # Output
    assets_dir: Path = Field(default=Path("./public/assets"), alias="ASSETS_DIR")

    # Pause between sequential API calls, in seconds
    request_delay: float = Field(default=2.0, ge=0, alias="REQUEST_DELAY")

    model_config = {"env_file": ".env", "extra": "ignore", "populate_by_name": True}

    def require_api_key(self) -> str:
        """Get the Gemini API key, raising if it is not set."""
        if not self.gemini_api_key:
            raise MissingCredentialError("GEMINI_API_KEY environment variable not set")
        return self.gemini_api_key


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
