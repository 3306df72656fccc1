from __future__ import annotations

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "farmbot"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # WhatsApp Cloud API (Meta Graph API)
    verify_token: str = ""
    whatsapp_token: str = ""
    phone_number_id: str = ""
    graph_api_url: str = "https://graph.facebook.com"
    graph_api_version: str = "v19.0"
    http_timeout: float = 30.0

    # Gemini (LLM)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash-lite"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def graph_base_url(self) -> str:
        """Versioned Graph API root, e.g. https://graph.facebook.com/v19.0"""
        return f"{self.graph_api_url.rstrip('/')}/{self.graph_api_version}"

    @model_validator(mode="after")
    def validate_production_secrets(self) -> Settings:
        if self.is_production:
            missing = [
                name
                for name in (
                    "verify_token",
                    "whatsapp_token",
                    "phone_number_id",
                    "gemini_api_key",
                )
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(f"{', '.join(missing)} must be set in production")
        return self


settings = Settings()
