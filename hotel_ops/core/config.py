"""Hotel Ops Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Hotel Ops"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Backend (Supabase project)
    supabase_url: str = "http://localhost:54321"
    supabase_key: Optional[str] = None
    rest_path: str = "/rest/v1"
    auth_path: str = "/auth/v1"
    request_timeout: float = 30.0

    # Client state
    session_storage_path: Optional[str] = None
    login_url: str = "/login"
    currency: str = "USD"

    model_config = SettingsConfigDict(
        env_file="config/.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def rest_base_url(self) -> str:
        """Base URL of the table API"""
        return f"{self.supabase_url.rstrip('/')}{self.rest_path}"

    @property
    def auth_base_url(self) -> str:
        """Base URL of the auth API"""
        return f"{self.supabase_url.rstrip('/')}{self.auth_path}"

    @property
    def backend_configured(self) -> bool:
        """Check if an API key is configured"""
        return bool(self.supabase_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
