import uuid
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ====================================
# SETTINGS
# ====================================

class Settings(BaseSettings):
    # Wczytujemy zmienne środowiskowe (PUBSUB_*) z pliku .env
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PUBSUB_",
        extra="ignore",
    )

    SUBSCRIBE_KEY: Optional[str] = None
    AUTH_KEY: Optional[str] = None
    UUID: str = Field(default_factory=lambda: f"pn-{uuid.uuid4()}")

    ORIGIN: str = "ps.pndsn.com"
    SSL: bool = True

    # sekundy
    NON_SUBSCRIBE_REQUEST_TIMEOUT: int = 10
    CONNECT_TIMEOUT: int = 10

    def get_subscribe_key(self) -> Optional[str]:
        return self.SUBSCRIBE_KEY

    def get_auth_key(self) -> Optional[str]:
        return self.AUTH_KEY

    def get_uuid(self) -> str:
        return self.UUID

    def get_non_subscribe_request_timeout(self) -> int:
        return self.NON_SUBSCRIBE_REQUEST_TIMEOUT

    def get_connect_timeout(self) -> int:
        return self.CONNECT_TIMEOUT

    def base_url(self) -> str:
        scheme = "https" if self.SSL else "http"
        return f"{scheme}://{self.ORIGIN}"

# Dependency: settings

def get_settings() -> Settings:
    return Settings()
