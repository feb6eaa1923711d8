"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=3000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ======================
    # Balance lookup
    # ======================
    rpc_url: str = Field(
        default="https://api.devnet.solana.com", description="Solana RPC URL"
    )
    wallet_address: Optional[str] = Field(
        default=None, description="Address whose balance GET / reports"
    )
    rpc_timeout: float = Field(
        default=10.0, gt=0, description="Balance lookup timeout in seconds"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def has_balance_lookup(self) -> bool:
        """Check if the balance route has an address to query."""
        return bool(self.rpc_url and self.wallet_address)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "host": self.host,
            "port": self.port,
            "rpc_url": self._redact_url(self.rpc_url),
            "wallet_address": self.wallet_address or "(not set)",
            "rpc_timeout": self.rpc_timeout,
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact credentials and API key query strings from an RPC URL."""
        if "://" in url and "@" in url:
            proto, rest = url.split("://", 1)
            if "@" in rest:
                creds, host = rest.rsplit("@", 1)
                if ":" in creds:
                    user, _ = creds.split(":", 1)
                    url = f"{proto}://{user}:***@{host}"
        if "?" in url:
            url = url.split("?", 1)[0] + "?***"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
