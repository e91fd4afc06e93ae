"""
vault_client.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the client (endpoint, region, credentials).
- Hide secrets from repr/logging (secret access key, session token).
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Every field can be supplied as `VAULT_<NAME>` in the environment.
    Static credentials are optional; botocore's default chain is used otherwise.
    """

    model_config = SettingsConfigDict(env_prefix="VAULT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "vault-client"
    log_level: str = "INFO"

    # Vault admin endpoint; every operation is POSTed to its root path.
    endpoint: str = "http://localhost:8500"
    region: str = "us-east-1"

    # Credentials
    access_key_id: str | None = None
    secret_access_key: str | None = Field(default=None, repr=False)
    session_token: str | None = Field(default=None, repr=False)

    # Transport
    timeout_seconds: float = 10.0
    max_retries: int = Field(default=0, ge=0)
    keepalive_expiry: float = 55.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for every client built from defaults.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `max_retries` only covers connection establishment (httpx transport retries);
# the client itself never retries a request that reached the server.
