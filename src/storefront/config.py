"""Storefront settings.

Defaults that mark a user field as "not set yet" live here instead of on the
aggregates, so the cart service can be handed an explicit settings object.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    default_wallet_money: float = Field(500.0, ge=0)
    default_address: str = Field("ADDRESS_NOT_SET", min_length=1)


@lru_cache
def get_settings() -> StorefrontSettings:
    return StorefrontSettings()
