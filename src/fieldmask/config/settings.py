"""Configuration settings using Pydantic Settings.

Usage:
    from fieldmask.config import CatalogSettings

    # Load from environment variables (FIELDMASK_*)
    settings = CatalogSettings()

    # Or override with explicit values
    settings = CatalogSettings(currency_symbol="$")
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):  # type: ignore[misc]
    """Catalog rendering and storage options.

    Attributes:
        currency_symbol: Suffix shown in the price label, as in ``price(€)``.
        warn_on_duplicate_id: Warn when a repository receives a repeated id.

    Environment Variables:
        FIELDMASK_CURRENCY_SYMBOL
        FIELDMASK_WARN_ON_DUPLICATE_ID
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDMASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    currency_symbol: str = Field(default="€", min_length=1)
    warn_on_duplicate_id: bool = True
