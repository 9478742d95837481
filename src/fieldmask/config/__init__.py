"""Configuration module using Pydantic Settings.

Usage:
    from fieldmask.config import CatalogSettings

    settings = CatalogSettings(currency_symbol="$")
"""

from fieldmask.config.settings import CatalogSettings

__all__ = [
    "CatalogSettings",
]
