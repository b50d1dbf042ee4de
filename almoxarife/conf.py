"""
Almoxarife configuration.

Usage in settings.py:
    ALMOXARIFE = {
        "MAX_EXIT_QUANTITY": 5,
        "DEFAULT_MOVEMENT_LIMIT": 20,
        "USER_MATRICULA_FIELD": "matricula",
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class AlmoxarifeSettings:
    """Almoxarife configuration settings."""

    # Ceiling for a single outbound movement
    MAX_EXIT_QUANTITY: int = 5

    # Movements returned by list_movements() when no limit is given
    DEFAULT_MOVEMENT_LIMIT: int = 20

    # User model attribute shown as "matricula" in movement listings
    USER_MATRICULA_FIELD: str = "matricula"

    # Sequence row that hands out product codes
    PRODUCT_CODE_SEQUENCE: str = "product.code"


def get_almoxarife_settings() -> AlmoxarifeSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "ALMOXARIFE", {})
    return AlmoxarifeSettings(**{
        k: v for k, v in user_settings.items()
        if k in AlmoxarifeSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_almoxarife_settings(), name)


ledger_settings = _LazySettings()
