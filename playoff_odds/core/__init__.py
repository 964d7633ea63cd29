"""
Core configuration.
"""

from .config import (
    DEFAULT_SIMULATIONS,
    MAX_SIMULATIONS,
    DEFAULT_WORKERS,
    LOGISTIC_SCALE_SETTING,
    CORS_ORIGINS,
    configure_logging,
)

__all__ = [
    "DEFAULT_SIMULATIONS",
    "MAX_SIMULATIONS",
    "DEFAULT_WORKERS",
    "LOGISTIC_SCALE_SETTING",
    "CORS_ORIGINS",
    "configure_logging",
]
