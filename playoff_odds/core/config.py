"""
Environment-driven configuration.
"""

import logging
import os

from ..simulator.engine import LOGISTIC_SCALE, SIMULATION_COUNT


# Default number of Monte Carlo trials per request
DEFAULT_SIMULATIONS = int(os.getenv("PLAYOFF_ODDS_SIMULATIONS", str(SIMULATION_COUNT)))

# Upper bound accepted from API callers
MAX_SIMULATIONS = int(os.getenv("PLAYOFF_ODDS_MAX_SIMULATIONS", "100000"))

# Worker processes used to shard trials (1 = run in-process)
DEFAULT_WORKERS = int(os.getenv("PLAYOFF_ODDS_WORKERS", "1"))

LOGISTIC_SCALE_SETTING = float(os.getenv("PLAYOFF_ODDS_LOGISTIC_SCALE", str(LOGISTIC_SCALE)))

# In production, replace with specific frontend URL
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """Configure root logging once for the service."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
