"""
Fantasy Football Playoff Odds - FastAPI Application

Main entry point for the web API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import simulations_router
from .core.config import CORS_ORIGINS, DEFAULT_SIMULATIONS, DEFAULT_WORKERS, configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    configure_logging()
    logging.getLogger("playoff_odds").info(
        "Playoff odds service starting (%d simulations, %d workers by default)",
        DEFAULT_SIMULATIONS, DEFAULT_WORKERS
    )
    yield
    # Shutdown


# Create FastAPI app
app = FastAPI(
    title="Fantasy Football Playoff Odds",
    description="Monte Carlo simulation to calculate playoff probabilities for fantasy football leagues.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(simulations_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Fantasy Football Playoff Odds API",
        "version": "1.0.0",
        "docs": "/api/docs",
        "health": "/api/health"
    }
