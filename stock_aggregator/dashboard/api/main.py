"""
FastAPI main application for the dashboard API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stock_aggregator import __version__
from stock_aggregator.dashboard.api.routes import (
    stocks_router,
    correlation_router,
    system_router,
)
from stock_aggregator.dashboard.api.dependencies import app_state, get_config
from stock_aggregator.dashboard.api.models import RootResponse
from stock_aggregator.logging import logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the shared data service with the app, stop it on shutdown."""
    config = get_config()
    setup_logging(config)

    if app_state.data_service is None:
        app_state.initialize(config)

    is_valid, msg = config.validate_upstream()
    if not is_valid:
        logger.warning(f"Upstream configuration: {msg}")

    await app_state.data_service.start()
    logger.info("Stock Price Aggregator API started", docs=f"http://localhost:{config.api_port}/docs")
    try:
        yield
    finally:
        await app_state.data_service.stop()
        logger.info("Stock Price Aggregator API shutting down")


# Create FastAPI app
app = FastAPI(
    title="Stock Price Aggregator API",
    description="Price windows, statistics and correlations for the stock dashboard",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(stocks_router)
app.include_router(correlation_router)
app.include_router(system_router)


@app.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    """API info."""
    return RootResponse(name="Stock Price Aggregator API", version=__version__)
