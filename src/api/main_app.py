"""Main FastAPI application for the API layer."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from src.api.domain.schemas import HealthResponse, RootResponse
from src.api.infrastructure.container import get_container, init_container
from src.api.routers import alerts, realtime, sites
from src.config import AppConfig
from src.telemetry.infrastructure.logging import configure_logging
from src.telemetry.infrastructure.seed import seed_store

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    config = AppConfig()
    configure_logging(config.logging.level, config.logging.file)
    logger.info("🚀 Starting water quality telemetry API...")

    container = init_container(config.model_dump())

    if config.seed.enabled:
        seed_store(container.store(), container.reading_generator())

    scheduler = container.scheduler()
    if config.simulation.enabled:
        scheduler.start()
    else:
        logger.info("Simulation disabled, no periodic ticks will run")

    logger.info("✓ API ready")

    yield

    # Shutdown
    logger.info("🛑 Shutting down API...")
    await scheduler.stop()
    container.broadcast_channel().close()
    logger.info("✓ Real-time channel closed")


# Create FastAPI app
app = FastAPI(
    title="Water Quality Telemetry API",
    description="Site health scoring, alerting and real-time sensor updates",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure as needed
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sites.router)
app.include_router(alerts.router)
app.include_router(realtime.router)


@app.get("/", response_model=RootResponse)
async def root():
    """Root endpoint."""
    return RootResponse(
        message="Water Quality Telemetry API",
        version=VERSION,
        realtime=AppConfig().realtime.path,
    )


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    container = get_container()
    return HealthResponse(
        scheduler=container.scheduler().state,
        connections=container.broadcast_channel().connection_count,
    )


def main() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
