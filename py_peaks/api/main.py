"""FastAPI main application."""

import logging
from typing import Any, Dict, List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field

from ..config.mountain_config import default_config
from ..config.settings import settings
from ..core.mountain_peaks import create, generate
from ..exceptions import ConfigError
from ..utils.random import new_seed


def configure_logging() -> None:
    """Configure structlog from settings."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()

logger = structlog.get_logger()

app = FastAPI(
    title="Mountain Peaks API",
    description="Procedural mountain peak silhouettes",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class PeaksRequest(BaseModel):
    """Request to generate a skyline."""

    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    config: Dict[str, Any] = Field(
        default_factory=dict, description="Partial configuration merged onto the defaults"
    )


class CoordinateModel(BaseModel):
    """One skyline vertex."""

    x: float
    y: float
    flatName: Optional[str] = None


class CoordinatesResponse(BaseModel):
    """Generated skyline coordinates."""

    seed: str
    count: int
    coordinates: List[CoordinateModel]


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Mountain Peaks API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/peaks/defaults")
async def get_defaults():
    """Default configuration that requests are merged onto."""
    return default_config()


# Generation is CPU-bound, so these handlers are plain functions run in the threadpool.
@app.post("/peaks/coordinates", response_model=CoordinatesResponse)
def generate_coordinates(request: PeaksRequest):
    """Generate skyline coordinates."""
    seed = request.seed or new_seed()
    logger.info("Skyline requested", seed=seed)

    try:
        coords = generate(request.config, seed=seed)
    except ConfigError as e:
        logger.warning("Rejected configuration", seed=seed, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return CoordinatesResponse(
        seed=seed,
        count=len(coords),
        coordinates=[CoordinateModel(**coord.to_dict()) for coord in coords],
    )


@app.post("/peaks/svg")
def generate_svg(request: PeaksRequest):
    """Generate a rendered SVG silhouette."""
    seed = request.seed or new_seed()
    logger.info("Silhouette requested", seed=seed)

    try:
        peaks = create(request.config, seed=seed)
    except ConfigError as e:
        logger.warning("Rejected configuration", seed=seed, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return Response(
        content=peaks.to_svg(),
        media_type="image/svg+xml",
        headers={"X-Peaks-Seed": seed},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
