"""
Artifact Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import artifacts, config, diff, panel
from services.config_manager import ConfigManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    logging.basicConfig(
        level=str(config_manager.get("logLevel", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting Artifact Diff Backend (config: %s)", config_manager.config_file)

    yield
    logger.info("Shutting down Artifact Diff Backend...")


app = FastAPI(
    title="Artifact Diff Backend",
    description="Version comparison backend for the artifact diff panel",
    version="1.0.0",
    lifespan=lifespan,
)

# The panel UI is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(artifacts.router, prefix="/api/artifacts", tags=["artifacts"])
app.include_router(panel.router, prefix="/api/panel", tags=["panel"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "artifact-diff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
