"""Main FastAPI application for Workflow Board."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_config
from .models.database import init_db, close_db
from .utils.logging import setup_logging
from .routers import columns_router, workflows_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    config = load_config()
    setup_logging()
    logger.info("Starting Workflow Board...")

    await init_db()
    logger.info("Database initialized")

    logger.info(f"Server: {config.server.host}:{config.server.port}")
    logger.info(f"Debug mode: {config.server.debug}")
    logger.info(f"Column/status sync: {'enabled' if config.sync.enabled else 'disabled'}")

    yield

    # Shutdown
    logger.info("Shutting down Workflow Board...")
    await close_db()


app = FastAPI(
    title="Workflow Board",
    description="Custom board columns kept in step with workflow statuses",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware (for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=load_config().server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(columns_router)
app.include_router(workflows_router)


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "workflow-board"}


if __name__ == "__main__":
    import uvicorn

    config = load_config()
    uvicorn.run(
        "workflow_board.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )
