"""
FastAPI main application for the Portfolio Backend API.
Serves portfolio sections and the LinkedIn CSV importer.
"""

import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from common import constants, logger, storage
from api.routes import auth, linkedin, portfolio
from api.routes.schema import HealthResponse

START_TIME = time.monotonic()

configured_origins = constants.get_allowed_origins()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and make sure every section file exists before serving."""
    logger.setup_root_logger()
    startup_logger = logger.get_structured_logger("startup", "api_startup")

    created = storage.initialize_data_directory()
    logger.log_structured_event(
        startup_logger,
        "api_started",
        {
            "data_dir": str(constants.get_data_dir()),
            "data_dir_created": created,
            "allowed_origins": configured_origins,
            "environment": constants.get_environment()
        },
        f"Portfolio Backend API started with CORS origins: {configured_origins}"
    )
    yield


# Create FastAPI application
app = FastAPI(
    title=constants.API_CONFIG["title"],
    description=constants.API_CONFIG["description"],
    version=constants.API_CONFIG["version"],
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=configured_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(portfolio.router)
app.include_router(linkedin.router)


@app.get("/")
async def root():
    """Root endpoint providing API information."""
    return {
        "message": constants.API_CONFIG["title"],
        "version": constants.API_CONFIG["version"],
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - START_TIME, 3),
        environment=constants.get_environment()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
