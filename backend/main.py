"""Wirelib backend: FastAPI application entry point."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.routes import ampacity, compatibility, library

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    # Load catalogs on startup
    from wirelib.protocol_library import ProtocolLibrary
    from wirelib.cable_library import CableLibrary
    app.state.protocol_library = ProtocolLibrary()
    app.state.cable_library = CableLibrary()
    logger.info(
        "Loaded %d protocols and %d cables",
        app.state.protocol_library.count,
        app.state.cable_library.count,
    )
    yield


app = FastAPI(
    title="Wirelib API",
    description="Industrial protocol and cable reference library",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: allow frontend origins
_frontend_url = os.getenv("FRONTEND_URL")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[_frontend_url] if _frontend_url else [],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route modules
app.include_router(library.router, prefix="/api", tags=["Library"])
app.include_router(compatibility.router, prefix="/api", tags=["Compatibility"])
app.include_router(ampacity.router, prefix="/api", tags=["Ampacity"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "wirelib-backend"}
