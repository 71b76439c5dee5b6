"""
Hotel Ops Application

API behind the hotel operations dashboard: room-service cart and
checkout, booking quotes, authentication and dashboard data.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

from .core.config import settings
from .core.errors import (
    AuthError,
    GatewayError,
    LocalValidationError,
    NetworkError,
    ServerError,
    StaleResultError,
)
from .routes import auth_router, bookings_router, cart_router, dashboard_router
from .routes import deps

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _redirect_to_login(reason: str) -> None:
    logger.info(f"Session cleared ({reason}); clients must re-authenticate at {settings.login_url}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Hotel Ops starting up...")
    logger.info(f"Backend URL: {settings.supabase_url}")
    logger.info(f"API key configured: {settings.backend_configured}")

    session_state = deps.get_session_state()
    session_state.add_teardown_listener(_redirect_to_login)
    if session_state.is_authenticated:
        logger.info(f"Restored session for user {session_state.user_id}")

    yield

    logger.info("Hotel Ops shutting down...")
    session_state.remove_teardown_listener(_redirect_to_login)
    if deps.backend:
        await deps.backend.close()
        deps.backend = None


# Create FastAPI app
app = FastAPI(
    title="Hotel Ops",
    description="Hotel operations dashboard API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(cart_router)
app.include_router(bookings_router)
app.include_router(auth_router)
app.include_router(dashboard_router)


@app.exception_handler(LocalValidationError)
async def local_validation_handler(request: Request, exc: LocalValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    if isinstance(exc, AuthError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "redirect": settings.login_url},
        )
    if isinstance(exc, ServerError):
        status_code = 502
    elif isinstance(exc, NetworkError):
        status_code = 503
    else:
        status_code = exc.status_code if exc.status_code and exc.status_code < 500 else 400
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.exception_handler(StaleResultError)
async def stale_result_handler(request: Request, exc: StaleResultError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "hotel-ops",
        "backend_configured": settings.backend_configured,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hotel_ops.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
