"""FastAPI app entry point for the Paint Damage Risk Analyzer."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from .api.routes import router
from .core.config import get_settings, validate_settings
from .core.dependencies import limiter
from .core.logging import log_error, log_request, log_response, logger, setup_logging
from .services.paint_data import get_paint_catalog

# Validate settings on startup
try:
    validate_settings()
except ValueError as e:
    logger.error(f"Configuration error: {e}")
    raise

settings = get_settings()
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - load the reference table once on startup."""
    logger.info("Starting Paint Damage Risk Analyzer API...")
    catalog = get_paint_catalog()
    if catalog.is_empty:
        logger.warning("Paint reference table is empty; every vehicle will be unmatched")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Paint Damage Risk Analyzer API",
    description="Paint damage risk scoring and vehicle autocomplete for the lead-gen wizard",
    version="1.0.0",
    lifespan=lifespan,
)

# State for limiter
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    log_error("Rate limit exceeded", client=get_remote_address(request))
    return JSONResponse(
        status_code=429, content={"detail": "Rate limit exceeded. Try again later."}
    )


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    log_request(request.method, request.url.path)

    response = await call_next(request)

    duration_ms = (time.time() - start) * 1000
    log_response(request.method, request.url.path, response.status_code, duration_ms)

    return response


# Routes
app.include_router(router, prefix="/api")


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "paint-damage-risk-analyzer",
        "paint_records": len(get_paint_catalog()),
    }
