# app/main.py
"""
FastAPI application entry point.
Includes request logging middleware, the global error handler, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.routers import plates, health
from app.database import create_tables
from app.config import settings
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Plate Registry API",
    description="Register vehicle plates and query their payment status.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (allow dashboards on the same LAN to call the API) ──────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(plates.router, prefix="/api/v1", tags=["🚗 Plates"])
app.include_router(health.router, prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Plate Registry starting up...")
    create_tables()
    logger.info(f"✅ Database tables ready (collection '{settings.PLATES_COLLECTION}')")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Plate Registry shutting down...")
