"""
FastAPI app assembly: logging, middleware, error handling and router wiring.
"""
import logging
import os

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("medvault.api")
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from medvault.api.profile import router as profile_router
from medvault.api.record_kinds import RECORD_KINDS
from medvault.api.records import build_record_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Medical Records Service",
    description="Owner-scoped procedures for managing a user's medical profile and records.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]


def _cors_origins() -> list:
    extra = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
    return DEFAULT_ORIGINS + [o for o in extra if o not in DEFAULT_ORIGINS]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def handle_store_failure(request: Request, exc: SQLAlchemyError):
    logger.error("store_failure: path=%s error=%s", request.url.path, type(exc).__name__, exc_info=exc)
    return JSONResponse({"detail": "Internal server error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


app.include_router(profile_router)
for kind in RECORD_KINDS:
    app.include_router(build_record_router(kind))


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "medvault"}
