"""
Waste Alert Hub - FastAPI Application Entry Point

Citizens report geotagged waste ("alerts"); administrators triage them,
send follow-up forms and chat with the reporter. Both sides receive
in-app notifications.

DESIGN PRINCIPLES:
- One in-process record store, persisted on every mutation
- Services own the lifecycle rules, routes stay thin
- Notification fan-out is derived from state transitions, synchronously
- Demo-grade auth: no token verification
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.errors import PersistenceUnavailable, WasteAlertError
from app.core.settings import settings
from app.config.store import initialize_store
from app.routes import alerts, auth, forms, health, messages, notifications
from app.services import reset_services


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Citizen waste reporting with admin triage, follow-up forms, chat and notifications",
    debug=settings.DEBUG
)


@app.exception_handler(WasteAlertError)
async def domain_exception_handler(request: Request, exc: WasteAlertError):
    """Map domain errors (not found, validation, persistence) to their HTTP status."""
    if isinstance(exc, PersistenceUnavailable):
        logger.error(f"{request.method} {request.url.path} - persistence unavailable: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Global exception handler to catch ALL other exceptions
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions and log them with full traceback."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Internal server error: {str(exc)}"}
    )


# Pydantic validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log request validation errors before returning them."""
    logger.info(f"{request.method} {request.url.path} - validation errors: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors())}
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Application lifecycle events
@app.on_event("startup")
async def startup_event():
    """
    Load the record store before serving requests.
    A store that cannot be read is fatal.
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    store = initialize_store()
    reset_services()
    logger.info(f"Record store ready ({store.describe()})")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Shutting down {settings.APP_NAME}")


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(alerts.router)
app.include_router(forms.router)
app.include_router(messages.router)
app.include_router(notifications.router)


# Root endpoint
@app.get("/")
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "alerts": "/api/alerts"
    }
