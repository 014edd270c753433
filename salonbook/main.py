import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from .config import Settings, load_settings
from .database import create_db_engine, create_session_factory, init_db
from .domain.bookings.router import router as bookings_router
from .domain.catalog.router import router as services_router
from .domain.salons.router import admin_router as admin_salons_router
from .domain.salons.router import router as salons_router
from .errors import BookingError
from .services.notification_service import BookingNotifier
from .shared.clock import Clock, system_clock

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    notifier: Optional[BookingNotifier] = None,
    clock: Clock = system_clock,
) -> FastAPI:
    """Build the API; collaborators default to the ones configured from the environment"""
    settings = settings or load_settings()
    engine = engine or create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        try:
            init_db(engine)
            logger.info("Database tables created successfully")
        except Exception as e:
            # Another worker may have created them first
            error_msg = str(e)
            if "already exists" in error_msg or "duplicate key" in error_msg:
                logger.info("Database tables already exist (created by another worker)")
            else:
                logger.error(f"Failed to create database tables: {e}")
                raise
        yield
        logger.info("Application shutting down...")

    app = FastAPI(title="SalonBook API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = create_session_factory(engine)
    app.state.notifier = notifier or BookingNotifier(settings)
    app.state.clock = clock

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError):
        logger.warning(f"⚠️ {request.method} {request.url.path} - {exc.kind}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=422, content={"detail": exc.errors()})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"❌ {request.method} {request.url.path} - Error: {str(exc)}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # Log CORS configuration for debugging
    logger.info(f"CORS allowed origins: {settings.allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    app.include_router(salons_router)
    app.include_router(admin_salons_router)
    app.include_router(services_router)
    app.include_router(bookings_router)

    @app.get("/")
    def root():
        return {"message": "SalonBook API is running"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app
