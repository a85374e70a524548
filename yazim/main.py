"""
Main FastAPI application for the Turkish spell-check service.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from yazim import __version__
from yazim.config import settings
from yazim.routes import health, spellcheck
from yazim.middleware.logging import RequestLoggingMiddleware
from yazim.services.personal_dictionary import PersonalDictionaryStore
from yazim.utils.logger import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting Turkish spell-check service")
    logger.info(f"Environment: {'DEBUG' if settings.DEBUG else 'PRODUCTION'}")
    logger.info(f"Log level: {settings.LOG_LEVEL}")

    app.state.personal_store = PersonalDictionaryStore()
    app.state.spellcheck_service = None

    # Load dictionary (optional - graceful degradation, spell-check routes answer 503)
    if settings.SPELLCHECK_ENABLED:
        from yazim.services.spellcheck import create_turkish_spellcheck_service
        try:
            app.state.spellcheck_service = await create_turkish_spellcheck_service(
                store=app.state.personal_store
            )
            if app.state.spellcheck_service is not None:
                logger.info("Turkish spell-check service initialized")
            else:
                logger.warning("Turkish spell-check service failed to initialize (spell-check disabled)")
        except Exception as e:
            logger.warning(f"Spell-check initialization error (disabled): {e}", exc_info=True)
    else:
        logger.info("Spell-check service disabled via configuration")

    yield

    # Shutdown
    logger.info("Shutting down Turkish spell-check service")
    app.state.spellcheck_service = None


# Create FastAPI application
app = FastAPI(
    title="Yazım - Turkish Spell-Check Service",
    description="Spelling validation and ranked suggestions for Turkish text",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(
    spellcheck.router,
    prefix="/api/v1",
    tags=["Spell-check"]
)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with service pointers."""
    return {
        "message": "Turkish spell-check service",
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "yazim.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
