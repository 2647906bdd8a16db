import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Base, Settings, build_engine, build_session_factory, settings
from app.core.exceptions import register_exception_handlers
from app.api.routers import daily_goals, dance_stats, weights
from app import models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the API; the engine lives and dies with the application."""
    app_settings = app_settings or settings

    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # =================================================================
    # DATABASE LIFECYCLE
    # =================================================================

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(app_settings.DATABASE_URL)
        Base.metadata.create_all(bind=engine)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info("Database ready")
        try:
            yield
        finally:
            engine.dispose()

    # =================================================================
    # CREATE APP
    # =================================================================

    app = FastAPI(
        title=app_settings.APP_NAME,
        debug=app_settings.DEBUG,
        description="Dance Fitness Progress API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    # =================================================================
    # CORS MIDDLEWARE
    # =================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )
    logger.info("CORS allowed origins: %s", app_settings.CORS_ORIGINS)

    register_exception_handlers(app)

    # =================================================================
    # HEALTH CHECK
    # =================================================================

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # =================================================================
    # ROUTES
    # =================================================================

    app.include_router(dance_stats.router)
    app.include_router(daily_goals.router)
    app.include_router(weights.router)

    @app.get("/")
    def root():
        """API root endpoint."""
        return {
            "message": f"Welcome to {app_settings.APP_NAME}",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "dance_stats": "/dance-stats",
                "daily_goals": "/daily-goals",
                "weights": "/weights",
            },
        }

    return app


app = create_app()
