import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core import config
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging
from app.db.migrate import run_migrations
from app.db.session import Database
from app.middleware.logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


# ============================================
# ✅ FASTAPI APP FACTORY
# ============================================

def create_app(
    database: Optional[Database] = None,
    configure_logging: bool = True,
    create_tables: bool = True,
) -> FastAPI:
    """
    Build the API application.

    The Database client is created here (or injected by the caller) and its
    lifecycle is tied to the app lifespan: connected on startup, disposed on
    shutdown. Building the app has no side effects; logging and the database
    are only set up once the lifespan starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if configure_logging:
            setup_logging(config.LOG_LEVEL, config.LOG_DIR)

        database = app.state.database
        if config.RUN_MIGRATIONS:
            run_migrations(database.url)
        database.connect()
        if create_tables and not config.RUN_MIGRATIONS:
            database.create_all()
        logger.info("Interview Desk API started")

        try:
            yield
        finally:
            database.dispose()
            logger.info("Interview Desk API stopped")

    app = FastAPI(title="Interview Desk API", version="1.0.0", lifespan=lifespan)
    app.state.database = database or Database(config.DATABASE_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/")
    def root():
        return {"status": "Interview Desk API running"}

    return app


app = create_app()
