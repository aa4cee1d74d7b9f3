import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import settings
from blog.database import Base, engine
from blog.exception_handlers import register_exception_handlers
from blog.middleware.logging import StructuredLoggingMiddleware, configure_logging
from blog.routes import auth, category, posts

configure_logging(settings.log_level, json_format=settings.log_json, debug=settings.debug)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Tasks to run at application startup and shutdown."""
    logger.info("Starting %s in %s mode", settings.app_name, settings.environment)
    if settings.debug:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created (if not existing).")
    yield
    logger.info("Shutting down the application...")
    await engine.dispose()


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Multilingual blog backend with per-locale translations and SEO metadata",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(auth.router, prefix=settings.api_prefix, tags=["Auth"])
    app.include_router(posts.router, prefix=settings.api_prefix, tags=["Posts"])
    app.include_router(category.router, prefix=settings.api_prefix, tags=["Categories"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
