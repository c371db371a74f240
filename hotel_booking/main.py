from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hotel_booking.api.v1.router import router as api_v1_router
from hotel_booking.config.settings import settings
from hotel_booking.core.error_handlers import register_exception_handlers
from hotel_booking.core.logging import setup_logging
from hotel_booking.core.middleware import register_middlewares
from hotel_booking.db.init_db import init_db


def create_app(create_schema: bool = True) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under /api/v1.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    if settings.STORAGE_PROVIDER == "local":
        app.mount(
            settings.UPLOAD_URL_PREFIX,
            StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
            name="uploads",
        )

    if create_schema:
        # For production, manage the schema with migrations instead
        @app.on_event("startup")
        def on_startup() -> None:
            init_db()

    return app


app = create_app()


def run() -> None:
    uvicorn.run("hotel_booking.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
