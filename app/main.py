import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.books import router as books_router
from app.api.users import router as users_router
from app.config import Settings, get_settings
from app.db.engine import AppContext
from app.exceptions import UsersApiError, users_api_exception_handler

logger = logging.getLogger(__name__)

# Swagger UI pulls its bundle from a CDN, which a same-origin script policy blocks
_DOCS_PATHS = ("/docs", "/redoc")


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = AppContext(settings)
        context.open()
        app.state.context = context
        logger.info("Users API started")
        try:
            yield
        finally:
            context.close()
            logger.info("Users API stopped")

    app = FastAPI(
        title="Users REST API",
        description="CRUD operations over users, plus a static book list.",
        version="0.1.0",
        docs_url="/docs",
        lifespan=lifespan,
    )

    @app.get("/health", tags=["health"])
    def health_check():
        return {"status": "ok"}

    app.include_router(books_router)
    app.include_router(users_router)

    app.add_exception_handler(UsersApiError, users_api_exception_handler)

    if settings.cors_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins_list,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if settings.SECURITY_HEADERS:
        policy = settings.CONTENT_SECURITY_POLICY

        @app.middleware("http")
        async def content_security_policy(request: Request, call_next):
            response = await call_next(request)
            if not request.url.path.startswith(_DOCS_PATHS):
                response.headers["Content-Security-Policy"] = policy
            return response

    # Mounted last so API routes win over files of the same name
    if settings.SERVE_STATIC:
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app


app = create_app()
