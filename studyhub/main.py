"""Study Hub backend - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from studyhub.core.config import Settings, get_settings
from studyhub.core.errors import register_error_handlers
from studyhub.core.logging import install_access_log, setup_logging
from studyhub.db.base import Base
from studyhub.db.session import build_engine, build_session_factory
from studyhub.routers import files, lessons, notes, progress, questions, reflections, xp

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Notes, files, questions, reflections, progress and XP for students",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_access_log(app, settings.uploads_url_prefix)
    register_error_handlers(app)

    # Uploaded files are served read-only
    settings.upload_path.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.uploads_url_prefix,
        StaticFiles(directory=settings.upload_path),
        name="uploads",
    )

    app.include_router(notes.router)
    app.include_router(files.router)
    app.include_router(xp.router)
    app.include_router(reflections.router)
    app.include_router(questions.router)
    app.include_router(progress.router)
    app.include_router(lessons.router)

    @app.get("/")
    async def root():
        return {"message": "Backend is running successfully!"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
