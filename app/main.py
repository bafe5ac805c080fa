# app/main.py
# 兩個獨立服務：
#   uvicorn app.main:courses_app --port 7003
#   uvicorn app.main:enrollments_app --port 7001
import time
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings as default_settings
from app.database import create_engine_for, init_models, make_session_factory
from app.logging_config import setup_logging
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.routers import courses, enrollments
from app.utils.exceptions import register_exception_handlers


setup_logging()
logger = logging.getLogger("app")


def _install_common(app: FastAPI, settings: Settings, service_name: str):
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
            ms = int((time.time() - start) * 1000)
            logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
            return response
        except Exception:
            ms = int((time.time() - start) * 1000)
            logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
            raise

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/")
    def root():
        return {"message": f"{service_name} is running!"}


def create_courses_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine_for(settings.courses_database_url, echo=settings.SQL_ECHO)
        await init_models(engine, [Course.__table__])
        app.state.session_factory = make_session_factory(engine)
        logger.info("Courses service started")
        yield
        await engine.dispose()

    app = FastAPI(title="Courses Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    _install_common(app, settings, "Courses service")
    app.include_router(courses.router)
    return app


def create_enrollments_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    transport: 換掉 httpx 的連線層（測試時用 httpx.MockTransport 假裝遠端服務）
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine_for(settings.enrollments_database_url, echo=settings.SQL_ECHO)
        await init_models(engine, [Enrollment.__table__])
        app.state.session_factory = make_session_factory(engine)
        app.state.http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.REMOTE_TIMEOUT_SECONDS),
            transport=transport,
        )
        logger.info(
            "Enrollments service started (students=%s, courses=%s)",
            settings.STUDENTS_SERVICE_URL, settings.COURSES_SERVICE_URL,
        )
        yield
        await app.state.http_client.aclose()
        await engine.dispose()

    app = FastAPI(title="Enrollments Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    _install_common(app, settings, "Enrollments service")
    app.include_router(enrollments.router)
    return app


courses_app = create_courses_app()
enrollments_app = create_enrollments_app()
