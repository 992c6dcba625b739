import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from children import router as children_router
from classrooms import router as classrooms_router
from core import metrics as core_metrics
from core.config import Settings
from core.db import Database
from core.errors import register_exception_handlers
from core.metrics import HttpMetrics, MetricsMiddleware
from daycares import router as daycares_router
from enrollments import router as enrollments_router
from parents import router as parents_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

OPENAPI_TAGS = [
    {"name": "Daycare", "description": "All endpoints related to daycare"},
    {"name": "Classroom", "description": "All endpoints related to classroom"},
    {"name": "Enrollment", "description": "All endpoints related to enrollments"},
    {"name": "Child", "description": "All endpoints related to children"},
    {"name": "Parent", "description": "All endpoints related to parents"},
    {"name": "Observability", "description": "Health and metrics"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Open the DB pool once per process.
    await app.state.db.connect()
    logger.info("daycare_api_started")
    try:
        yield
    finally:
        await app.state.db.close()


def create_app(
    settings: Settings | None = None,
    *,
    database: Database | None = None,
    metrics: HttpMetrics | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    if database is None:
        database = Database(
            settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            command_timeout=settings.command_timeout,
        )
    if metrics is None:
        metrics = HttpMetrics(prefix=settings.metrics_prefix)

    app = FastAPI(
        title="Daycare API",
        version="1.0.0",
        description="CRUD API for daycares, classrooms, parents, children and enrollments.",
        lifespan=lifespan,
        docs_url="/api",
        openapi_url="/api/openapi.json",
        redoc_url=None,
        openapi_tags=OPENAPI_TAGS,
        servers=[{"url": settings.server_url}],
    )
    app.state.settings = settings
    app.state.db = database
    app.state.metrics = metrics

    register_exception_handlers(app)
    app.add_middleware(MetricsMiddleware, metrics=metrics)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(daycares_router.router, tags=["Daycare"])
    app.include_router(classrooms_router.router, tags=["Classroom"])
    app.include_router(enrollments_router.router, tags=["Enrollment"])
    app.include_router(children_router.router, tags=["Child"])
    app.include_router(parents_router.router, tags=["Parent"])
    app.include_router(core_metrics.router, tags=["Observability"])

    @app.get("/health", tags=["Observability"], summary="Health check")
    def health() -> dict:
        return {"status": "UP"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
