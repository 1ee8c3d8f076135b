import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fambul_tik.core.config import settings
from fambul_tik.core.db import SessionLocal, engine
from fambul_tik.core.logging import configure_logging
from fambul_tik.models.base import Base
from fambul_tik.models import entities  # noqa: F401
from fambul_tik.routers import health, members, relationship_types, relationships
from fambul_tik.services.errors import ConsistencyError, FamilyGraphError, NotFoundError, ValidationError
from fambul_tik.services.relationship_types import seed_relationship_types

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if settings.auto_create_schema:
        Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_relationship_types(db, settings.relationship_type_names)
    finally:
        db.close()
    logger.info("fambul tik api started (env=%s)", settings.app_env)
    yield


app = FastAPI(
    title="Fambul Tik API",
    version="1.0.0",
    description="API for family members, relationship types and the relationships between members.",
    root_path=settings.root_path,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, exc: FamilyGraphError) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "field": exc.field})


@app.exception_handler(ValidationError)
def handle_validation_error(request: Request, exc: ValidationError):
    return _error_response(400, exc)


@app.exception_handler(NotFoundError)
def handle_not_found(request: Request, exc: NotFoundError):
    return _error_response(404, exc)


@app.exception_handler(ConsistencyError)
def handle_consistency_error(request: Request, exc: ConsistencyError):
    logger.error("consistency fault on %s %s: %s", request.method, request.url.path, exc.message)
    return _error_response(500, exc)


app.include_router(health.router)
app.include_router(members.router)
app.include_router(relationship_types.router)
app.include_router(relationships.router)
