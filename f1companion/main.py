import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from f1companion.core import config
from f1companion.core.errors import ConflictError, DomainError
from f1companion.routers.catalog import router as catalog_router
from f1companion.routers.leagues import router as leagues_router
from f1companion.routers.me import router as me_router
from f1companion.routers.teams import router as teams_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="F1 Companion API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def problem(
    request: Request,
    status: int,
    title: str,
    detail: str,
    errors: dict[str, str] | None = None,
) -> JSONResponse:
    """RFC 7807 problem body; ``errors`` is the field-level extension member."""
    content = {
        "type": "about:blank",
        "title": title,
        "status": status,
        "detail": detail,
        "instance": request.url.path,
    }
    if errors:
        content["errors"] = errors
    return JSONResponse(
        status_code=status,
        media_type="application/problem+json",
        content=content,
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    if exc.status_code >= 500:
        logger.error("Domain error on %s: %s", request.url.path, exc.detail)
    return problem(request, exc.status_code, exc.title, exc.detail, exc.errors)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # a unique constraint caught a race no service anticipated
    logger.warning("Integrity error on %s: %s", request.url.path, exc.orig)
    return problem(
        request,
        ConflictError.status_code,
        ConflictError.title,
        "The request conflicts with the current state of the resource.",
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return problem(
        request, 500, "Internal Server Error", "An unexpected error occurred."
    )


app.include_router(catalog_router, prefix="/api")
app.include_router(me_router, prefix="/api")
app.include_router(teams_router, prefix="/api")
app.include_router(leagues_router, prefix="/api")


@app.get("/health")
async def health():
    return {"status": "ok"}
