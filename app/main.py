from contextlib import asynccontextmanager

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app import config
from app.api import articles
from app.core.deps import ADMIN_KEY_HEADER, AdminKeyError
from app.db import sa as db_sa
from app.db.articles_repo import ArticleRepository
from app.services import articles as svc


logger = logging.getLogger("app")


async def prepare_database() -> None:
    """Create the articles table and indexes if missing, then seed an empty table."""
    await db_sa.create_tables()
    if not config.SEED_SAMPLE_DATA:
        return
    async with db_sa.session_scope() as session:
        await svc.seed_sample_articles(ArticleRepository(session))


@asynccontextmanager
async def lifespan(app: FastAPI):
    await db_sa.init_sa_engine()
    try:
        await prepare_database()
    except SQLAlchemyError:
        logger.exception("Database preparation failed", extra={"event": "db_prepare_failed"})
    if not config.ADMIN_API_KEY:
        logger.warning(
            "ADMIN_API_KEY is not set; admin endpoints are unauthenticated",
            extra={"event": "admin_key_missing"},
        )
    try:
        yield
    finally:
        await db_sa.close_sa_engine()


app = FastAPI(
    title="Newsdesk Articles Service",
    lifespan=lifespan,
    root_path=config.ROOT_PATH,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", ADMIN_KEY_HEADER],
)

app.include_router(articles.router)


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"success": False, "message": articles.INVALID_REQUEST})


@app.exception_handler(AdminKeyError)
async def admin_key_handler(request: Request, exc: AdminKeyError):
    return JSONResponse(status_code=401, content={"success": False, "message": "Unauthorized"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"event": "unhandled_error", "path": request.url.path})
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})


@app.get("/health")
async def health():
    return {"status": "ok"}


# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
