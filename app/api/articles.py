# app/api/articles.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.deps import ADMIN_KEY_HEADER, ensure_admin_key, get_repository, require_admin_key
from app.db.articles_repo import ArticleRepository
from app.services import articles as svc
from app.services.errors import ArticleServiceError

router = APIRouter(prefix="/articles", tags=["articles"])
logger = logging.getLogger("app.articles.api")

INVALID_REQUEST = "Invalid request data"


def success(status_code: int = 200, **payload: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder({"success": True, **payload}))


def failure(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _action_matches(payload: Optional[Dict[str, Any]], action: str) -> bool:
    return isinstance(payload, dict) and payload.get("action") == action


# -----------------------
#  Reads: ?action=get | get_all | filters | stats
# -----------------------

@router.get("", summary="Published articles, admin listing, filter options or statistics")
async def read_articles(
    action: str = Query("get"),
    x_admin_key: Optional[str] = Header(default=None, alias=ADMIN_KEY_HEADER),
    repo: ArticleRepository = Depends(get_repository),
):
    """
    Unknown actions fall back to the published listing.
    get_all and stats are admin reads and honour ADMIN_API_KEY when it is set.
    """
    if action in ("get_all", "stats"):
        ensure_admin_key(x_admin_key)

    try:
        if action == "get_all":
            return success(articles=await svc.list_all(repo))
        if action == "filters":
            options = await svc.list_filter_values(repo)
            return success(regions=options.regions, languages=options.languages)
        if action == "stats":
            stats = await svc.get_statistics(repo)
            return success(**stats.model_dump())
        return success(articles=await svc.list_published(repo))
    except SQLAlchemyError:
        logger.exception("Article read failed", extra={"event": "articles_read_failed", "action": action})
        if action == "filters":
            return failure("Failed to fetch filter options", 500)
        if action == "stats":
            return failure("Failed to fetch statistics", 500)
        return failure("Failed to fetch articles", 500)


# -----------------------
#  Mutations: the body carries the action name
# -----------------------

@router.post("", dependencies=[Depends(require_admin_key)], summary="Create an article")
async def create_article(
    payload: Optional[Dict[str, Any]] = Body(None),
    repo: ArticleRepository = Depends(get_repository),
):
    if not _action_matches(payload, "create"):
        return failure(INVALID_REQUEST)
    try:
        new_id = await svc.create_article(repo, payload)
    except ArticleServiceError as e:
        return failure(e.message)
    except SQLAlchemyError:
        logger.exception("Article create failed", extra={"event": "article_create_failed"})
        return failure("Failed to create article", 500)
    return success(message="Article created successfully", id=new_id)


@router.put("", dependencies=[Depends(require_admin_key)], summary="Update an article")
async def update_article(
    payload: Optional[Dict[str, Any]] = Body(None),
    repo: ArticleRepository = Depends(get_repository),
):
    if not _action_matches(payload, "update"):
        return failure(INVALID_REQUEST)
    try:
        await svc.update_article(repo, payload)
    except ArticleServiceError as e:
        return failure(e.message)
    except SQLAlchemyError:
        logger.exception("Article update failed", extra={"event": "article_update_failed"})
        return failure("Failed to update article", 500)
    return success(message="Article updated successfully")


@router.delete("", dependencies=[Depends(require_admin_key)], summary="Delete an article")
async def delete_article(
    payload: Optional[Dict[str, Any]] = Body(None),
    repo: ArticleRepository = Depends(get_repository),
):
    if not _action_matches(payload, "delete"):
        return failure(INVALID_REQUEST)
    try:
        await svc.delete_article(repo, payload)
    except ArticleServiceError as e:
        return failure(e.message)
    except SQLAlchemyError:
        logger.exception("Article delete failed", extra={"event": "article_delete_failed"})
        return failure("Failed to delete article", 500)
    return success(message="Article deleted successfully")
