from __future__ import annotations

import hmac
import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app import config
from app.db.articles_repo import ArticleRepository
from app.db.sa import get_session


logger = logging.getLogger("app.articles.deps")

ADMIN_KEY_HEADER = "X-Admin-Key"


class AdminKeyError(Exception):
    pass


async def get_repository(session: AsyncSession = Depends(get_session)) -> ArticleRepository:
    return ArticleRepository(session)


def ensure_admin_key(provided: Optional[str]) -> None:
    expected = config.ADMIN_API_KEY
    if not expected:
        return
    if not provided or not hmac.compare_digest(provided.encode(), expected.encode()):
        logger.warning(
            "Admin request rejected",
            extra={"event": "admin_key_rejected", "key_present": bool(provided)},
        )
        raise AdminKeyError("Unauthorized")


async def require_admin_key(
    x_admin_key: Optional[str] = Header(default=None, alias=ADMIN_KEY_HEADER),
) -> None:
    ensure_admin_key(x_admin_key)
