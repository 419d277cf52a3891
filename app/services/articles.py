from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from app.config import ARTICLE_CREATE_STATUS
from app.db.articles_repo import ArticleRepository
from app.db.seed import SAMPLE_ARTICLES
from app.models.article_models import STATUS_VALUES, ArticleStatus
from app.models.schemas import AdminArticle, ArticleStatistics, FilterOptions, PublicArticle
from app.services.errors import ArticleNotFoundError, ArticleValidationError
from app.services.validation import REQUIRED_MESSAGE, parse_article_id, validate_article_fields


logger = logging.getLogger("app.articles")

FEATURED_COUNT = 3


def _create_status() -> str:
    if ARTICLE_CREATE_STATUS in STATUS_VALUES:
        return ARTICLE_CREATE_STATUS
    logger.warning(
        "Unknown create status configured, using published",
        extra={"event": "create_status_invalid", "status": ARTICLE_CREATE_STATUS},
    )
    return ArticleStatus.PUBLISHED.value


async def list_published(repo: ArticleRepository) -> List[PublicArticle]:
    rows = await repo.fetch_published()
    articles = []
    for index, row in enumerate(rows):
        article = PublicArticle.model_validate(row)
        article.featured = index < FEATURED_COUNT
        articles.append(article)
    return articles


async def list_all(repo: ArticleRepository) -> List[AdminArticle]:
    rows = await repo.fetch_all()
    return [AdminArticle.model_validate(row) for row in rows]


async def list_filter_values(repo: ArticleRepository) -> FilterOptions:
    regions = await repo.distinct_values("region")
    languages = await repo.distinct_values("language")
    return FilterOptions(regions=regions, languages=languages)


async def create_article(repo: ArticleRepository, payload: Mapping[str, Any]) -> int:
    fields = validate_article_fields(payload)
    new_id = await repo.insert(fields, _create_status())
    logger.info("Article created", extra={"event": "article_created", "article_id": new_id})
    return new_id


async def update_article(repo: ArticleRepository, payload: Mapping[str, Any]) -> int:
    article_id = parse_article_id(payload.get("id"))
    if article_id is None:
        raise ArticleValidationError(REQUIRED_MESSAGE, fields=["id"])
    fields = validate_article_fields(payload)
    if await repo.update(article_id, fields) == 0:
        raise ArticleNotFoundError("Article not found or no changes made")
    logger.info("Article updated", extra={"event": "article_updated", "article_id": article_id})
    return article_id


async def delete_article(repo: ArticleRepository, payload: Mapping[str, Any]) -> int:
    article_id = parse_article_id(payload.get("id"))
    if article_id is None:
        raise ArticleValidationError("Article ID is required", fields=["id"])
    if await repo.delete(article_id) == 0:
        raise ArticleNotFoundError("Article not found")
    logger.info("Article deleted", extra={"event": "article_deleted", "article_id": article_id})
    return article_id


async def get_statistics(repo: ArticleRepository) -> ArticleStatistics:
    counts = await repo.count_by_status()
    options = await list_filter_values(repo)
    by_status = {status: counts.get(status, 0) for status in STATUS_VALUES}
    return ArticleStatistics(
        total=sum(counts.values()),
        by_status=by_status,
        regions=len(options.regions),
        languages=len(options.languages),
    )


async def seed_sample_articles(repo: ArticleRepository, rows: Optional[List[dict]] = None) -> int:
    """Fill an empty table with the sample articles; returns how many rows were inserted."""
    if await repo.count() > 0:
        return 0
    inserted = await repo.insert_many(rows if rows is not None else SAMPLE_ARTICLES)
    logger.info("Sample articles inserted", extra={"event": "articles_seeded", "count": inserted})
    return inserted
