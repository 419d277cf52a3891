from __future__ import annotations

from typing import Any, Dict, List, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.article_models import Article, ArticleStatus
from app.models.schemas import ArticleFields


class ArticleRepository:
    """Single-statement access to the articles table; each mutation commits on its own."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def fetch_published(self) -> List[Article]:
        stmt = (
            select(Article)
            .where(Article.status == ArticleStatus.PUBLISHED.value)
            .order_by(Article.created_at.desc(), Article.id.desc())
        )
        res = await self.session.execute(stmt)
        return list(res.scalars().all())

    async def fetch_all(self) -> List[Article]:
        stmt = select(Article).order_by(Article.created_at.desc(), Article.id.desc())
        res = await self.session.execute(stmt)
        return list(res.scalars().all())

    async def distinct_values(self, column_name: str) -> List[str]:
        if column_name not in ("region", "language"):
            raise ValueError(f"Unsupported filter column: {column_name}")
        column = getattr(Article, column_name)
        stmt = select(column).where(column.is_not(None)).distinct().order_by(column)
        res = await self.session.execute(stmt)
        return [str(v) for v in res.scalars().all()]

    async def insert(self, fields: ArticleFields, status: str) -> int:
        stmt = (
            insert(Article)
            .values(**fields.model_dump(), status=status)
            .returning(Article.id)
        )
        res = await self.session.execute(stmt)
        new_id = res.scalar_one()
        await self.session.commit()
        return int(new_id)

    async def update(self, article_id: int, fields: ArticleFields) -> int:
        stmt = (
            update(Article)
            .where(Article.id == article_id)
            .values(**fields.model_dump(), updated_at=func.now())
        )
        res = await self.session.execute(stmt)
        await self.session.commit()
        return res.rowcount or 0

    async def delete(self, article_id: int) -> int:
        res = await self.session.execute(delete(Article).where(Article.id == article_id))
        await self.session.commit()
        return res.rowcount or 0

    async def count(self) -> int:
        res = await self.session.execute(select(func.count()).select_from(Article))
        return int(res.scalar_one())

    async def count_by_status(self) -> Dict[str, int]:
        stmt = select(Article.status, func.count()).group_by(Article.status)
        res = await self.session.execute(stmt)
        return {status: int(n) for status, n in res.all()}

    async def insert_many(self, rows: Sequence[Dict[str, Any]]) -> int:
        if not rows:
            return 0
        await self.session.execute(insert(Article), list(rows))
        await self.session.commit()
        return len(rows)
