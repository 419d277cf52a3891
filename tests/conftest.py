import itertools
from datetime import datetime, timedelta

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import app`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient

from app.models.article_models import Article


class InMemoryArticleRepository:
    """Stands in for ArticleRepository with the same ordering and rowcount semantics."""

    def __init__(self) -> None:
        self.rows: dict[int, Article] = {}
        self._ids = itertools.count(1)
        self._clock = datetime(2024, 1, 1, 9, 0, 0)

    def _now(self) -> datetime:
        # Strictly increasing so ordering by created_at is deterministic
        self._clock += timedelta(seconds=1)
        return self._clock

    def add(self, *, status: str = "published", **fields) -> Article:
        fields.setdefault("title", "Title")
        fields.setdefault("content", "Content")
        fields.setdefault("region", "National")
        fields.setdefault("language", "English")
        fields.setdefault("date", datetime(2024, 1, 1).date())
        now = self._now()
        row = Article(id=next(self._ids), status=status, created_at=now, updated_at=now, **fields)
        self.rows[row.id] = row
        return row

    def _ordered(self):
        return sorted(self.rows.values(), key=lambda r: (r.created_at, r.id), reverse=True)

    async def fetch_published(self):
        return [r for r in self._ordered() if r.status == "published"]

    async def fetch_all(self):
        return self._ordered()

    async def distinct_values(self, column_name):
        return sorted({getattr(r, column_name) for r in self.rows.values() if getattr(r, column_name) is not None})

    async def insert(self, fields, status):
        return self.add(status=status, **fields.model_dump()).id

    async def update(self, article_id, fields):
        row = self.rows.get(article_id)
        if row is None:
            return 0
        for key, value in fields.model_dump().items():
            setattr(row, key, value)
        row.updated_at = self._now()
        return 1

    async def delete(self, article_id):
        return 1 if self.rows.pop(article_id, None) is not None else 0

    async def count(self):
        return len(self.rows)

    async def count_by_status(self):
        counts: dict[str, int] = {}
        for row in self.rows.values():
            counts[row.status] = counts.get(row.status, 0) + 1
        return counts

    async def insert_many(self, rows):
        for row in rows:
            self.add(**row)
        return len(rows)


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def repo():
    return InMemoryArticleRepository()


@pytest.fixture()
def client(monkeypatch, repo):
    # Patch DB init/close in lifespan to no-op
    import app.db.sa as db_sa

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_sa, "init_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "close_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "create_tables", _noop)
    monkeypatch.setattr("app.config.SEED_SAMPLE_DATA", False)
    monkeypatch.setattr("app.config.ADMIN_API_KEY", "")

    from app.core import deps as core_deps
    from app import main as main_mod

    app = main_mod.app
    app.dependency_overrides[core_deps.get_repository] = lambda: repo

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
