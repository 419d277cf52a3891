from __future__ import annotations

from datetime import date
from typing import Optional

from newsdesk_webapp.app.api_client import ApiError, MutationResult
from newsdesk_webapp.app.models import Article, ArticleDraft, FilterOptions


def make_article(
    id: int,
    title: str = "",
    content: str = "",
    region: str = "National",
    language: str = "English",
    *,
    featured: bool = False,
    status: Optional[str] = "published",
    day: date = date(2024, 1, 10),
) -> Article:
    return Article(
        id=id,
        title=title or f"Article {id}",
        content=content or f"Body of article {id}",
        region=region,
        language=language,
        date=day,
        status=status,
        featured=featured,
    )


class FakeClient:
    """Stands in for ArticlesClient; set `fail` to make every read raise."""

    def __init__(self, articles: Optional[list[Article]] = None, options: Optional[FilterOptions] = None) -> None:
        self.articles = list(articles or [])
        self.options = options or FilterOptions(regions=["National", "Telangana"], languages=["English", "Hindi"])
        self.fail = False
        self.fail_filters = False
        self.next_result: Optional[MutationResult] = None
        self.calls: list[tuple] = []

    def _read(self, name: str):
        self.calls.append((name,))
        if self.fail:
            raise ApiError("Network error: refused")
        return list(self.articles)

    def get_published(self) -> list[Article]:
        return self._read("get_published")

    def get_all(self) -> list[Article]:
        return self._read("get_all")

    def get_filters(self) -> FilterOptions:
        self.calls.append(("get_filters",))
        if self.fail or self.fail_filters:
            raise ApiError("Network error: refused")
        return self.options

    def _result(self, default: MutationResult) -> MutationResult:
        if self.next_result is not None:
            result, self.next_result = self.next_result, None
            return result
        return default

    def create(self, draft: ArticleDraft) -> MutationResult:
        self.calls.append(("create", draft))
        new_id = max((a.id for a in self.articles), default=0) + 1
        result = self._result(MutationResult(True, "Article created successfully", new_id))
        if result.success:
            p = draft.to_payload()
            self.articles.insert(
                0,
                Article(new_id, p["title"], p["content"], p["region"], p["language"], date.fromisoformat(p["date"])),
            )
        return result

    def update(self, article_id: int, draft: ArticleDraft) -> MutationResult:
        self.calls.append(("update", article_id, draft))
        return self._result(MutationResult(True, "Article updated successfully"))

    def delete(self, article_id: int) -> MutationResult:
        self.calls.append(("delete", article_id))
        result = self._result(MutationResult(True, "Article deleted successfully"))
        if result.success:
            self.articles = [a for a in self.articles if a.id != article_id]
        return result

    def mutations(self) -> list[tuple]:
        return [c for c in self.calls if c[0] in ("create", "update", "delete")]
