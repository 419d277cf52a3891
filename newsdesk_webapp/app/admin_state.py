from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Optional

from newsdesk_webapp.app.api_client import ApiError, ArticlesClient, MutationResult
from newsdesk_webapp.app.models import Article, ArticleDraft, FilterOptions
from newsdesk_webapp.app.notifications import Notifier
from newsdesk_webapp.app.samples import default_admin_filter_options, sample_admin_articles
from newsdesk_webapp.app.validation import validate_draft


logger = logging.getLogger("newsdesk_webapp.admin")


@dataclass
class AdminStats:
    total: int = 0
    today: int = 0
    regions: int = 0
    languages: int = 0


def _local_day(value: datetime) -> date:
    # Naive timestamps are taken as already local
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def created_on(article: Article) -> Optional[date]:
    if article.created_at is not None:
        return _local_day(article.created_at)
    return article.date


def compute_stats(articles: list[Article], options: FilterOptions, *, today: Optional[date] = None) -> AdminStats:
    today = today or date.today()
    return AdminStats(
        total=len(articles),
        today=sum(1 for a in articles if created_on(a) == today),
        regions=len(options.regions),
        languages=len(options.languages),
    )


def matches_admin_search(article: Article, search: str) -> bool:
    term = search.strip().lower()
    if not term:
        return True
    haystacks = (article.title, article.content, article.region, article.language)
    return any(term in h.lower() for h in haystacks)


@dataclass
class AdminState:
    articles: list[Article] = field(default_factory=list)
    options: FilterOptions = field(default_factory=FilterOptions)
    search: str = ""
    editing_id: Optional[int] = None
    form_errors: dict[str, str] = field(default_factory=dict)
    stats: AdminStats = field(default_factory=AdminStats)
    using_samples: bool = False
    busy: bool = False

    @property
    def regions(self) -> list[str]:
        return self.options.regions

    @property
    def languages(self) -> list[str]:
        return self.options.languages

    @property
    def visible(self) -> list[Article]:
        return [a for a in self.articles if matches_admin_search(a, self.search)]

    @property
    def editing(self) -> Optional[Article]:
        if self.editing_id is None:
            return None
        return next((a for a in self.articles if a.id == self.editing_id), None)


class AdminController:
    """
    CRUD workflow for the admin panel.

    Mutations validate locally first, then call the API, then reload the list,
    filter options and statistics from the server. Local state is never patched
    from a mutation result.
    """

    def __init__(
        self,
        client: ArticlesClient,
        notifier: Optional[Notifier] = None,
        *,
        on_change: Optional[Callable[[AdminState], None]] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.client = client
        self.notifier = notifier or Notifier()
        self.state = AdminState()
        self.on_change = on_change
        self._today = today or date.today

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)

    # --- Loading ---
    def load(self) -> None:
        try:
            self.state.articles = self.client.get_all()
            self.state.using_samples = False
        except ApiError as e:
            logger.warning("Falling back to sample articles: %s", e.message)
            self.state.articles = sample_admin_articles()
            self.state.using_samples = True
            self.notifier.warning("Using sample data. Check your API connection.")
        try:
            self.state.options = self.client.get_filters()
        except ApiError as e:
            logger.warning("Falling back to default filter options: %s", e.message)
            self.state.options = default_admin_filter_options()
        if self.state.editing_id is not None and self.state.editing is None:
            self.state.editing_id = None
        self.recompute_stats()

    def recompute_stats(self) -> None:
        self.state.stats = compute_stats(self.state.articles, self.state.options, today=self._today())
        self._changed()

    def set_search(self, text: str) -> None:
        self.state.search = text or ""
        self._changed()

    # --- Editing ---
    def begin_edit(self, article_id: int) -> Optional[ArticleDraft]:
        article = next((a for a in self.state.articles if a.id == article_id), None)
        if article is None:
            self.notifier.error("Article not found")
            return None
        self.state.editing_id = article_id
        self.state.form_errors = {}
        self._changed()
        return ArticleDraft.from_article(article)

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self.state.form_errors = {}
        self._changed()

    # --- Mutations ---
    def _check(self, draft: ArticleDraft) -> bool:
        errors = validate_draft(draft, today=self._today())
        self.state.form_errors = errors
        if errors:
            self._changed()
            return False
        return True

    def _finish(self, result: MutationResult, fallback: str) -> bool:
        if not result.success:
            self.notifier.error(result.message or fallback)
            self._changed()
            return False
        self.notifier.success(result.message or fallback)
        self.load()
        return True

    def create(self, draft: ArticleDraft) -> bool:
        if not self._check(draft):
            return False
        try:
            result = self.client.create(draft)
        except ApiError as e:
            logger.warning("Create failed: %s", e.message)
            self.notifier.error("Error creating article")
            return False
        if result.success:
            logger.info("Created article id=%s", result.id)
        return self._finish(result, "Article created successfully" if result.success else "Error creating article")

    def save_edit(self, draft: ArticleDraft) -> bool:
        if self.state.editing_id is None:
            self.notifier.error("No article selected for editing")
            return False
        if not self._check(draft):
            return False
        article_id = self.state.editing_id
        try:
            result = self.client.update(article_id, draft)
        except ApiError as e:
            logger.warning("Update failed for id=%s: %s", article_id, e.message)
            self.notifier.error("Error updating article")
            return False
        if result.success:
            self.state.editing_id = None
            self.state.form_errors = {}
        return self._finish(result, "Article updated successfully" if result.success else "Error updating article")

    def delete(self, article_id: int) -> bool:
        try:
            result = self.client.delete(article_id)
        except ApiError as e:
            logger.warning("Delete failed for id=%s: %s", article_id, e.message)
            self.notifier.error("Error deleting article")
            return False
        if result.success and self.state.editing_id == article_id:
            self.state.editing_id = None
        return self._finish(result, "Article deleted successfully" if result.success else "Error deleting article")
