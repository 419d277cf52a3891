from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from newsdesk_webapp.app.api_client import ApiError, ArticlesClient
from newsdesk_webapp.app.config import settings
from newsdesk_webapp.app.debounce import Debouncer
from newsdesk_webapp.app.models import Article, FilterOptions
from newsdesk_webapp.app.notifications import Notifier
from newsdesk_webapp.app.samples import default_filter_options, sample_public_articles


logger = logging.getLogger("newsdesk_webapp.public")


def matches_public_filters(article: Article, search: str, region: str, language: str) -> bool:
    term = search.strip().lower()
    if term and term not in article.title.lower() and term not in article.content.lower():
        return False
    if region and article.region != region:
        return False
    if language and article.language != language:
        return False
    return True


@dataclass
class PublicState:
    page_size: int = 6
    articles: list[Article] = field(default_factory=list)
    filtered: list[Article] = field(default_factory=list)
    displayed_count: int = 6
    carousel_position: int = 0
    search: str = ""
    region: str = ""
    language: str = ""
    options: FilterOptions = field(default_factory=FilterOptions)
    using_samples: bool = False
    selected: Optional[Article] = None

    @property
    def visible(self) -> list[Article]:
        return self.filtered[: self.displayed_count]

    @property
    def has_more(self) -> bool:
        return len(self.filtered) > self.displayed_count

    @property
    def no_results(self) -> bool:
        return not self.filtered

    @property
    def featured(self) -> list[Article]:
        return [a for a in self.articles if a.featured]

    @property
    def can_go_previous(self) -> bool:
        return self.carousel_position > 0

    @property
    def can_go_next(self) -> bool:
        return self.carousel_position < len(self.featured) - 1


class PublicController:
    """
    State transitions for the reader-facing page.

    Every public method mutates `state` and then calls `on_change` so the view
    can re-render from scratch; nothing here touches widgets. All methods are
    called on the event loop, so state has a single writer.
    """

    def __init__(
        self,
        client: ArticlesClient,
        notifier: Optional[Notifier] = None,
        *,
        page_size: int = settings.page_size,
        debounce_seconds: float = settings.search_debounce_seconds,
        swipe_threshold: float = settings.swipe_threshold_px,
        on_change: Optional[Callable[[PublicState], None]] = None,
    ) -> None:
        self.client = client
        self.notifier = notifier or Notifier()
        self.state = PublicState(page_size=page_size, displayed_count=page_size)
        self.swipe_threshold = swipe_threshold
        self.on_change = on_change
        self._search_debouncer = Debouncer(debounce_seconds, self._apply_search)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)

    # --- Loading ---
    # Client calls run in a worker thread; state is only touched on the loop.
    async def load_articles(self) -> None:
        try:
            articles = await asyncio.to_thread(self.client.get_published)
        except ApiError as e:
            logger.warning("Falling back to sample articles: %s", e.message)
            self.state.articles = sample_public_articles()
            self.state.using_samples = True
            self.notifier.warning("Using sample articles. Please check your internet connection.")
        else:
            self.state.articles = articles
            self.state.using_samples = False
            logger.info("Loaded %d articles from API", len(articles))
        self._clamp_carousel()

    async def load_filter_options(self) -> None:
        try:
            self.state.options = await asyncio.to_thread(self.client.get_filters)
        except ApiError as e:
            logger.warning("Falling back to default filter options: %s", e.message)
            self.state.options = default_filter_options()

    async def load(self) -> None:
        await self.load_articles()
        await self.load_filter_options()
        self.apply_filters()

    async def refresh(self, *, announce: bool = True) -> None:
        await self.load_articles()
        self.apply_filters()
        if announce and not self.state.using_samples:
            self.notifier.success("News updated successfully!")

    # --- Filtering and pagination ---
    def apply_filters(self) -> None:
        s = self.state
        s.filtered = [a for a in s.articles if matches_public_filters(a, s.search, s.region, s.language)]
        s.displayed_count = s.page_size
        self._changed()

    def set_search(self, text: str) -> None:
        """Debounced on the running loop; filters are reapplied after the configured delay."""
        self._search_debouncer.trigger(text)

    def flush_search(self) -> None:
        self._search_debouncer.flush()

    def _apply_search(self, text: str) -> None:
        self.state.search = text.strip()
        self.apply_filters()

    def clear_search(self) -> None:
        self._search_debouncer.cancel()
        self.state.search = ""
        self.apply_filters()

    def set_region(self, region: Optional[str]) -> None:
        self.state.region = region or ""
        self.apply_filters()

    def set_language(self, language: Optional[str]) -> None:
        self.state.language = language or ""
        self.apply_filters()

    def load_more(self) -> None:
        if not self.state.has_more:
            return
        self.state.displayed_count += self.state.page_size
        self._changed()

    # --- Carousel ---
    def _clamp_carousel(self) -> None:
        upper = max(0, len(self.state.featured) - 1)
        self.state.carousel_position = min(max(0, self.state.carousel_position), upper)

    def next_slide(self) -> None:
        if not self.state.featured:
            return
        self.state.carousel_position += 1
        self._clamp_carousel()
        self._changed()

    def previous_slide(self) -> None:
        if not self.state.featured:
            return
        self.state.carousel_position -= 1
        self._clamp_carousel()
        self._changed()

    def swipe(self, start_x: float, end_x: float) -> None:
        # Leftward drag shows the next slide
        delta = start_x - end_x
        if abs(delta) <= self.swipe_threshold:
            return
        if delta > 0:
            self.next_slide()
        else:
            self.previous_slide()

    # --- Full article view ---
    def open_article(self, article_id: int) -> None:
        article = next((a for a in self.state.articles if a.id == article_id), None)
        if article is None:
            return
        self.state.selected = article
        self._changed()

    def close_article(self) -> None:
        if self.state.selected is None:
            return
        self.state.selected = None
        self._changed()
