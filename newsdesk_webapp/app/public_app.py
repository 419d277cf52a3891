# -*- coding: utf-8 -*-
from __future__ import annotations

import asyncio
from typing import Callable, Optional

import flet as ft

from newsdesk_webapp.app.api_client import ArticlesClient
from newsdesk_webapp.app.config import settings
from newsdesk_webapp.app.models import Article
from newsdesk_webapp.app.notifications import Notice, NoticeKind, Notifier
from newsdesk_webapp.app.public_state import PublicController, PublicState


# --- Testability hooks (dependency injection) ---
ClientFactory = Callable[[], ArticlesClient]
_client_factory: Optional[ClientFactory] = None
_enable_auto_refresh: bool = True


def set_client_factory(factory: ClientFactory) -> None:
    global _client_factory
    _client_factory = factory


def set_auto_refresh(enabled: bool) -> None:
    global _enable_auto_refresh
    _enable_auto_refresh = enabled


def _make_client() -> ArticlesClient:
    if _client_factory is not None:
        return _client_factory()
    return ArticlesClient(base_url=settings.api_base_url)


NOTICE_COLORS = {
    NoticeKind.SUCCESS: ft.Colors.GREEN_700,
    NoticeKind.ERROR: ft.Colors.RED_700,
    NoticeKind.WARNING: ft.Colors.AMBER_800,
    NoticeKind.INFO: ft.Colors.BLUE_GREY_700,
}

EXCERPT_CHARS = 150


def excerpt(text: str, limit: int = EXCERPT_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


def format_date(article: Article) -> str:
    if article.date is None:
        return ""
    return article.date.strftime("%d %b %Y")


def main(page: ft.Page):
    page.title = "Newsdesk"
    page.window_width = 1100
    page.window_height = 800
    page.scroll = ft.ScrollMode.AUTO

    page.snack_bar = ft.SnackBar(content=ft.Text(""), open=False, duration=int(settings.notice_ttl_seconds * 1000))
    page.add(page.snack_bar)

    def show_notice(notice: Notice):
        page.snack_bar.content = ft.Text(notice.message, color=ft.Colors.WHITE)
        page.snack_bar.bgcolor = NOTICE_COLORS.get(notice.kind)
        page.snack_bar.open = True
        page.update()

    notifier = Notifier(show_notice)
    client = _make_client()

    # ----- Controls -----
    search = ft.TextField(label="Search news", prefix_icon=ft.Icons.SEARCH, expand=True)
    region_dd = ft.Dropdown(label="Region", width=200)
    language_dd = ft.Dropdown(label="Language", width=200)
    refresh_btn = ft.IconButton(icon=ft.Icons.REFRESH, tooltip="Refresh")

    slide_title = ft.Text(size=22, weight=ft.FontWeight.BOLD)
    slide_meta = ft.Text(size=12, color=ft.Colors.ON_SURFACE_VARIANT)
    slide_body = ft.Text(size=14)
    slide_counter = ft.Text(size=12)
    prev_btn = ft.IconButton(icon=ft.Icons.CHEVRON_LEFT, tooltip="Previous")
    next_btn = ft.IconButton(icon=ft.Icons.CHEVRON_RIGHT, tooltip="Next")

    grid = ft.ResponsiveRow(spacing=12, run_spacing=12)
    empty_text = ft.Text("No articles found matching your criteria.", visible=False, italic=True)
    load_more_btn = ft.ElevatedButton("Load More", visible=False)

    article_title = ft.Text(size=20, weight=ft.FontWeight.BOLD, selectable=True)
    article_meta = ft.Text(size=12, color=ft.Colors.ON_SURFACE_VARIANT)
    article_body = ft.Text(size=14, selectable=True)
    article_dialog = ft.AlertDialog(
        title=article_title,
        content=ft.Container(
            width=640,
            content=ft.Column([article_meta, article_body], spacing=12, tight=True, scroll=ft.ScrollMode.AUTO),
        ),
        open=False,
    )
    page.overlay.append(article_dialog)

    # Flet runs sync handlers on worker threads; controller calls go through the loop
    def on_loop(fn, *args):
        async def _run():
            fn(*args)

        page.run_task(_run)

    drag_start: dict[str, float] = {"x": 0.0, "last": 0.0}

    def on_drag_start(e: ft.DragStartEvent):
        drag_start["x"] = e.local_x
        drag_start["last"] = e.local_x

    def on_drag_update(e: ft.DragUpdateEvent):
        drag_start["last"] = e.local_x

    def on_drag_end(_):
        on_loop(controller.swipe, drag_start["x"], drag_start["last"])

    def on_slide_tap(_):
        featured = controller.state.featured
        if featured:
            on_loop(controller.open_article, featured[controller.state.carousel_position].id)

    carousel = ft.GestureDetector(
        on_horizontal_drag_start=on_drag_start,
        on_horizontal_drag_update=on_drag_update,
        on_horizontal_drag_end=on_drag_end,
        on_tap=on_slide_tap,
        content=ft.Container(
            padding=20,
            border_radius=8,
            bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
            content=ft.Column([slide_meta, slide_title, slide_body], spacing=8),
        ),
    )

    # ----- Rendering -----
    def _article_card(article: Article) -> ft.Control:
        return ft.Container(
            col={"xs": 12, "md": 6, "lg": 4},
            padding=14,
            border=ft.border.all(1, ft.Colors.OUTLINE_VARIANT),
            border_radius=8,
            on_click=lambda e, aid=article.id: on_loop(controller.open_article, aid),
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text(article.region, size=11, weight=ft.FontWeight.BOLD),
                            ft.Text(article.language, size=11),
                            ft.Text(format_date(article), size=11),
                        ],
                        spacing=10,
                    ),
                    ft.Text(article.title, size=16, weight=ft.FontWeight.BOLD),
                    ft.Text(excerpt(article.content), size=13),
                ],
                spacing=6,
            ),
        )

    def _render_carousel(state: PublicState):
        featured = state.featured
        carousel.visible = bool(featured)
        if not featured:
            return
        current = featured[state.carousel_position]
        slide_title.value = current.title
        slide_meta.value = f"{current.region} | {current.language} | {format_date(current)}"
        slide_body.value = excerpt(current.content, 240)
        slide_counter.value = f"{state.carousel_position + 1} / {len(featured)}"
        prev_btn.disabled = not state.can_go_previous
        next_btn.disabled = not state.can_go_next

    def _render_article(state: PublicState):
        selected = state.selected
        article_dialog.open = selected is not None
        if selected is None:
            return
        article_title.value = selected.title
        article_meta.value = f"{selected.region} | {selected.language} | {format_date(selected)}"
        article_body.value = selected.content

    def render(state: PublicState):
        region_dd.options = [ft.dropdown.Option("", "All Regions")] + [ft.dropdown.Option(r) for r in state.options.regions]
        language_dd.options = [ft.dropdown.Option("", "All Languages")] + [
            ft.dropdown.Option(x) for x in state.options.languages
        ]
        _render_carousel(state)
        grid.controls = [_article_card(a) for a in state.visible]
        empty_text.visible = state.no_results
        load_more_btn.visible = state.has_more
        _render_article(state)
        page.update()

    controller = PublicController(client, notifier, on_change=render)

    # ----- Handlers -----
    async def _load():
        await controller.load()

    async def _refresh():
        refresh_btn.disabled = True
        page.update()
        try:
            await controller.refresh()
        finally:
            refresh_btn.disabled = False
            page.update()

    async def _auto_refresh():
        while _enable_auto_refresh:
            await asyncio.sleep(settings.refresh_interval_seconds)
            await controller.refresh(announce=False)

    def _clear_search(_):
        search.value = ""
        on_loop(controller.clear_search)

    search.suffix = ft.IconButton(icon=ft.Icons.CLEAR, tooltip="Clear search", icon_size=18, on_click=_clear_search)
    search.on_change = lambda e: on_loop(controller.set_search, e.control.value or "")
    search.on_submit = lambda e: on_loop(controller.flush_search)
    region_dd.on_change = lambda e: on_loop(controller.set_region, e.control.value)
    language_dd.on_change = lambda e: on_loop(controller.set_language, e.control.value)
    load_more_btn.on_click = lambda e: on_loop(controller.load_more)
    prev_btn.on_click = lambda e: on_loop(controller.previous_slide)
    next_btn.on_click = lambda e: on_loop(controller.next_slide)
    refresh_btn.on_click = lambda e: page.run_task(_refresh)
    article_dialog.actions = [ft.TextButton("Close", on_click=lambda e: on_loop(controller.close_article))]
    article_dialog.on_dismiss = lambda e: on_loop(controller.close_article)

    def _on_keyboard(e: ft.KeyboardEvent):
        if e.key == "Escape":
            on_loop(controller.close_article)
        elif controller.state.selected is not None:
            return
        elif e.key == "Arrow Left":
            on_loop(controller.previous_slide)
        elif e.key == "Arrow Right":
            on_loop(controller.next_slide)

    page.on_keyboard_event = _on_keyboard

    page.appbar = ft.AppBar(title=ft.Text("Newsdesk"), actions=[refresh_btn])
    page.add(
        ft.Column(
            [
                ft.Row([search, region_dd, language_dd], spacing=10),
                ft.Column([carousel, ft.Row([prev_btn, slide_counter, next_btn], alignment=ft.MainAxisAlignment.CENTER)]),
                ft.Text("Latest News", size=20, weight=ft.FontWeight.BOLD),
                grid,
                empty_text,
                ft.Row([load_more_btn], alignment=ft.MainAxisAlignment.CENTER),
            ],
            spacing=16,
        )
    )

    page.run_task(_load)
    if _enable_auto_refresh:
        page.run_task(_auto_refresh)


if __name__ == "__main__":
    ft.app(target=main)
