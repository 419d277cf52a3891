# -*- coding: utf-8 -*-
from __future__ import annotations

import asyncio
from datetime import date
from typing import Callable, Optional

import flet as ft

from newsdesk_webapp.app.admin_state import AdminController, AdminState
from newsdesk_webapp.app.api_client import ArticlesClient
from newsdesk_webapp.app.config import settings
from newsdesk_webapp.app.models import Article, ArticleDraft
from newsdesk_webapp.app.notifications import Notice, Notifier
from newsdesk_webapp.app.public_app import NOTICE_COLORS, excerpt, format_date


# --- Testability hooks (dependency injection) ---
ClientFactory = Callable[[], ArticlesClient]
_client_factory: Optional[ClientFactory] = None


def set_client_factory(factory: ClientFactory) -> None:
    global _client_factory
    _client_factory = factory


def _make_client() -> ArticlesClient:
    if _client_factory is not None:
        return _client_factory()
    return ArticlesClient(base_url=settings.api_base_url, admin_api_key=settings.admin_api_key)


class ArticleForm:
    """Create/edit form fields plus the per-field error display."""

    def __init__(self, submit_label: str) -> None:
        self.title = ft.TextField(label="Title", max_length=255)
        self.content = ft.TextField(label="Content", multiline=True, min_lines=4, max_lines=10, max_length=5000)
        self.region = ft.Dropdown(label="Region", width=220)
        self.language = ft.Dropdown(label="Language", width=220)
        self.date = ft.TextField(label="Date (YYYY-MM-DD)", width=220, value=date.today().isoformat())
        self.submit = ft.ElevatedButton(submit_label)
        self.fields = {
            "title": self.title,
            "content": self.content,
            "region": self.region,
            "language": self.language,
            "date": self.date,
        }

    def set_options(self, regions: list[str], languages: list[str]) -> None:
        self.region.options = [ft.dropdown.Option(r) for r in regions]
        self.language.options = [ft.dropdown.Option(x) for x in languages]

    def draft(self) -> ArticleDraft:
        return ArticleDraft(
            title=self.title.value or "",
            content=self.content.value or "",
            region=self.region.value or "",
            language=self.language.value or "",
            date=self.date.value or "",
        )

    def fill(self, draft: ArticleDraft) -> None:
        for name, control in self.fields.items():
            control.value = getattr(draft, name)

    def clear(self) -> None:
        self.fill(ArticleDraft(date=date.today().isoformat()))
        self.show_errors({})

    def show_errors(self, errors: dict[str, str]) -> None:
        for name, control in self.fields.items():
            control.error_text = errors.get(name)

    def view(self) -> ft.Control:
        return ft.Column(
            [self.title, self.content, ft.Row([self.region, self.language, self.date], wrap=True), self.submit],
            spacing=10,
        )


def main(page: ft.Page):
    page.title = "Newsdesk Admin"
    page.window_width = 1200
    page.window_height = 820
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
    stat_total = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)
    stat_today = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)
    stat_regions = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)
    stat_languages = ft.Text("0", size=24, weight=ft.FontWeight.BOLD)

    def _stat_card(label: str, value: ft.Text) -> ft.Control:
        return ft.Container(
            padding=14,
            border_radius=8,
            bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
            content=ft.Column([value, ft.Text(label, size=12)], spacing=2),
        )

    create_form = ArticleForm("Create Article")
    edit_form = ArticleForm("Save Changes")
    search = ft.TextField(label="Search articles", prefix_icon=ft.Icons.SEARCH, width=360)
    table_body = ft.Column(spacing=6)
    empty_text = ft.Text("No articles found.", italic=True, visible=False)

    edit_dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Edit Article"),
        content=ft.Container(width=640, content=edit_form.view()),
        open=False,
    )
    confirm_dialog = ft.AlertDialog(modal=True, title=ft.Text("Delete article?"), open=False)
    page.overlay.extend([edit_dialog, confirm_dialog])

    # ----- Rendering -----
    def _row(article: Article) -> ft.Control:
        return ft.Container(
            padding=10,
            border=ft.border.all(1, ft.Colors.OUTLINE_VARIANT),
            border_radius=6,
            content=ft.Row(
                [
                    ft.Column(
                        [
                            ft.Text(article.title, weight=ft.FontWeight.BOLD),
                            ft.Text(excerpt(article.content, 100), size=12),
                        ],
                        expand=True,
                        spacing=2,
                    ),
                    ft.Text(article.region, width=120),
                    ft.Text(article.language, width=90),
                    ft.Text(format_date(article), width=100),
                    ft.Text(article.status or "", width=80),
                    ft.IconButton(icon=ft.Icons.EDIT, tooltip="Edit", on_click=lambda e, aid=article.id: open_edit(aid)),
                    ft.IconButton(
                        icon=ft.Icons.DELETE, tooltip="Delete", on_click=lambda e, aid=article.id: ask_delete(aid)
                    ),
                ],
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )

    def render(state: AdminState):
        stat_total.value = str(state.stats.total)
        stat_today.value = str(state.stats.today)
        stat_regions.value = str(state.stats.regions)
        stat_languages.value = str(state.stats.languages)
        create_form.set_options(state.regions, state.languages)
        edit_form.set_options(state.regions, state.languages)
        if state.editing_id is not None:
            edit_form.show_errors(state.form_errors)
        else:
            create_form.show_errors(state.form_errors)
            edit_dialog.open = False
        rows = state.visible
        table_body.controls = [_row(a) for a in rows]
        empty_text.visible = not rows
        page.update()

    controller = AdminController(client, notifier, on_change=render)

    # ----- Handlers -----
    async def _load():
        await asyncio.to_thread(controller.load)

    async def _create():
        create_form.submit.disabled = True
        page.update()
        try:
            ok = await asyncio.to_thread(controller.create, create_form.draft())
        finally:
            create_form.submit.disabled = False
        if ok:
            create_form.clear()
        page.update()

    async def _save_edit():
        edit_form.submit.disabled = True
        page.update()
        try:
            await asyncio.to_thread(controller.save_edit, edit_form.draft())
        finally:
            edit_form.submit.disabled = False
            page.update()

    def open_edit(article_id: int):
        draft = controller.begin_edit(article_id)
        if draft is None:
            return
        edit_form.fill(draft)
        edit_form.show_errors({})
        edit_dialog.open = True
        page.update()

    def close_edit(_=None):
        controller.cancel_edit()
        edit_dialog.open = False
        page.update()

    def ask_delete(article_id: int):
        async def _delete():
            confirm_dialog.open = False
            page.update()
            await asyncio.to_thread(controller.delete, article_id)

        def _cancel(_):
            confirm_dialog.open = False
            page.update()

        confirm_dialog.content = ft.Text("This action cannot be undone.")
        confirm_dialog.actions = [
            ft.TextButton("Cancel", on_click=_cancel),
            ft.TextButton("Delete", on_click=lambda e: page.run_task(_delete)),
        ]
        confirm_dialog.open = True
        page.update()

    create_form.submit.on_click = lambda e: page.run_task(_create)
    edit_form.submit.on_click = lambda e: page.run_task(_save_edit)
    edit_dialog.actions = [ft.TextButton("Cancel", on_click=close_edit)]
    search.on_change = lambda e: controller.set_search(e.control.value or "")

    page.appbar = ft.AppBar(
        title=ft.Text("Newsdesk Admin"),
        actions=[ft.IconButton(icon=ft.Icons.REFRESH, tooltip="Reload", on_click=lambda e: page.run_task(_load))],
    )
    page.add(
        ft.Column(
            [
                ft.Row(
                    [
                        _stat_card("Total Articles", stat_total),
                        _stat_card("Today's Articles", stat_today),
                        _stat_card("Regions", stat_regions),
                        _stat_card("Languages", stat_languages),
                    ],
                    spacing=12,
                    wrap=True,
                ),
                ft.Text("Create New Article", size=18, weight=ft.FontWeight.BOLD),
                create_form.view(),
                ft.Divider(),
                ft.Row([ft.Text("Manage Articles", size=18, weight=ft.FontWeight.BOLD), search], wrap=True),
                table_body,
                empty_text,
            ],
            spacing=14,
        )
    )

    page.run_task(_load)


if __name__ == "__main__":
    ft.app(target=main)
