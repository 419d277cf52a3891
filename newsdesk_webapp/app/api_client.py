from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from newsdesk_webapp.app.models import Article, ArticleDraft, FilterOptions


ARTICLES_PATH = "/articles"


class ApiError(Exception):
    """Network failure, non-success envelope or a payload we could not read."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class MutationResult:
    success: bool
    message: str
    id: Optional[int] = None


class ArticlesClient:
    """Shared data access for the public site and the admin panel."""

    def __init__(self, base_url: str, admin_api_key: str = "", transport: httpx.BaseTransport | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        headers = {"X-Admin-Key": admin_api_key} if admin_api_key else {}
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(connect=5.0, read=15.0, write=15.0, pool=10.0),
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    # --- Internal helpers ---
    def _read_json(self, resp: httpx.Response) -> dict:
        try:
            data = resp.json()
        except ValueError:
            raise ApiError(f"Unreadable response ({resp.status_code})", resp.status_code)
        if not isinstance(data, dict):
            raise ApiError("Unexpected response shape", resp.status_code)
        return data

    def _get(self, action: str) -> dict:
        try:
            resp = self._client.get(ARTICLES_PATH, params={"action": action})
        except httpx.HTTPError as e:
            raise ApiError(f"Network error: {e}") from e
        data = self._read_json(resp)
        if resp.status_code >= 400 or not data.get("success"):
            raise ApiError(str(data.get("message") or f"API error: {resp.status_code}"), resp.status_code)
        return data

    def _mutate(self, method: str, body: dict[str, Any]) -> MutationResult:
        try:
            resp = self._client.request(method, ARTICLES_PATH, json=body)
        except httpx.HTTPError as e:
            raise ApiError(f"Network error: {e}") from e
        data = self._read_json(resp)
        new_id = data.get("id")
        if new_id is not None:
            try:
                new_id = int(new_id)
            except (TypeError, ValueError) as e:
                raise ApiError("API returned invalid data", resp.status_code) from e
        return MutationResult(
            success=bool(data.get("success")) and resp.status_code < 400,
            message=str(data.get("message") or ""),
            id=new_id,
        )

    def _articles(self, data: dict) -> list[Article]:
        rows = data.get("articles")
        if not isinstance(rows, list):
            raise ApiError("API returned invalid data")
        try:
            return [Article.from_payload(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"API returned invalid data: {e}") from e

    # --- Reads ---
    def get_published(self) -> list[Article]:
        return self._articles(self._get("get"))

    def get_all(self) -> list[Article]:
        return self._articles(self._get("get_all"))

    def get_filters(self) -> FilterOptions:
        data = self._get("filters")
        regions = data.get("regions") or []
        languages = data.get("languages") or []
        if not isinstance(regions, list) or not isinstance(languages, list):
            raise ApiError("API returned invalid data")
        return FilterOptions(regions=[str(r) for r in regions], languages=[str(x) for x in languages])

    # --- Mutations ---
    def create(self, draft: ArticleDraft) -> MutationResult:
        return self._mutate("POST", {"action": "create", **draft.to_payload()})

    def update(self, article_id: int, draft: ArticleDraft) -> MutationResult:
        return self._mutate("PUT", {"action": "update", "id": article_id, **draft.to_payload()})

    def delete(self, article_id: int) -> MutationResult:
        return self._mutate("DELETE", {"action": "delete", "id": article_id})
