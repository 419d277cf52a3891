from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).replace("Z", "+00:00")
    return datetime.fromisoformat(text)


@dataclass
class Article:
    id: int
    title: str
    content: str
    region: str = ""
    language: str = ""
    date: Optional[date] = None
    status: Optional[str] = None
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, data: dict) -> "Article":
        """Build from one API row; raises ValueError/KeyError/TypeError on malformed input."""
        if not isinstance(data, dict):
            raise TypeError("article row must be an object")
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            content=str(data["content"]),
            region=str(data.get("region") or ""),
            language=str(data.get("language") or ""),
            date=_parse_date(data.get("date")),
            status=data.get("status"),
            featured=bool(data.get("featured", False)),
            created_at=_parse_datetime(data.get("created_at")),
            updated_at=_parse_datetime(data.get("updated_at")),
        )


@dataclass
class FilterOptions:
    regions: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)


@dataclass
class ArticleDraft:
    """Raw form input for create/edit, before validation."""

    title: str = ""
    content: str = ""
    region: str = ""
    language: str = ""
    date: str = ""

    def to_payload(self) -> dict[str, str]:
        return {
            "title": self.title.strip(),
            "content": self.content.strip(),
            "region": self.region.strip(),
            "language": self.language.strip(),
            "date": self.date.strip(),
        }

    @classmethod
    def from_article(cls, article: Article) -> "ArticleDraft":
        return cls(
            title=article.title,
            content=article.content,
            region=article.region,
            language=article.language,
            date=article.date.isoformat() if article.date else "",
        )
