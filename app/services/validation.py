from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from app.models.schemas import ArticleFields
from app.services.errors import ArticleValidationError


REQUIRED_FIELDS = ("title", "content", "region", "language", "date")
REQUIRED_MESSAGE = "All fields are required"


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _describe(error: dict) -> str:
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "field"
    etype = error.get("type", "")
    if etype == "string_too_long":
        limit = (error.get("ctx") or {}).get("max_length")
        return f"{field.capitalize()} cannot exceed {limit} characters"
    if field == "date":
        return "Invalid date format"
    return f"Invalid value for {field}"


def validate_article_fields(payload: Mapping[str, Any], *, today: Optional[date] = None) -> ArticleFields:
    """
    Check the five editable fields of a create/update body.

    Blank values are reported together as a single "All fields are required"
    failure. Length caps and the date checks run only once every field is
    present.
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(payload.get(name))]
    if missing:
        raise ArticleValidationError(REQUIRED_MESSAGE, fields=missing)

    try:
        fields = ArticleFields.model_validate({name: payload.get(name) for name in REQUIRED_FIELDS})
    except ValidationError as e:
        errors = e.errors()
        bad = [str(err["loc"][0]) for err in errors if err.get("loc")]
        raise ArticleValidationError(_describe(errors[0]), fields=bad) from e

    if fields.date > (today or date.today()):
        raise ArticleValidationError("Date cannot be in the future", fields=["date"])
    return fields


def parse_article_id(value: Any) -> Optional[int]:
    # bool is an int subclass; reject it along with zero/negatives
    if value is None or isinstance(value, bool):
        return None
    try:
        article_id = int(str(value).strip())
    except ValueError:
        return None
    return article_id if article_id > 0 else None
