from __future__ import annotations

from datetime import date
from typing import Optional

from newsdesk_webapp.app.models import ArticleDraft


TITLE_MAX = 255
CONTENT_MAX = 5000

_REQUIRED = (
    ("title", "Title"),
    ("content", "Content"),
    ("region", "Region"),
    ("language", "Language"),
    ("date", "Date"),
)


def validate_draft(draft: ArticleDraft, *, today: Optional[date] = None) -> dict[str, str]:
    """
    Check a create/edit form before it is submitted.

    Returns a mapping of field name to message; an empty mapping means the
    draft can be sent. Only the first problem per field is reported.
    """
    values = draft.to_payload()
    errors: dict[str, str] = {}

    for name, label in _REQUIRED:
        if not values[name]:
            errors[name] = f"{label} is required"

    if "title" not in errors and len(values["title"]) > TITLE_MAX:
        errors["title"] = f"Title cannot exceed {TITLE_MAX} characters"
    if "content" not in errors and len(values["content"]) > CONTENT_MAX:
        errors["content"] = f"Content cannot exceed {CONTENT_MAX} characters"

    if "date" not in errors:
        try:
            parsed = date.fromisoformat(values["date"])
        except ValueError:
            errors["date"] = "Invalid date format"
        else:
            if parsed > (today or date.today()):
                errors["date"] = "Date cannot be in the future"

    return errors
