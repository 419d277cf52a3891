from __future__ import annotations

from typing import Iterable


class ArticleServiceError(Exception):
    """Base for failures reported back to the caller as a 400 envelope."""

    def __init__(self, message: str, *, fields: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.fields = list(fields)


class ArticleValidationError(ArticleServiceError):
    pass


class ArticleNotFoundError(ArticleServiceError):
    pass
