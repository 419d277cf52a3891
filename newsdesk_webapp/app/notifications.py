from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Optional


logger = logging.getLogger("newsdesk_webapp.notifications")


class NoticeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass
class Notice:
    message: str
    kind: NoticeKind = NoticeKind.INFO
    created_at: datetime = field(default_factory=datetime.now)


NoticeListener = Callable[[Notice], None]


class Notifier:
    """
    Collects transient notices for whichever view is attached.

    Controllers only call success/error/info/warning; the Flet view subscribes
    and shows each notice as a snack bar. Notices raised before a view is
    attached are kept in `history` so tests and late subscribers can read them.
    """

    def __init__(self, listener: Optional[NoticeListener] = None) -> None:
        self._listener = listener
        self.history: list[Notice] = []

    def subscribe(self, listener: Optional[NoticeListener]) -> None:
        self._listener = listener

    def notify(self, message: str, kind: NoticeKind = NoticeKind.INFO) -> Notice:
        notice = Notice(message=message, kind=kind)
        self.history.append(notice)
        log = logger.warning if kind in (NoticeKind.ERROR, NoticeKind.WARNING) else logger.info
        log("%s notice: %s", kind.value, message)
        if self._listener is not None:
            self._listener(notice)
        return notice

    def success(self, message: str) -> Notice:
        return self.notify(message, NoticeKind.SUCCESS)

    def error(self, message: str) -> Notice:
        return self.notify(message, NoticeKind.ERROR)

    def info(self, message: str) -> Notice:
        return self.notify(message, NoticeKind.INFO)

    def warning(self, message: str) -> Notice:
        return self.notify(message, NoticeKind.WARNING)

    @property
    def last(self) -> Optional[Notice]:
        return self.history[-1] if self.history else None
