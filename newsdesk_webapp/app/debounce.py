from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional


class Debouncer:
    """
    Runs `callback` once, `delay` seconds after the last `trigger` call.

    The wait is an asyncio task on the running loop, so the callback runs on
    the loop thread. `trigger` must be called from that loop.
    """

    def __init__(self, delay: float, callback: Callable[..., Any]) -> None:
        self.delay = delay
        self._callback = callback
        self._task: Optional[asyncio.Task] = None
        self._pending: Optional[tuple[tuple, dict]] = None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        self._cancel_task()
        self._pending = (args, kwargs)
        self._task = asyncio.get_running_loop().create_task(self._wait())

    async def _wait(self) -> None:
        await asyncio.sleep(self.delay)
        self._task = None
        self._fire()

    def _fire(self) -> None:
        pending, self._pending = self._pending, None
        if pending is not None:
            args, kwargs = pending
            self._callback(*args, **kwargs)

    def _cancel_task(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def flush(self) -> None:
        """Run a pending call now instead of waiting for the delay."""
        self._cancel_task()
        self._fire()

    def cancel(self) -> None:
        self._cancel_task()
        self._pending = None

    @property
    def pending(self) -> bool:
        return self._pending is not None
