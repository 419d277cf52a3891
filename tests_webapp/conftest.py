from __future__ import annotations

import pytest

from newsdesk_webapp.app.notifications import Notifier


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def notifier() -> Notifier:
    return Notifier()
