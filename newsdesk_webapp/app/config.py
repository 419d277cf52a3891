from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")
    admin_api_key: str = os.getenv("ADMIN_API_KEY", "")
    page_size: int = int(os.getenv("NEWS_PAGE_SIZE", "6"))
    search_debounce_seconds: float = float(os.getenv("NEWS_SEARCH_DEBOUNCE", "0.3"))
    refresh_interval_seconds: float = float(os.getenv("NEWS_REFRESH_INTERVAL", "600"))
    swipe_threshold_px: float = 50.0
    notice_ttl_seconds: float = 5.0


settings = Settings()
