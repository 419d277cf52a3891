# app/config.py
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv
load_dotenv()

PGHOST = os.getenv("PGHOST", "localhost")
PGPORT = os.getenv("PGPORT", "5432")
PGDATABASE = os.getenv("PGDATABASE", "news_agency")
PGUSER = os.getenv("PGUSER", "postgres")
PGPASSWORD = os.getenv("PGPASSWORD", "")

# A full DATABASE_URL wins over the PG* parts
DB_DSN = os.getenv("DATABASE_URL") or (
    f"postgresql://{quote_plus(PGUSER)}:{quote_plus(PGPASSWORD)}@{PGHOST}:{PGPORT}/{PGDATABASE}"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROOT_PATH = os.getenv("ROOT_PATH", "")

# Empty means admin endpoints stay open
ADMIN_API_KEY = os.getenv("ADMIN_API_KEY", "")
ARTICLE_CREATE_STATUS = os.getenv("ARTICLE_CREATE_STATUS", "published").strip().lower()
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").strip().lower() in ("1", "true", "yes", "on")
