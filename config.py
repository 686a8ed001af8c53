import os
from dotenv import load_dotenv

load_dotenv()

MONGO_URI = (os.getenv("MONGO_URI") or "").strip()
DB_HOST = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT = os.getenv("DB_PORT", "27017")
DB_NAME = os.getenv("DB_NAME", "fittrack_db")

# Calendar used for "today". Empty -> host local time.
APP_TIMEZONE = (os.getenv("APP_TIMEZONE") or "").strip()

LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()

TRASH_RETENTION_DAYS = int(os.getenv("TRASH_RETENTION_DAYS", "30"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
