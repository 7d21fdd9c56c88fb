import os
import pathlib

import pytz
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = pathlib.Path(__file__).parent.parent
# Timezone for page timestamps
TIMEZONE = pytz.timezone(os.getenv("TIMEZONE", "UTC"))

# Debug mode
DEBUG = os.environ.get("DEBUG", "").lower() in ("1", "true", "yes")

# SQLite configuration
WIKI_DB_PATH = pathlib.Path(os.getenv("WIKI_DB_PATH", BASE_DIR / "wiki.db"))
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{WIKI_DB_PATH}")

# Site configuration
SITE_NAME = os.getenv("SITE_NAME", "Irtysh Wiki")

# Web service configuration
WEB_HOST = os.getenv("WEB_HOST", "0.0.0.0")
WEB_PORT = int(os.getenv("WEB_PORT", 8000))

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
