import os
import logging
from typing import List

from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# APP
# ------------------------------------------------------------------------------
APP_NAME = os.getenv("APP_NAME", "String Analyzer Service")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
RELOAD = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")

# ------------------------------------------------------------------------------
# LOGGING
# ------------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


# ------------------------------------------------------------------------------
# CORS
# ------------------------------------------------------------------------------
def parse_origins(raw: str) -> List[str]:
    """Split a comma separated origin list, '*' by default."""
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


CORS_ORIGINS = parse_origins(os.getenv("CORS_ORIGINS", "*"))
