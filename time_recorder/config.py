"""Application configuration loaded from environment variables."""

import os

from dotenv import load_dotenv

from .constants import YOROZUYA_BASE

load_dotenv()

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

# Portal
PORTAL_BASE_URL = os.getenv("PORTAL_BASE_URL", YOROZUYA_BASE)
PORTAL_TIMEOUT = float(os.getenv("PORTAL_TIMEOUT", "30"))  # seconds, per remote call

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
