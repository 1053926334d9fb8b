"""Configuration and runtime constants."""

import os
from dotenv import load_dotenv

load_dotenv()

# Locales
SOURCE_LANG = os.getenv("GLOSBE_SOURCE_LANG", "lo")
DEST_LANG = os.getenv("GLOSBE_DEST_LANG", "vi")

# Endpoints
BASE_URL = os.getenv("GLOSBE_BASE_URL", "https://glosbe.com").rstrip("/")
API_URL = BASE_URL + "/gapi/translate"
PAGE_URL = BASE_URL + "/{source}/{dest}/{phrase}"

# HTTP Configuration
_timeout = os.getenv("GLOSBE_HTTP_TIMEOUT")
HTTP_TIMEOUT = float(_timeout) if _timeout else None  # None = aiohttp default
USER_AGENT = os.getenv("GLOSBE_USER_AGENT")

# Output limits
MAX_API_EXAMPLES = 6
MAX_SCRAPED_MEANINGS = 12
MAX_SCRAPED_EXAMPLES = 8
MAX_BODY_TEXT_CHARS = 800

# Testing Configuration
LIVE_TESTING = os.getenv("GLOSBE_LIVE", "0") == "1"
