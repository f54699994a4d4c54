# backend/config.py
import logging
import os

logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_or_default(name, default):
    value = os.environ.get(name)
    return value if value else default


def _env_int(name, default, minimum=1):
    value = _env_or_default(name, None)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        number = None
    if number is None or number < minimum:
        logger.warning(f"Ungueltiger Wert fuer {name}: '{value}', verwende Standard {default}")
        return default
    return number


# Basis-Konfiguration
CONFIG = {
    "YTDLP_BINARY": _env_or_default("VIDINFO_YTDLP_BINARY", "yt-dlp"),
    "YTDLP_ARGS": ["-j", "--no-warnings"],
    "YTDLP_TIMEOUT_SEC": _env_int("VIDINFO_YTDLP_TIMEOUT_SEC", 60),
    "HOST": _env_or_default("VIDINFO_HOST", "0.0.0.0"),
    "PORT": _env_int("VIDINFO_PORT", 8080),
    "LOGGING_LEVEL": _env_or_default("VIDINFO_LOGGING_LEVEL", "INFO").upper(),
    "TEMPLATE_DIR": os.path.join(PACKAGE_DIR, "templates"),
    "INDEX_TEMPLATE": "index.html",
    "STATIC_DIR": os.path.join(PACKAGE_DIR, "static"),
}
