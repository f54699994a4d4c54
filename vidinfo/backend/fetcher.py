# backend/fetcher.py
"""
Holt die Metadaten eines Videos ueber yt-dlp und dekodiert sie.
Pro Request wird genau ein externer Prozess gestartet, ohne Wiederholung.
"""
import logging
import subprocess
from pydantic import ValidationError

from .api_models import RawMetadata
from .config import CONFIG
from .errors import FetchError, MissingParameterError, ParseError

logger = logging.getLogger(__name__)


def build_command(url: str) -> list:
    # "--" beendet die Optionen, eine URL wie "--load-info-json=..." bleibt ein Positionsargument
    return [CONFIG["YTDLP_BINARY"], *CONFIG["YTDLP_ARGS"], "--", url]


def fetch_video_json(url: str) -> bytes:
    """
    Ruft `yt-dlp -j --no-warnings <url>` auf und gibt die rohe JSON-Ausgabe zurueck.
    Args:
        url (str): Die URL der Videoseite.
    Returns:
        bytes: stdout des Prozesses.
    Raises:
        MissingParameterError: Wenn die URL leer ist.
        FetchError: Bei Exit-Code != 0, fehlendem Binary oder Timeout.
    """
    if not url or not url.strip():
        raise MissingParameterError("URL parameter is required")

    cmd = build_command(url)
    timeout = CONFIG["YTDLP_TIMEOUT_SEC"]
    logger.debug(f"Starte yt-dlp: {cmd} (Timeout {timeout}s)")
    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout, check=False)
    except FileNotFoundError as e:
        raise FetchError("yt-dlp not found", diagnostic=str(e)) from e
    except subprocess.TimeoutExpired as e:
        raise FetchError(f"yt-dlp timed out after {timeout}s", diagnostic=_decode(e.stderr)) from e
    except OSError as e:
        raise FetchError("yt-dlp could not be started", diagnostic=str(e)) from e

    if result.returncode != 0:
        raise FetchError(
            f"yt-dlp exited with status {result.returncode}",
            diagnostic=_decode(result.stderr) or _decode(result.stdout),
        )
    logger.debug(f"yt-dlp lieferte {len(result.stdout)} Bytes fuer {url}")
    return result.stdout


def parse_metadata(raw: bytes) -> RawMetadata:
    """Dekodiert die yt-dlp-Ausgabe. Unbekannte Felder werden ignoriert."""
    try:
        return RawMetadata.model_validate_json(raw)
    except ValidationError as e:
        raise ParseError(f"Unexpected yt-dlp output: {e.error_count()} error(s)") from e


def _decode(data) -> str:
    if not data:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace").strip()
    return str(data).strip()
