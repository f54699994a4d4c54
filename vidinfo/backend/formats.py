# backend/formats.py
"""
Filtert die Formatliste von yt-dlp und vergibt lesbare Qualitaetsbezeichnungen.
"""
import logging
from .api_models import QualityEntry, RawFormat, RawMetadata, VideoInfo

logger = logging.getLogger(__name__)

NO_TRACK = "none"
FALLBACK_LABEL = "Download"


def is_eligible(fmt: RawFormat) -> bool:
    """Nur mp4 mit Video- und Audiospur (gemuxt) ist direkt im Browser abspielbar."""
    return fmt.ext == "mp4" and fmt.vcodec != NO_TRACK and fmt.acodec != NO_TRACK


def quality_label(fmt: RawFormat) -> str:
    """
    Berechnet die Qualitaetsbezeichnung eines Formats.
    Args:
        fmt (RawFormat): Das Format.
    Returns:
        str: z.B. "720p", die rohe Aufloesung oder "HD", wenn nichts bekannt ist.
    """
    if fmt.height > 0:
        return f"{fmt.height}p"
    if fmt.resolution and fmt.resolution != "multiple":
        parts = fmt.resolution.split("x")
        if len(parts) == 2:
            return f"{parts[1]}p"
        return fmt.resolution
    return "HD"


def simplify(meta: RawMetadata) -> VideoInfo:
    info = VideoInfo(title=meta.title, thumbnail=meta.thumbnail)
    seen = set()
    preview_set = False

    for fmt in meta.formats:
        if not is_eligible(fmt):
            continue
        label = quality_label(fmt)
        # Vorschau = erstes geeignetes Format, wird nie ueberschrieben
        if not preview_set:
            info.preview_url = fmt.url
            preview_set = True
        if label in seen:
            continue
        seen.add(label)
        info.files.append(QualityEntry(quality=label, url=fmt.url))

    if not preview_set and meta.formats:
        first = meta.formats[0]
        logger.debug(f"Kein mp4 mit Audio+Video unter {len(meta.formats)} Formaten, nutze erstes Format")
        info.files.append(QualityEntry(quality=FALLBACK_LABEL, url=first.url))
        info.preview_url = first.url

    return info
