# backend/errors.py
"""Fehlerarten des Gateways. Jede Art ist fuer den aktuellen Request endgueltig."""


class VideoInfoError(Exception):
    pass


class MissingParameterError(VideoInfoError):
    """Der Client hat keine (oder eine leere) URL uebergeben."""


class FetchError(VideoInfoError):
    """yt-dlp ist fehlgeschlagen. `diagnostic` wird nur serverseitig geloggt."""

    def __init__(self, message: str, diagnostic: str = ""):
        super().__init__(message)
        self.diagnostic = diagnostic


class ParseError(VideoInfoError):
    """Die Ausgabe von yt-dlp war kein gueltiges JSON-Objekt der erwarteten Form."""


class TemplateError(VideoInfoError):
    pass
