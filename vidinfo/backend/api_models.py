# backend/api_models.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List

# Eingabemodelle (Ausgabe von yt-dlp -j, nur die relevanten Felder)
class RawFormat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    format_id: str = ""
    url: str = ""
    resolution: str = "" # "1280x720" oder ein Schluesselwort wie "multiple"
    height: int = 0
    ext: str = ""
    vcodec: str = "" # "none" = keine Videospur
    acodec: str = "" # "none" = keine Audiospur

    @field_validator("format_id", "url", "resolution", "ext", "vcodec", "acodec", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("height", mode="before")
    @classmethod
    def _null_to_zero(cls, value):
        return 0 if value is None else value

class RawMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    thumbnail: str = ""
    formats: List[RawFormat] = Field(default_factory=list)

    @field_validator("title", "thumbnail", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("formats", mode="before")
    @classmethod
    def _null_to_list(cls, value):
        return [] if value is None else value

# Ausgabemodelle
class QualityEntry(BaseModel):
    quality: str
    url: str

class VideoInfo(BaseModel):
    title: str = ""
    thumbnail: str = ""
    preview_url: str = ""
    files: List[QualityEntry] = Field(default_factory=list) # Reihenfolge = erstes Auftreten
