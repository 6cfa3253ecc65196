"""Records returned to the caller of a scan."""

from dataclasses import asdict, dataclass
from typing import Optional


def lossy_text(value: str) -> str:
    """
    Replace undecodable filename bytes with U+FFFD.

    Non-UTF-8 names come back from the filesystem with lone surrogates, which
    cannot be written as text to the caller.
    """
    try:
        raw = value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Surrogates outside the escape range (e.g. unpaired UTF-16 on Windows)
        raw = value.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")


@dataclass(frozen=True)
class TagInfo:
    """Embedded metadata read from an audio file. All fields None means no tag was found."""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.artist is None and self.album is None


@dataclass(frozen=True)
class Track:
    """
    One discovered audio file.

    `id` is the position of the file in discovery order within a single scan
    result, so it is only unique inside that result.
    """
    id: int
    path: str
    filename: str
    title: Optional[str]
    artist: Optional[str]
    album: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CoverArt:
    """Embedded picture, base64-encoded for text transport."""
    data: str
    mime_type: str

    def to_dict(self) -> dict:
        return asdict(self)

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


@dataclass(frozen=True)
class BackgroundImage:
    path: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)
