"""Embedded tag reading - display metadata and cover art from audio files.

Only ID3 tags (.mp3) are parsed. Every read or parse failure is reported as
"no metadata": nothing in this module raises to its caller.
"""

import base64
import logging
from pathlib import Path
from typing import Optional, Union

from mutagen.id3 import APIC, ID3, ID3NoHeaderError

from .classifier import extension
from .models import CoverArt, TagInfo

logger = logging.getLogger(__name__)

TAGGED_EXTENSIONS = frozenset({"mp3"})

COVER_MIME_TYPES = ("image/jpeg", "image/png")


def load_id3(file_path: Union[str, Path]) -> Optional[ID3]:
    """
    Load the ID3 tag of a file, mapping any failure to None.

    Args:
        file_path: Path to the audio file

    Returns:
        The parsed tag, or None if the file has no supported tag, has a
        corrupt tag, or cannot be read.
    """
    if extension(file_path) not in TAGGED_EXTENSIONS:
        return None

    try:
        return ID3(file_path)
    except ID3NoHeaderError:
        logger.debug(f"No ID3 tag in {file_path}")
    except Exception as e:
        logger.warning(f"Error reading tags from {file_path}: {e}")
    return None


def _first_text(tags: ID3, frame_id: str) -> Optional[str]:
    frame = tags.get(frame_id)
    if frame is None or not frame.text:
        return None
    value = str(frame.text[0])
    return value if value.strip() else None


def read_tags(file_path: Union[str, Path]) -> TagInfo:
    """
    Read title, artist and album from an audio file.

    Returns:
        TagInfo with whatever fields were found; all None when the file has
        no readable tag.
    """
    tags = load_id3(file_path)
    if tags is None:
        return TagInfo()

    info = TagInfo(
        title=_first_text(tags, "TIT2"),
        artist=_first_text(tags, "TPE1"),
        album=_first_text(tags, "TALB"),
    )
    if info.is_empty:
        logger.debug(f"ID3 tag in {file_path} has no title, artist or album")
    return info


def read_cover(file_path: Union[str, Path]) -> Optional[CoverArt]:
    """
    Return the first embedded JPEG or PNG picture of an audio file.

    Pictures are visited in the order they are stored in the tag; pictures
    of any other MIME type are skipped.
    """
    tags = load_id3(file_path)
    if tags is None:
        return None

    for frame in tags.values():
        if not isinstance(frame, APIC):
            continue
        if frame.mime not in COVER_MIME_TYPES:
            logger.debug(f"Skipping {frame.mime or 'untyped'} picture in {file_path}")
            continue
        return CoverArt(
            data=base64.b64encode(frame.data).decode("ascii"),
            mime_type=frame.mime,
        )

    return None
