"""Extension-based file classification.

Only the extension is inspected, never the file contents: a renamed file with
a matching extension is accepted.
"""

import os
from pathlib import PurePath
from typing import Union

AUDIO_EXTENSIONS = frozenset({"mp3", "flac", "wav", "ogg", "m4a", "aac", "wma"})

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "webp", "gif"})

PathLike = Union[str, "os.PathLike[str]"]


def extension(path: PathLike) -> str:
    """Return the lower-cased extension of path without the dot, or '' if it has none."""
    return PurePath(path).suffix[1:].lower()


def is_audio(path: PathLike) -> bool:
    return extension(path) in AUDIO_EXTENSIONS


def is_image(path: PathLike) -> bool:
    return extension(path) in IMAGE_EXTENSIONS
