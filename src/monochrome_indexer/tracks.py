"""Track assembly - turns discovered audio files into ordered Track records."""

from pathlib import Path, PurePath
from typing import Callable, Iterable, Union

from .models import TagInfo, Track, lossy_text
from .tags import read_tags


def fallback_title(filename: str) -> str:
    """Title used when a file has no embedded one: the filename without its extension."""
    return PurePath(filename).stem


def build_track(track_id: int, file_path: Union[str, Path], tags: TagInfo) -> Track:
    """
    Create a Track from a file path and the tags read from it.

    Only the title falls back to the filename; artist and album stay None
    when the tag does not provide them.
    """
    file_path = Path(file_path)
    filename = lossy_text(file_path.name)
    return Track(
        id=track_id,
        path=lossy_text(str(file_path.absolute())),
        filename=filename,
        title=tags.title if tags.title is not None else fallback_title(filename),
        artist=tags.artist,
        album=tags.album,
    )


def sort_key(track: Track) -> str:
    return track.filename.casefold()


def sort_tracks(tracks: Iterable[Track]) -> list[Track]:
    """Sort by filename, case-insensitively. Equal names keep their discovery order."""
    return sorted(tracks, key=sort_key)


def assemble_tracks(
    paths: Iterable[Union[str, Path]],
    read: Callable[[Path], TagInfo] = read_tags,
) -> list[Track]:
    """
    Build and sort Tracks for audio files given in discovery order.

    Args:
        paths: Audio files, in the order they were discovered
        read: Tag reader used for each file

    Returns:
        Tracks with ids 0..n-1 assigned in discovery order, sorted by filename
    """
    tracks = [
        build_track(track_id, path, read(Path(path)))
        for track_id, path in enumerate(paths)
    ]
    return sort_tracks(tracks)
