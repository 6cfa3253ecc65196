"""Scan entry points used by the player front end."""

import logging
import stat
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Union

from .classifier import is_audio
from .config import BACKGROUNDS_DIRNAME
from .exceptions import BackgroundsDirError
from .models import BackgroundImage, CoverArt, Track, lossy_text
from .scanner import scan_audio_files, scan_image_files
from .tags import read_cover
from .tracks import assemble_tracks

logger = logging.getLogger(__name__)

OnTrack = Optional[Callable[[Path], None]]


class MediaLibrary:
    """
    Media discovery rooted at the application's base directory.

    The base directory is passed in rather than looked up, so the library
    can be pointed anywhere. Nothing is cached between calls: every
    operation reads the filesystem afresh and returns its complete,
    sorted result or raises an IndexerError.
    """

    def __init__(self, app_dir: Union[str, Path], backgrounds_dirname: str = BACKGROUNDS_DIRNAME):
        self.app_dir = Path(app_dir).absolute()
        self.backgrounds_dir = self.app_dir / backgrounds_dirname

    def get_app_dir(self) -> str:
        return str(self.app_dir)

    def scan_directory(self, root: Union[str, Path], on_track: OnTrack = None) -> list[Track]:
        """Recursively scan any directory for audio files."""
        tracks = assemble_tracks(scan_audio_files(root, on_file=on_track))
        logger.info(f"Found {len(tracks)} tracks in {root}")
        return tracks

    def scan_local(self, on_track: OnTrack = None) -> list[Track]:
        """Recursively scan the application's own folder, for music shipped next to the executable."""
        return self.scan_directory(self.app_dir, on_track=on_track)

    def scan_files(self, paths: Iterable[Union[str, Path]], on_track: OnTrack = None) -> list[Track]:
        """
        Scan a mixed list of files and directories, e.g. from a drag and drop.

        Directories are scanned recursively; files are kept only if they have
        an audio extension. Paths that are neither are ignored. Track ids run
        across all inputs in the order given.
        """
        tracks = assemble_tracks(self._expand_paths(paths, on_track))
        logger.info(f"Found {len(tracks)} tracks in dropped paths")
        return tracks

    def _expand_paths(self, paths: Iterable[Union[str, Path]], on_track: OnTrack) -> Iterator[Path]:
        for path in map(Path, paths):
            try:
                mode = path.stat().st_mode
            except OSError as e:
                logger.debug(f"Ignoring {path}: {e}")
                continue

            if stat.S_ISDIR(mode):
                yield from scan_audio_files(path, on_file=on_track)
            elif stat.S_ISREG(mode):
                if is_audio(path):
                    if on_track:
                        on_track(path)
                    yield path
            else:
                logger.debug(f"Ignoring {path}: not a file or directory")

    def get_cover_art(self, path: Union[str, Path]) -> Optional[CoverArt]:
        return read_cover(path)

    def ensure_backgrounds_dir(self) -> Path:
        """Create the backgrounds folder if it does not exist yet."""
        try:
            if not self.backgrounds_dir.is_dir():
                logger.info(f"Creating backgrounds folder: {self.backgrounds_dir}")
                self.backgrounds_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackgroundsDirError(
                f"Cannot create backgrounds folder {self.backgrounds_dir}: {e}",
                details={"path": str(self.backgrounds_dir)},
            ) from e
        return self.backgrounds_dir

    def list_backgrounds(self) -> list[BackgroundImage]:
        """List images in the backgrounds folder, sorted by name."""
        backgrounds_dir = self.ensure_backgrounds_dir()
        backgrounds = [
            BackgroundImage(path=lossy_text(str(path.absolute())), name=lossy_text(path.stem))
            for path in scan_image_files(backgrounds_dir)
        ]
        backgrounds.sort(key=lambda image: image.name.casefold())
        return backgrounds

    def list_background_paths(self, root: Union[str, Path]) -> list[str]:
        """List image paths directly inside an arbitrary folder, sorted case-insensitively."""
        paths = [lossy_text(str(path.absolute())) for path in scan_image_files(root)]
        paths.sort(key=str.casefold)
        return paths
