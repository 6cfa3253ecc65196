"""Command-line interface for the Monochrome indexer.

Every command prints its result as JSON on stdout, which is what the player
front end consumes. Logs and progress bars go to stderr.
"""

import base64
import json
import logging
from contextlib import contextmanager
from pathlib import Path

import click
from tqdm import tqdm

from . import __version__
from .config import APP_DIR_ENV, resolve_app_dir
from .exceptions import IndexerError
from .library import MediaLibrary

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def echo_json(value):
    click.echo(json.dumps(value, indent=2, ensure_ascii=False))


@contextmanager
def reported_errors():
    """Turn a hard failure into a single error message for the caller."""
    try:
        yield
    except IndexerError as e:
        logger.debug(f"{type(e).__name__}: {e.details}")
        raise click.ClickException(e.message) from e


@contextmanager
def progress_bar(enabled: bool):
    """Yield an on_track callback that advances a progress bar, or None."""
    if not enabled:
        yield None
        return
    with tqdm(desc="Reading tags", unit="file") as pbar:
        yield lambda _path: pbar.update(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--app-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=APP_DIR_ENV,
    help="Application folder (default: folder of the executable)"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging"
)
@click.pass_context
def cli(ctx: click.Context, app_dir: Path, verbose: bool):
    """Monochrome Indexer

    Discover music, tags, cover art and background images for the player.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    with reported_errors():
        ctx.obj = MediaLibrary(app_dir if app_dir else resolve_app_dir())


@cli.command()
@click.argument("music_path", type=click.Path(path_type=Path))
@click.option("--progress", is_flag=True, help="Show a progress bar on stderr")
@click.pass_obj
def scan(library: MediaLibrary, music_path: Path, progress: bool):
    """Scan a music folder and its subfolders.

    MUSIC_PATH: Path to your music folder
    """
    with reported_errors(), progress_bar(progress) as on_track:
        tracks = library.scan_directory(music_path, on_track=on_track)
    echo_json([track.to_dict() for track in tracks])


@cli.command()
@click.option("--progress", is_flag=True, help="Show a progress bar on stderr")
@click.pass_obj
def local(library: MediaLibrary, progress: bool):
    """Scan the application folder and its subfolders."""
    with reported_errors(), progress_bar(progress) as on_track:
        tracks = library.scan_local(on_track=on_track)
    echo_json([track.to_dict() for track in tracks])


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--progress", is_flag=True, help="Show a progress bar on stderr")
@click.pass_obj
def files(library: MediaLibrary, paths: tuple[Path, ...], progress: bool):
    """Scan dropped files and folders.

    PATHS: Audio files and/or folders, folders are scanned recursively

    Example:

      monochrome-indexer files ~/Downloads/song.mp3 ~/Music/Album
    """
    with reported_errors(), progress_bar(progress) as on_track:
        tracks = library.scan_files(paths, on_track=on_track)
    echo_json([track.to_dict() for track in tracks])


@cli.command()
@click.argument("audio_file", type=click.Path(path_type=Path))
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the decoded picture to this file instead of printing JSON"
)
@click.pass_obj
def cover(library: MediaLibrary, audio_file: Path, output: Path):
    """Print the embedded cover art of an audio file.

    Prints null when the file has no JPEG or PNG cover.
    """
    cover_art = library.get_cover_art(audio_file)

    if output is None:
        echo_json(cover_art.to_dict() if cover_art else None)
        return

    if cover_art is None:
        raise click.ClickException(f"No cover art in {audio_file}")

    try:
        output.write_bytes(base64.b64decode(cover_art.data))
    except OSError as e:
        raise click.ClickException(f"Cannot write {output}: {e.strerror or e}") from e
    click.echo(f"Wrote {cover_art.mime_type} cover to {output}", err=True)


@cli.command()
@click.argument("folder", required=False, type=click.Path(path_type=Path))
@click.pass_obj
def backgrounds(library: MediaLibrary, folder: Path):
    """List background images.

    Without FOLDER, lists the backgrounds folder next to the application
    (creating it if needed). With FOLDER, prints the image paths found
    directly inside it.
    """
    with reported_errors():
        if folder is None:
            echo_json([image.to_dict() for image in library.list_backgrounds()])
        else:
            echo_json(library.list_background_paths(folder))


@cli.command("app-dir")
@click.pass_obj
def app_dir(library: MediaLibrary):
    """Print the application folder."""
    click.echo(library.get_app_dir())


if __name__ == "__main__":
    cli()
