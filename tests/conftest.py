"""Test configuration and fixtures"""

import tempfile
from pathlib import Path

import pytest
from mutagen.id3 import APIC, ID3, TALB, TIT2, TPE1


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def touch(path: Path, data: bytes = b"") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def write_mp3(path: Path, title=None, artist=None, album=None, pictures=()) -> Path:
    """
    Write a file carrying only an ID3 tag.

    pictures: (mime, data) pairs, stored in the given order as long as each
    payload is larger than the previous one.
    """
    touch(path)
    tags = ID3()
    if title is not None:
        tags.add(TIT2(encoding=3, text=[title]))
    if artist is not None:
        tags.add(TPE1(encoding=3, text=[artist]))
    if album is not None:
        tags.add(TALB(encoding=3, text=[album]))
    for index, (mime, data) in enumerate(pictures):
        tags.add(APIC(encoding=3, mime=mime, type=3, desc=f"cover{index}", data=data))
    tags.save(str(path))
    return path


@pytest.fixture
def make_file():
    """Factory for plain files (contents are irrelevant to the scanner)"""
    return touch


@pytest.fixture
def make_mp3():
    """Factory for ID3-tagged mp3 files"""
    return write_mp3
