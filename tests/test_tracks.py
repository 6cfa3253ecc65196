"""Tests for track assembly and ordering"""

from pathlib import Path

import pytest

from monochrome_indexer.models import TagInfo, Track, lossy_text
from monochrome_indexer.tracks import assemble_tracks, build_track, fallback_title, sort_tracks


def _track(track_id, filename):
    return Track(id=track_id, path=f"/music/{filename}", filename=filename, title=None, artist=None, album=None)


class TestFallbackTitle:
    """Test the filename-derived title"""

    @pytest.mark.parametrize("filename, expected", [
        ("track01.mp3", "track01"),
        ("Track01.MP3", "Track01"),
        ("01. Intro.flac", "01. Intro"),
        ("mix.tar.mp3", "mix.tar"),
        ("noext", "noext"),
    ])
    def test_strips_last_extension(self, filename, expected):
        assert fallback_title(filename) == expected


class TestBuildTrack:
    """Test Track construction from tags"""

    def test_title_falls_back_to_filename(self):
        track = build_track(0, "/music/track01.mp3", TagInfo())
        assert track == Track(
            id=0, path="/music/track01.mp3", filename="track01.mp3",
            title="track01", artist=None, album=None,
        )

    def test_embedded_title_wins(self):
        track = build_track(3, Path("/music/track01.mp3"), TagInfo(title="Song"))
        assert track.title == "Song"
        assert track.id == 3

    def test_artist_and_album_never_synthesized(self):
        track = build_track(0, "/music/Artist - Song.mp3", TagInfo(title="Song"))
        assert track.artist is None
        assert track.album is None

    def test_path_is_absolute(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        track = build_track(0, "song.mp3", TagInfo())
        assert Path(track.path).is_absolute()
        assert track.path == str(Path.cwd() / "song.mp3")

    def test_track_is_immutable(self):
        track = build_track(0, "/music/a.mp3", TagInfo())
        with pytest.raises(AttributeError):
            track.title = "Changed"

    def test_to_dict(self):
        track = build_track(1, "/music/a.mp3", TagInfo(artist="X"))
        assert track.to_dict() == {
            "id": 1, "path": "/music/a.mp3", "filename": "a.mp3",
            "title": "a", "artist": "X", "album": None,
        }


class TestSorting:
    """Test result ordering"""

    def test_case_insensitive(self):
        tracks = [_track(0, "b.mp3"), _track(1, "C.mp3"), _track(2, "A.mp3")]
        assert [t.filename for t in sort_tracks(tracks)] == ["A.mp3", "b.mp3", "C.mp3"]

    def test_ties_keep_discovery_order(self):
        tracks = [_track(0, "a.mp3"), _track(1, "Z.mp3"), _track(2, "A.mp3")]
        assert [t.id for t in sort_tracks(tracks)] == [0, 2, 1]

    def test_assemble_assigns_ids_before_sorting(self):
        tags = {"z.mp3": TagInfo(title="Zed"), "a.mp3": TagInfo()}
        tracks = assemble_tracks(
            [Path("/music/z.mp3"), Path("/music/a.mp3")],
            read=lambda path: tags[path.name],
        )
        assert [(t.id, t.filename, t.title) for t in tracks] == [
            (1, "a.mp3", "a"),
            (0, "z.mp3", "Zed"),
        ]

    def test_assemble_empty(self):
        assert assemble_tracks([]) == []


class TestUndecodableNames:
    """Test filenames that were not valid UTF-8 on disk"""

    def test_surrogates_are_replaced(self):
        track = build_track(0, "/music/caf\udce9.mp3", TagInfo())
        assert track.filename == "caf\ufffd.mp3"
        assert track.title == "caf\ufffd"
        assert track.path == "/music/caf\ufffd.mp3"
        track.filename.encode("utf-8")

    def test_valid_names_are_untouched(self):
        assert lossy_text("Björk - Jóga.mp3") == "Björk - Jóga.mp3"

    def test_unpaired_utf16_surrogate(self):
        assert lossy_text("a\ud800b") == "a?b"
