import numpy as np
import pytest
import soundfile as sf
from mutagen.flac import FLAC

from musichelper.core.exceptions import UnresolvedReferenceError
from musichelper.core.models import SongCollection
from musichelper.services.artist_inference import ArtistInferenceService, infer_main_artist
from musichelper.services.tag_resolver import TagArtistResolver


def write_flac(path, artist=None, title=None):
    sf.write(str(path), np.zeros(800, dtype=np.int16), 8000, format='FLAC', subtype='PCM_16')
    audio = FLAC(str(path))
    if artist is not None:
        audio["artist"] = artist
    if title is not None:
        audio["title"] = title
    audio.save()
    return path


@pytest.fixture
def album_dir(tmp_path):
    write_flac(tmp_path / "01.flac", artist="Daft Punk", title="One")
    write_flac(tmp_path / "02.flac", artist="Daft Punk", title="Two")
    write_flac(tmp_path / "03.flac", artist="  Guest  ", title="Three")
    write_flac(tmp_path / "04.flac")
    (tmp_path / "notes.flac").write_bytes(b"not audio at all")
    return tmp_path


def test_resolves_artist_tag(album_dir):
    resolver = TagArtistResolver(str(album_dir))
    song = resolver("01.flac")
    assert song.artist == "Daft Punk"
    assert song.title == "One"
    assert song.duration_ms == 100


def test_strips_artist_and_maps_missing_to_none(album_dir):
    resolver = TagArtistResolver(str(album_dir))
    assert resolver("03.flac").artist == "Guest"
    assert resolver("04.flac").artist is None


def test_absolute_paths_ignore_base_dir(album_dir):
    resolver = TagArtistResolver("/nonexistent")
    assert resolver(str(album_dir / "02.flac")).artist == "Daft Punk"


@pytest.mark.parametrize("ref", ["missing.flac", "notes.flac"])
def test_unresolvable_files_raise(album_dir, ref):
    resolver = TagArtistResolver(str(album_dir))
    with pytest.raises(UnresolvedReferenceError):
        resolver(ref)


def test_results_are_memoised(album_dir):
    resolver = TagArtistResolver(str(album_dir))
    first = resolver("01.flac")
    (album_dir / "01.flac").unlink()
    assert resolver("01.flac") is first

    resolver.clear()
    with pytest.raises(UnresolvedReferenceError):
        resolver("01.flac")


def test_inference_over_tagged_files(album_dir):
    refs = ["01.flac", "02.flac", "missing.flac", "03.flac", "notes.flac"]
    resolver = TagArtistResolver(str(album_dir))

    assert infer_main_artist(refs, resolver, len(refs)) == "Daft Punk"

    result = ArtistInferenceService().explain(SongCollection(name="Discovery", songs=refs), resolver)
    assert result.skipped == 2
    assert result.counts == {"Daft Punk": 2, "Guest": 1}
