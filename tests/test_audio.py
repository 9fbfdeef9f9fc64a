import numpy as np
import pytest
import soundfile as sf

from musichelper.core.exceptions import InvalidArgumentError, AudioFileError
from musichelper.utils.audio import compute_rms_level, load_pcm_window


@pytest.mark.parametrize(
    "samples,frame_count,expected",
    [
        ([0, 0, 0, 0], 4, 0),
        ([100, 100, 100], 3, 0),
        ([-2000] * 16, 16, 0),
        ([1000, -1000], 2, 1000),
        ([1000, -1000, 1000, -1000], 4, 1000),
        ([3, 0], 2, 2),          # mean truncates to 1, deviations 2 and -1
        ([0, 0, 0, 0, -1], 5, 0),  # mean truncates toward zero, not down to -1
        ([0, 1], 2, 1),
        ([32767, -32768], 2, 32768),
    ],
)
def test_compute_rms_level(samples, frame_count, expected):
    assert compute_rms_level(samples, frame_count) == expected


def test_compute_rms_level_ignores_trailing_samples():
    samples = [10, 10, 10, 30000, -30000]
    assert compute_rms_level(samples, 3) == 0


def test_compute_rms_level_accepts_int16_arrays_without_overflow():
    samples = np.full(4096, 32767, dtype=np.int16)
    samples[::2] = -32768
    assert compute_rms_level(samples, len(samples)) == 32768


def test_compute_rms_level_is_non_negative():
    rng = np.random.default_rng(1234)
    for _ in range(50):
        window = rng.integers(-32768, 32768, size=256, dtype=np.int16)
        frames = int(rng.integers(1, 257))
        assert compute_rms_level(window, frames) >= 0


@pytest.mark.parametrize("samples", [[], [0], [1, 2, 3], np.zeros(10, dtype=np.int16)])
def test_compute_rms_level_rejects_zero_frame_count(samples):
    with pytest.raises(InvalidArgumentError):
        compute_rms_level(samples, 0)


@pytest.mark.parametrize("frame_count", [-1, 4, 1.0, True])
def test_compute_rms_level_rejects_bad_frame_counts(frame_count):
    with pytest.raises(InvalidArgumentError):
        compute_rms_level([1, 2, 3], frame_count)


def test_compute_rms_level_rejects_multidimensional_windows():
    with pytest.raises(InvalidArgumentError):
        compute_rms_level([[1, 2], [3, 4]], 2)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        compute_rms_level([1], 0)


@pytest.fixture
def stereo_wav(tmp_path):
    path = tmp_path / "tone.wav"
    left = np.array([100, -100, 200, -200, 300, -300], dtype=np.int16)
    right = np.zeros_like(left)
    sf.write(str(path), np.column_stack([left, right]), 8000, subtype='PCM_16')
    return path


def test_load_pcm_window_reads_first_channel(stereo_wav):
    window = load_pcm_window(stereo_wav, 4)
    assert window.dtype == np.int16
    assert window.tolist() == [100, -100, 200, -200]


def test_load_pcm_window_with_offset(stereo_wav):
    assert load_pcm_window(stereo_wav, 2, offset=4).tolist() == [300, -300]


def test_load_pcm_window_short_file(stereo_wav):
    assert len(load_pcm_window(stereo_wav, 100)) == 6


def test_load_pcm_window_feeds_level_meter(stereo_wav):
    window = load_pcm_window(stereo_wav, 2)
    assert compute_rms_level(window, len(window)) == 100


def test_load_pcm_window_missing_file(tmp_path):
    with pytest.raises(AudioFileError):
        load_pcm_window(tmp_path / "missing.wav", 16)


def test_load_pcm_window_rejects_bad_arguments(stereo_wav):
    with pytest.raises(InvalidArgumentError):
        load_pcm_window(stereo_wav, 0)
    with pytest.raises(InvalidArgumentError):
        load_pcm_window(stereo_wav, 4, offset=-1)



@pytest.mark.parametrize(
    "samples",
    [
        [1.9, 2.0, 3.0],
        ["5", "6", "7"],
        np.array([0.0, 1.0, 2.0]),
        [True, False, True],
    ],
)
def test_compute_rms_level_rejects_non_integer_samples(samples):
    with pytest.raises(InvalidArgumentError):
        compute_rms_level(samples, 3)


@pytest.mark.parametrize(
    "samples",
    [
        [0, 40000, 0],
        [-70000, 0, 0],
        [32768, 0, 0],
        [-32769, 0, 0],
        np.array([0, 65535, 0], dtype=np.uint16),
    ],
)
def test_compute_rms_level_rejects_out_of_range_samples(samples):
    with pytest.raises(InvalidArgumentError):
        compute_rms_level(samples, 3)


def test_compute_rms_level_range_check_covers_measured_frames_only():
    assert compute_rms_level([5, 5, 40000], 2) == 0


def test_compute_rms_level_accepts_numpy_frame_count():
    assert compute_rms_level([1000, -1000], np.int64(2)) == 1000
