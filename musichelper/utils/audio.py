"""
Audio Utilities

Level metering helpers for the playback pipeline: RMS level of a window of
signed 16-bit PCM samples, and loading such a window from an audio file.
"""

import math
import numbers
from typing import Sequence, Union
from pathlib import Path

import numpy as np
import soundfile as sf

from ..core.exceptions import InvalidArgumentError, AudioFileError


PCM_DTYPE = 'int16'
PCM_MIN = -32768
PCM_MAX = 32767

SampleWindow = Union[Sequence[int], np.ndarray]


def _check_frame_count(frame_count: int) -> int:
    if isinstance(frame_count, bool) or not isinstance(frame_count, numbers.Integral):
        raise InvalidArgumentError("Frame count must be an integer",
                                   details=f"got {type(frame_count).__name__}")
    if frame_count <= 0:
        raise InvalidArgumentError("Frame count must be positive", details=f"got {frame_count}")
    return int(frame_count)


def compute_rms_level(samples: SampleWindow, frame_count: int) -> int:
    """
    Calculate the RMS audio level of the leading frames of a sample window

    The window mean is computed with integer division truncating toward
    zero, then the squared deviations from it are averaged in floating point.
    Samples past ``frame_count`` are ignored.

    Args:
        samples: Signed 16-bit PCM samples
        frame_count: Number of leading samples to measure

    Returns:
        The RMS level, rounded half up

    Raises:
        InvalidArgumentError: If frame_count is not in 1..len(samples) or the
            samples are not 16-bit integers
    """
    frame_count = _check_frame_count(frame_count)

    try:
        window = np.asarray(samples)
    except ValueError as e:
        raise InvalidArgumentError("Sample window is not an array of samples", details=str(e)) from e

    if window.ndim != 1:
        raise InvalidArgumentError("Sample window must be one-dimensional",
                                   details=f"got shape {window.shape}")
    if frame_count > window.size:
        raise InvalidArgumentError("Frame count exceeds the sample window",
                                   details=f"{frame_count} frames requested, {window.size} available")
    if window.dtype.kind not in "iu":
        raise InvalidArgumentError("Samples must be integers", details=f"got dtype {window.dtype}")

    window = window[:frame_count]
    low, high = int(window.min()), int(window.max())
    if low < PCM_MIN or high > PCM_MAX:
        raise InvalidArgumentError("Samples must fit in 16 bits",
                                   details=f"range {low}..{high}")

    window = window.astype(np.int64)

    total = int(window.sum())
    mean = abs(total) // frame_count
    if total < 0:
        mean = -mean

    deviations = window.astype(np.float64) - mean
    mean_square = float(np.dot(deviations, deviations)) / frame_count

    return int(math.sqrt(mean_square) + 0.5)


def load_pcm_window(filepath: Union[str, Path], frame_count: int, offset: int = 0) -> np.ndarray:
    """
    Read a window of 16-bit PCM samples from an audio file

    Multichannel files yield their first channel. The window is shorter than
    frame_count when the file ends early.

    Args:
        filepath: Path to a file soundfile can decode
        frame_count: Number of frames to read
        offset: First frame to read

    Returns:
        One-dimensional int16 array

    Raises:
        InvalidArgumentError: If frame_count or offset is out of range
        AudioFileError: If the file cannot be read
    """
    frame_count = _check_frame_count(frame_count)
    if offset < 0:
        raise InvalidArgumentError("Offset cannot be negative", details=f"got {offset}")

    try:
        data, _ = sf.read(str(filepath), frames=frame_count, start=offset,
                          dtype=PCM_DTYPE, always_2d=True)
    except (RuntimeError, OSError) as e:
        raise AudioFileError("Could not read PCM samples", details=str(e)) from e

    return np.ascontiguousarray(data[:, 0])


__all__ = [
    'compute_rms_level',
    'load_pcm_window',
    'PCM_DTYPE',
    'PCM_MIN',
    'PCM_MAX'
]
