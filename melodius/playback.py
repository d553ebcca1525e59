"""Splitting a recording into fixed-size output buffers for playback."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

MONO = 1
STEREO = 2


def iter_buffers(
    samples: Sequence[float], num_channels: int, frames_per_buffer: int
) -> Iterator[list[float]]:
    """Yield interleaved output buffers of ``frames_per_buffer`` frames.

    The last buffer is padded with silence when the recording does not fill it.
    Nothing is yielded once every frame has been delivered.
    """
    if num_channels not in (MONO, STEREO):
        raise ValueError(f"unsupported channel count: {num_channels}")
    if frames_per_buffer <= 0:
        raise ValueError("frames_per_buffer must be positive")
    if len(samples) % num_channels:
        raise ValueError("sample count is not a whole number of frames")

    total_frames = len(samples) // num_channels
    buffer_len = frames_per_buffer * num_channels
    for start_frame in range(0, total_frames, frames_per_buffer):
        start = start_frame * num_channels
        chunk = list(samples[start : start + buffer_len])
        chunk.extend([0] * (buffer_len - len(chunk)))
        yield chunk