import pytest

from melodius.playback import iter_buffers


def test_mono_last_buffer_is_padded():
    assert list(iter_buffers([1, 2, 3, 4, 5], 1, 2)) == [[1, 2], [3, 4], [5, 0]]


def test_stereo_frames_stay_interleaved():
    samples = [1, -1, 2, -2, 3, -3]
    assert list(iter_buffers(samples, 2, 2)) == [[1, -1, 2, -2], [3, -3, 0, 0]]


def test_exact_fit_has_no_trailing_buffer():
    assert list(iter_buffers([1, 2, 3, 4], 1, 2)) == [[1, 2], [3, 4]]


def test_empty_recording_yields_nothing():
    assert list(iter_buffers([], 2, 8)) == []


@pytest.mark.parametrize("channels", [1, 2])
@pytest.mark.parametrize("frames", [1, 3, 7, 64])
def test_concatenation_restores_recording(channels, frames):
    samples = [float(i) for i in range(42)]
    buffers = list(iter_buffers(samples, channels, frames))
    assert all(len(b) == frames * channels for b in buffers)
    flat = [s for b in buffers for s in b]
    assert flat[: len(samples)] == samples
    assert all(s == 0 for s in flat[len(samples) :])
    assert len(flat) - len(samples) < frames * channels


def test_rejects_bad_channel_count():
    with pytest.raises(ValueError):
        list(iter_buffers([0, 0, 0], 3, 1))


def test_rejects_non_positive_buffer_size():
    with pytest.raises(ValueError):
        list(iter_buffers([0, 0], 1, 0))


def test_rejects_partial_frame():
    with pytest.raises(ValueError):
        list(iter_buffers([1, 2, 3], 2, 4))