import statistics

import pytest

from lottieview.stats import (
    SLIDING_WINDOW_SIZE,
    Snapshot,
    Stats,
    bar_color,
    round_up,
)


@pytest.mark.parametrize("n", [1, 4, 5, 6, 10, 11, 99, 100, 101])
@pytest.mark.parametrize("f", [1, 3, 5])
def test_round_up_invariants(n, f):
    result = round_up(n, f)
    assert result % f == 0
    assert result >= n
    assert result - n < f


@pytest.mark.parametrize("n, f", [(0, 5), (5, 0)])
def test_round_up_rejects_non_positive(n, f):
    with pytest.raises(ValueError):
        round_up(n, f)


@pytest.mark.parametrize(
    "sample, color",
    [
        (0, (100, 143, 255)),
        (16_667, (100, 143, 255)),
        (16_668, (255, 176, 0)),
        (33_334, (255, 176, 0)),
        (33_335, (220, 38, 127)),
    ],
)
def test_bar_color_thresholds(sample, color):
    assert bar_color(sample) == color


def test_snapshot_reflects_samples():
    stats = Stats()
    data = [1000, 3000, 2000]
    for sample in data:
        stats.add_sample(sample)
    snap = stats.snapshot()
    assert snap.frame_time_ms == pytest.approx(statistics.mean(data) * 0.001)
    assert snap.fps == pytest.approx(1000.0 / snap.frame_time_ms)
    assert snap.frame_time_min_ms == pytest.approx(min(data) * 0.001)
    assert snap.frame_time_max_ms == pytest.approx(max(data) * 0.001)
    assert list(stats.samples()) == data


def test_window_keeps_latest_samples():
    stats = Stats()
    data = list(range(1, SLIDING_WINDOW_SIZE + 51))
    for sample in data:
        stats.add_sample(sample)
    window = list(stats.samples())
    assert window == data[-SLIDING_WINDOW_SIZE:]
    assert stats.snapshot().frame_time_ms == pytest.approx(statistics.mean(window) * 0.001)


def test_clear_min_and_max():
    stats = Stats()
    stats.add_sample(500)
    stats.add_sample(9000)
    stats.clear_min_and_max()
    stats.add_sample(4000)
    snap = stats.snapshot()
    assert snap.frame_time_min_ms == pytest.approx(4000 * 0.001)
    assert snap.frame_time_max_ms == pytest.approx(4000 * 0.001)


def test_negative_sample_rejected():
    with pytest.raises(ValueError):
        Stats().add_sample(-1)


def test_display_max_uses_max_without_spike():
    snap = Snapshot(fps=60.0, frame_time_ms=10.0, frame_time_min_ms=8.0, frame_time_max_ms=20.0)
    assert snap.display_max() == 20.0


def test_display_max_caps_spikes_to_multiple_of_five():
    snap = Snapshot(fps=60.0, frame_time_ms=10.0, frame_time_min_ms=8.0, frame_time_max_ms=100.0)
    result = snap.display_max()
    assert result % 5 == 0
    assert 10.0 < result < 100.0


def test_labels():
    snap = Snapshot(fps=60.0, frame_time_ms=10.0, frame_time_min_ms=8.0, frame_time_max_ms=20.0)
    labels = snap.labels(800.0, 600.0, True, "msaa16")
    assert labels[3] == "VSync: on"
    assert labels[4] == "AA method: 16xMSAA"
    assert labels[5] == "Resolution: 800x600"
    assert labels[0].startswith("Frame Time: ")
    off = snap.labels(800.0, 600.0, False, "area")
    assert off[3] == "VSync: off"
    assert off[4] == "AA method: Analytic Area"


def test_labels_reject_unknown_aa():
    snap = Snapshot(fps=60.0, frame_time_ms=10.0, frame_time_min_ms=8.0, frame_time_max_ms=20.0)
    with pytest.raises(ValueError):
        snap.labels(800.0, 600.0, True, "fxaa")