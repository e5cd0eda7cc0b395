# lottieview

Small building blocks for working with Lottie animations:

- decoding gradient colour stops and bezier paths from Lottie data,
- tracking multi-touch gestures and frame-time statistics for an interactive
  viewer,
- a catalogue of animated emoji and a command that downloads them (or any
  other Lottie file).

Plain Python, standard library only.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `lottieview.gradient`

- `conv_stops(value, count)` decodes the flat gradient list (`offset, r, g, b`
  repeated `count` times, optionally followed by `offset, alpha` pairs) into a
  list of `(offset, r, g, b, alpha)` tuples. Each stop takes the lowest alpha
  interpolated from the trailing pairs, with values snapped to the end alphas
  near offsets 0 and 1. If the data holds fewer than `count` colour stops, the
  stops read are returned fully opaque. A negative `count` raises
  `ValueError`.
- `normalize_to_range(a, b, x)` gives where `x` lies between `a` and `b`
  (0 at `a`, 1 at `b`), or `0.0` when `a == b`.
- `lerp(a, b, t)` is linear interpolation.

```python
from lottieview.gradient import conv_stops

conv_stops([0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0], 2)
# [(0.0, 1.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0, 1.0)]
```

### `lottieview.geometry`

`conv_spline(vertices, in_tangents, out_tangents, closed)` flattens a Lottie
bezier into a list of points, three per vertex: the vertex, its in tangent
and its out tangent. Missing tangents count as `(0, 0)`, surplus ones are
ignored, and a `closed` of `None` means open. It returns `(points, closed)`;
a coordinate list shorter than two raises `ValueError`.

### `lottieview.touch`

Multi-touch gesture tracking for pan, pinch-zoom and rotate.

- `TouchState.add_event(touch_id, phase, x, y)` records a touch event;
  `phase` is a `TouchPhase` (`STARTED`, `MOVED`, `ENDED`, `CANCELLED`) or its
  string value.
- `TouchState.end_frame()` advances the gesture; call it once per frame.
- `TouchState.info()` returns a `MultiTouchInfo` (`num_touches`,
  `zoom_delta`, `zoom_delta_2d`, `rotation_delta`, `translation_delta`,
  `zoom_centre`) for the last frame, or `None` when no touch is active.
  The frame in which fingers are added or removed reports no change.
- `PinchType.classify(positions)` tells horizontal, vertical and proportional
  two-finger pinches apart.

### `lottieview.stats`

Frame-time statistics over a sliding window of 100 samples.

```python
from lottieview.stats import Stats

stats = Stats()
stats.add_sample(16_000)  # microseconds
stats.add_sample(18_000)
snapshot = stats.snapshot()
snapshot.frame_time_ms  # 17.0
```

- `Stats.samples()` iterates the window, oldest first;
  `Stats.clear_min_and_max()` forgets the extremes.
- `Snapshot` holds `fps`, `frame_time_ms`, `frame_time_min_ms` and
  `frame_time_max_ms`. `Snapshot.labels(viewport_width, viewport_height,
  vsync, aa_method)` gives the overlay text lines (`aa_method` is `"area"`,
  `"msaa8"` or `"msaa16"`), and `Snapshot.display_max()` the graph's upper
  bound in milliseconds.
- `bar_color(sample_us)` gives the RGB colour band of a sample and
  `round_up(n, f)` rounds `n` up to a multiple of `f`.

### `lottieview.catalog`

`default_downloads()` lists the built-in set of animated Noto emoji, each a
`LottieDownload` with `name`, `url` and `builtin` (a `BuiltinLottieProps`
with expected size, licence and origin). `noto_asset(name, asset_id, size)`
builds one entry, and `LottieDownload.file_path(directory)` gives the `.json`
path it is stored under.

### `lottieview.download`

- `parse_download(value)` accepts `name@url`, or a bare URL whose last path
  segment (without `.json`) becomes the name.
- `parse_size("10 MB")` and `format_size(37328)` convert sizes; decimal
  (`KB`, `MB`, ...) and binary (`KiB`, `MiB`, ...) units are understood.
- `fetch(download, directory, size_limit)` downloads one file and returns
  its path. Catalogue files must have exactly their known size; others may
  not exceed `size_limit`. Existing files are never overwritten. Failures
  raise `DownloadError`.
- `run_downloads(downloads, directory, size_limit, auto, confirm)` fetches
  the given downloads, or the missing catalogue files when `downloads` is
  `None`, and returns the number completed.

## Command line

```
lottieview-download [--directory DIR] [--auto] [--size-limit SIZE] [DOWNLOAD ...]
```

With no downloads given, the command lists the catalogue files not yet in
`DIR` (default `assets/downloads`) and asks before fetching them, unless
`--auto` is set. Each `DOWNLOAD` is `name@url` or a URL. The size limit
(default `10 MB`) applies to each file and is ignored for catalogue files.
When a download fails, you are asked whether to go on; with `--auto` the
command stops. The exit status is 1 after a failed download.

## What it does not do

The package does not read or render Lottie files as a whole: there is no
JSON loader, no scene model and no viewer window. It provides the decoding
helpers, gesture and statistics logic, and the downloader described above.