from pathlib import Path

import pytest

from lottieview.catalog import (
    BuiltinLottieProps,
    LottieDownload,
    default_downloads,
    noto_asset,
)


def _by_name(name):
    matches = [d for d in default_downloads() if d.name == name]
    assert len(matches) == 1
    return matches[0]


def test_noto_asset_builds_url_and_props():
    download = noto_asset("Smile", "1f600", 37328)
    assert download.name == "Smile"
    assert download.url == "https://fonts.gstatic.com/s/e/notoemoji/latest/1f600/lottie.json"
    assert download.builtin == BuiltinLottieProps(
        expected_size=37328,
        license="CC BY 4.0",
        info="https://googlefonts.github.io/noto-emoji-animation/",
    )


def test_default_downloads_first_and_last():
    downloads = default_downloads()
    assert downloads[0] == noto_asset("Smile", "1f600", 37328)
    assert downloads[-1] == noto_asset("Chequered-flag", "1f3c1", 328109)


def test_tiger_entry():
    tiger = _by_name("Tiger")
    assert tiger.url.endswith("/1f405/lottie.json")
    assert tiger.builtin is not None and tiger.builtin.expected_size == 428543


def test_multi_codepoint_entry():
    clouds = _by_name("Face-in-clouds")
    assert "/1f636_200d_1f32b_fe0f/" in clouds.url
    assert clouds.builtin.expected_size == 135831


def test_all_entries_share_licence_and_url_shape():
    downloads = default_downloads()
    assert downloads
    for download in downloads:
        assert download.builtin is not None
        assert download.builtin.license == "CC BY 4.0"
        assert download.builtin.expected_size > 0
        assert download.url.startswith("https://fonts.gstatic.com/s/e/notoemoji/latest/")
        assert download.url.endswith("/lottie.json")


def test_default_downloads_returns_fresh_equal_lists():
    first = default_downloads()
    second = default_downloads()
    assert first == second
    first.clear()
    assert default_downloads() == second


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Smile", "Smile.json"),
        ("Paw Prints", "Paw Prints.json"),
        ("Muscle-1", "Muscle-1.json"),
        ("scene.txt", "scene.json"),
    ],
)
def test_file_path_uses_json_extension(tmp_path, name, expected):
    download = LottieDownload(name=name, url="https://example.com/a.json")
    assert download.file_path(tmp_path) == tmp_path / expected


def test_file_path_accepts_string_directory():
    download = noto_asset("Wave", "1f44b", 14645)
    assert download.file_path("downloads") == Path("downloads") / "Wave.json"


def test_user_download_has_no_builtin():
    download = LottieDownload(name="custom", url="https://example.com/custom.json")
    assert download.builtin is None