from pathlib import Path

import pytest

from lottieview.catalog import BuiltinLottieProps, LottieDownload
from lottieview.download import (
    DownloadError,
    fetch,
    format_size,
    main,
    parse_download,
    parse_size,
    run_downloads,
)

CONTENT = b'{"v": "5.7.4", "layers": []}'


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    path = src_dir / "anim.json"
    path.write_bytes(CONTENT)
    return path


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


def test_parse_download_with_name():
    item = parse_download("Cat@https://example.com/files/x.json")
    assert item.name == "Cat"
    assert item.url == "https://example.com/files/x.json"
    assert item.builtin is None


def test_parse_download_name_from_url():
    item = parse_download("https://example.com/anim/Dog.json")
    assert item.name == "Dog"
    assert item.url == "https://example.com/anim/Dog.json"


def test_parse_download_without_slash_or_suffix():
    assert parse_download("plain").name == "plain"
    assert parse_download("local.json").name == "local"


def test_parse_size_default_limit():
    assert parse_size("10 MB") == 10_000_000


def test_parse_size_binary_unit():
    assert parse_size("1 KiB") == 1024
    assert parse_size("2kib") == 2 * parse_size("1 KiB")


def test_parse_size_invalid():
    with pytest.raises(ValueError):
        parse_size("lots")
    with pytest.raises(ValueError):
        parse_size("5 parsecs")


def test_format_size_small_is_bytes():
    assert format_size(500) == "500 B"


def test_format_size_round_trip():
    for size in (2_000_000, 37_000, 5_000_000_000):
        assert parse_size(format_size(size)) == size


def test_fetch_writes_file(source_file, dest):
    item = LottieDownload(name="anim", url=source_file.as_uri())
    path = fetch(item, dest, 1000)
    assert path == dest / "anim.json"
    assert path.read_bytes() == CONTENT


def test_fetch_exact_limit_ok(source_file, dest):
    item = LottieDownload(name="anim", url=source_file.as_uri())
    path = fetch(item, dest, len(CONTENT))
    assert path.read_bytes() == CONTENT


def test_fetch_over_limit(source_file, dest):
    item = LottieDownload(name="anim", url=source_file.as_uri())
    with pytest.raises(DownloadError, match="Size limit exceeded"):
        fetch(item, dest, len(CONTENT) - 1)


def test_fetch_refuses_existing_file(source_file, dest):
    (dest / "anim.json").write_bytes(b"old")
    item = LottieDownload(name="anim", url=source_file.as_uri())
    with pytest.raises(DownloadError, match="Creating file"):
        fetch(item, dest, 1000)
    assert (dest / "anim.json").read_bytes() == b"old"


def test_fetch_builtin_size_mismatch(source_file, dest):
    builtin = BuiltinLottieProps(expected_size=len(CONTENT) + 10, license="L", info="I")
    item = LottieDownload(name="anim", url=source_file.as_uri(), builtin=builtin)
    with pytest.raises(DownloadError, match="Size is not as expected"):
        fetch(item, dest, 1000)
    assert not (dest / "anim.json").exists()


def test_fetch_builtin_matching_size_ignores_limit(source_file, dest):
    builtin = BuiltinLottieProps(expected_size=len(CONTENT), license="L", info="I")
    item = LottieDownload(name="anim", url=source_file.as_uri(), builtin=builtin)
    path = fetch(item, dest, 1)
    assert path.read_bytes() == CONTENT


def test_fetch_missing_source(tmp_path, dest):
    item = LottieDownload(name="gone", url=(tmp_path / "missing.json").as_uri())
    with pytest.raises(DownloadError):
        fetch(item, dest, 1000)


def test_run_downloads_explicit(source_file, dest):
    uri = source_file.as_uri()
    count = run_downloads([f"one@{uri}", f"two@{uri}"], dest, 1000, False, None)
    assert count == 2
    assert (dest / "one.json").read_bytes() == CONTENT
    assert (dest / "two.json").read_bytes() == CONTENT


def test_run_downloads_auto_stops_on_failure(source_file, tmp_path, dest):
    bad = (tmp_path / "missing.json").as_uri()
    good = source_file.as_uri()
    with pytest.raises(DownloadError):
        run_downloads([f"bad@{bad}", f"good@{good}"], dest, 1000, True, None)
    assert not (dest / "good.json").exists()


def test_run_downloads_continue_after_failure(source_file, tmp_path, dest):
    bad = (tmp_path / "missing.json").as_uri()
    good = source_file.as_uri()
    prompts = []

    def confirm(prompt):
        prompts.append(prompt)
        return True

    count = run_downloads([f"bad@{bad}", f"good@{good}"], dest, 1000, False, confirm)
    assert count == 1
    assert (dest / "good.json").read_bytes() == CONTENT
    assert prompts == ["Would you like to try other downloads?"]


def test_run_downloads_default_declined(dest):
    prompts = []

    def confirm(prompt):
        prompts.append(prompt)
        return False

    count = run_downloads(None, dest, 1000, False, confirm)
    assert count == 0
    assert len(prompts) == 1
    assert "default lottie files" in prompts[0]
    assert list(dest.iterdir()) == []


def test_main_downloads_file(source_file, dest):
    status = main(["--directory", str(dest), f"saved@{source_file.as_uri()}"])
    assert status == 0
    assert (dest / "saved.json").read_bytes() == CONTENT


def test_main_reports_failure(tmp_path, dest):
    bad = (tmp_path / "missing.json").as_uri()
    status = main(["--directory", str(dest), "--auto", f"bad@{bad}"])
    assert status == 1


def test_main_size_limit_applies(source_file, dest):
    status = main(
        ["--directory", str(dest), "--auto", "--size-limit", "1 B", source_file.as_uri()]
    )
    assert status == 1