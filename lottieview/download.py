"""Fetching Lottie files from the web, either a given list or the built-in catalogue."""

from __future__ import annotations

import argparse
import re
import sys
import urllib.request
from collections.abc import Callable, Sequence
from os import PathLike
from pathlib import Path
from typing import BinaryIO

from .catalog import LottieDownload, default_downloads

DEFAULT_SIZE_LIMIT = "10 MB"
DEFAULT_DIRECTORY = Path("assets") / "downloads"

_CHUNK = 64 * 1024

_DECIMAL_UNITS = ("KB", "MB", "GB", "TB", "PB")
_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Za-z]*)\s*$")
_SIZE_MULTIPLIERS = {
    "": 1,
    "b": 1,
    "k": 1000,
    "kb": 1000,
    "m": 1000**2,
    "mb": 1000**2,
    "g": 1000**3,
    "gb": 1000**3,
    "t": 1000**4,
    "tb": 1000**4,
    "p": 1000**5,
    "pb": 1000**5,
    "ki": 1024,
    "kib": 1024,
    "mi": 1024**2,
    "mib": 1024**2,
    "gi": 1024**3,
    "gib": 1024**3,
    "ti": 1024**4,
    "tib": 1024**4,
    "pi": 1024**5,
    "pib": 1024**5,
}

Confirm = Callable[[str], bool]


class DownloadError(Exception):
    """A download could not be completed."""


def parse_download(value: str) -> LottieDownload:
    """Parse ``name@url`` or a bare URL whose last path segment names the file."""
    name, sep, url = value.partition("@")
    if sep:
        return LottieDownload(name=name, url=url)
    end = value.rfind(".json")
    url_with_name = value if end == -1 else value[:end]
    name = url_with_name.rsplit("/", 1)[-1]
    return LottieDownload(name=name, url=value)


def parse_size(text: str) -> int:
    """Parse a size such as ``"10 MB"`` or ``"512 KiB"`` into a byte count."""
    match = _SIZE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a valid size: {text!r}")
    number, unit = match.groups()
    try:
        multiplier = _SIZE_MULTIPLIERS[unit.lower()]
    except KeyError:
        raise ValueError(f"unknown size unit {unit!r} in {text!r}") from None
    return int(float(number) * multiplier)


def _format_with(size: int, base: int, units: Sequence[str]) -> str:
    if size < base:
        return f"{size} B"
    value = float(size)
    unit = units[0]
    for unit in units:
        value /= base
        if value < base:
            break
    return f"{value:.2f} {unit}"


def format_size(size: int) -> str:
    """Human-readable size in decimal units, such as ``"37.33 KB"``."""
    return _format_with(int(size), 1000, _DECIMAL_UNITS)


def _format_binary(size: int) -> str:
    return _format_with(int(size), 1024, _BINARY_UNITS)


def _open(url: str, method: str):
    try:
        return urllib.request.urlopen(urllib.request.Request(url, method=method))
    except (OSError, ValueError) as exc:
        raise DownloadError(f"Request to {url} failed: {exc}") from exc


def _copy_limited(source: BinaryIO, target: BinaryIO, limit: int) -> int:
    written = 0
    while written < limit:
        chunk = source.read(min(_CHUNK, limit - written))
        if not chunk:
            break
        target.write(chunk)
        written += len(chunk)
    return written


def _reported_length(response) -> int | None:
    length = response.headers.get("content-length")
    if length is None or not length.strip().isdigit():
        return None
    return int(length.strip())


def fetch(
    download: LottieDownload, directory: str | PathLike[str], size_limit: int
) -> Path:
    """Download ``download`` into ``directory`` and return the written path.

    Catalogued files must match their known size exactly; others may not
    exceed ``size_limit`` bytes. The target file must not exist yet.
    """
    limit = int(size_limit)
    exact = download.builtin is not None
    if download.builtin is not None:
        limit = download.builtin.expected_size

    # Skip the transfer when the server already reports the wrong size.
    if exact:
        with _open(download.url, "HEAD") as head:
            reported = _reported_length(head)
        if reported is not None and reported != limit:
            raise DownloadError(
                "Size is not as expected for download. "
                f"Expected {_format_binary(limit)}, "
                f"server reported {_format_binary(reported)}"
            )

    path = download.file_path(directory)
    try:
        out = path.open("xb")
    except OSError as exc:
        raise DownloadError(f"Creating file {path}: {exc}") from exc

    with out, _open(download.url, "GET") as response:
        try:
            written = _copy_limited(response, out, limit)
            overflow = response.read(1)
        except OSError as exc:
            raise DownloadError(f"Reading {download.url} failed: {exc}") from exc
        if overflow:
            raise DownloadError("Size limit exceeded")

    if exact and written != limit:
        raise DownloadError(
            "Builtin downloaded file was not as expected. "
            f"Expected {limit}, received {written}."
        )
    return path


def _ask(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _print_summary(completed: int, failed: int, total: int) -> None:
    print(f"{completed} downloads complete")
    if failed > 0:
        print(f"{failed} downloads failed")
    remaining = total - (completed + failed)
    if remaining > 0:
        print(f"{remaining} downloads skipped")


def run_downloads(
    downloads: Sequence[str] | None,
    directory: str | PathLike[str],
    size_limit: int,
    auto: bool,
    confirm: Confirm | None,
) -> int:
    """Fetch the given downloads, or the missing catalogue files when none are given.

    ``confirm`` answers yes/no prompts; without it the user is asked on the
    terminal. Returns the number of completed downloads. When a download
    fails and the user (or ``auto``) chooses not to go on, its error is raised.
    """
    ask = confirm if confirm is not None else _ask
    to_download: list[LottieDownload] = []
    if downloads is not None:
        to_download = [parse_download(item) for item in downloads]
    else:
        pending = [
            item
            for item in default_downloads()
            if not item.file_path(directory).exists()
        ]
        accepted = auto
        if not accepted:
            if pending:
                print(
                    "Would you like to download a set of default lottie files? "
                    "These files are:"
                )
                total_bytes = 0
                for item in pending:
                    builtin = item.builtin
                    assert builtin is not None
                    print(
                        f"{item.name} ({format_size(builtin.expected_size)}) "
                        f"under license {builtin.license} from {builtin.info}"
                    )
                    total_bytes += builtin.expected_size
                accepted = ask(
                    "Would you like to download a set of default lottie files, "
                    f"as explained above? ({format_size(total_bytes)})"
                )
            else:
                print("Nothing to download! All default downloads already created")
        if accepted:
            to_download = pending

    completed = 0
    failed = 0
    for index, item in enumerate(to_download):
        print(f"{index}: Downloading {item.name} from {item.url}")
        try:
            fetch(item, directory, size_limit)
        except DownloadError as exc:
            failed += 1
            print(f"Download failed with error: {exc}", file=sys.stderr)
            go_on = False if auto else ask("Would you like to try other downloads?")
            if not go_on:
                _print_summary(completed, failed, len(to_download))
                raise
        else:
            completed += 1
    _print_summary(completed, failed, len(to_download))
    return completed


def _size_arg(text: str) -> int:
    try:
        return parse_size(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="lottieview-download",
        description="Download Lottie files for testing.",
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=DEFAULT_DIRECTORY,
        help="Directory to download the files into",
    )
    parser.add_argument(
        "downloads",
        nargs="*",
        help="Files to download. Use name@url to choose the file name",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Install the default set of files without asking",
    )
    parser.add_argument(
        "--size-limit",
        type=_size_arg,
        default=parse_size(DEFAULT_SIZE_LIMIT),
        help="Size limit for each file (ignored for the default files)",
    )
    args = parser.parse_args(argv)
    try:
        run_downloads(
            args.downloads or None,
            args.directory,
            args.size_limit,
            args.auto,
            None,
        )
    except DownloadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0