#
# Copyright 2021-2023 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program; if not, write to the Free Software Foundation,
# Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#

"""Parser for os-release files.

Format documentation at:

https://www.freedesktop.org/software/systemd/man/os-release.html
"""

from __future__ import annotations

import logging
import os
import pathlib
import weakref
from typing import TYPE_CHECKING, BinaryIO, NamedTuple

from os_release_parser.errors import (
    OsReleaseError,
    OsReleaseIOError,
    OsReleaseNoFileError,
    OsReleaseParseError,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

# /etc takes precedence over /usr/lib
OS_RELEASE_PATHS = (
    pathlib.Path("/etc/os-release"),
    pathlib.Path("/usr/lib/os-release"),
)

QUOTES = ('"', "'")

COMMON_KEYS = (
    "ANSI_COLOR",
    "BUG_REPORT_URL",
    "BUILD_ID",
    "CPE_NAME",
    "HOME_URL",
    "ID",
    "ID_LIKE",
    "NAME",
    "PRETTY_NAME",
    "PRIVACY_POLICY_URL",
    "SUPPORT_URL",
    "VARIANT",
    "VARIANT_ID",
    "VERSION",
    "VERSION_CODENAME",
    "VERSION_ID",
)

_CANONICAL_KEYS = {key: key for key in COMMON_KEYS}


class OsReleaseEntry(NamedTuple):
    """A single ``KEY=VALUE`` assignment."""

    key: str
    value: str


ParseResult = OsReleaseEntry | OsReleaseError
LineItem = str | Exception
PathType = str | os.PathLike


def _trim_quotes(value: str) -> str:
    # A lone quote is not a pair; unmatched quotes are kept as-is.
    if len(value) >= 2 and any(
        value.startswith(quote) and value.endswith(quote) for quote in QUOTES
    ):
        return value[1:-1]
    return value


def _is_relevant(item: LineItem) -> bool:
    """Check if a line item produces a result.

    Read failures are always relevant so they reach the caller.
    """
    if isinstance(item, Exception):
        return True

    stripped = item.lstrip()
    return bool(stripped) and not stripped.startswith("#")


def _extract_variable_and_value(line: str) -> ParseResult:
    line = line.removesuffix("\n").removesuffix("\r")
    var, eq, val = line.partition("=")
    if eq != "=":
        return OsReleaseParseError(line)

    var = var.strip()
    key = _CANONICAL_KEYS.get(var, var)
    return OsReleaseEntry(key, _trim_quotes(val.strip()))


def _read_lines(file: BinaryIO, path: PathType) -> Iterator[LineItem]:
    """Read lines from an open binary file, decoding each line on its own.

    A line that is not valid UTF-8 is yielded as an error and reading goes on.
    A failed read is yielded as an error and ends the sequence.  The file is
    closed once the generator finishes or is closed.
    """
    with file:
        while True:
            try:
                raw = file.readline()
            except OSError as error:
                yield OsReleaseIOError(error, path=path)
                return

            if not raw:
                return

            try:
                line = raw.decode()
            except UnicodeDecodeError as error:
                yield OsReleaseIOError(error, path=path)
                continue

            yield line.removesuffix("\n").removesuffix("\r")


def _split_lines(data: str) -> Iterator[str]:
    # Same line boundaries as a file: "\n", optionally preceded by "\r".
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()

    for line in lines:
        yield line.removesuffix("\r")


def parse_os_release_lines(lines: Iterable[LineItem]) -> Iterator[ParseResult]:
    """Parse key-value pairs from a sequence of lines.

    Blank lines and comments are skipped.  Every other item produces exactly
    one result, in order: an :class:`OsReleaseEntry`, or an (unraised)
    :class:`OsReleaseError` for a malformed line or a failed read.  Items are
    consumed only as results are requested.

    :param lines: Lines without their trailing newline, or exceptions standing
        for lines that failed to be read.

    :returns: Iterator of parse results.
    """
    for item in lines:
        if not _is_relevant(item):
            continue

        if isinstance(item, OsReleaseError):
            yield item
        elif isinstance(item, Exception):
            yield OsReleaseIOError(item)
        else:
            yield _extract_variable_and_value(item)


class FileParseResults:
    """Parse results of an open os-release file.

    The file is closed when the results are exhausted, closed, or garbage
    collected, whether or not any result was requested.
    """

    def __init__(self, file: BinaryIO, path: PathType) -> None:
        self.path = path
        self._results = parse_os_release_lines(_read_lines(file, path))
        self._finalizer = weakref.finalize(self, file.close)

    def __iter__(self) -> FileParseResults:
        return self

    def __next__(self) -> ParseResult:
        return next(self._results)

    def __enter__(self) -> FileParseResults:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Stop parsing and close the file."""
        self._results.close()
        self._finalizer()


def parse_os_release(path: PathType) -> FileParseResults:
    """Parse key-value pairs from the os-release file at `path`.

    The file is opened right away; its lines are read lazily.

    :param path: Path to the os-release file.

    :returns: Iterator of parse results, owning the open file.

    :raises OsReleaseIOError: If the file cannot be opened.
    """
    try:
        file = pathlib.Path(path).open("rb")
    except OSError as error:
        raise OsReleaseIOError(error, path=path) from error

    return FileParseResults(file, path)


def parse_os_release_str(data: str) -> Iterator[ParseResult]:
    """Parse key-value pairs from the string contents of an os-release file."""
    return parse_os_release_lines(_split_lines(data))


def get_os_release(paths: Iterable[PathType] | None = None) -> Iterator[ParseResult]:
    """Find and parse the os-release file of the host.

    Candidates are tried in order and the first one that opens is used.
    Malformed content in that file does not cause a fallback to the next
    candidate.

    :param paths: Candidate paths.  Defaults to ``OS_RELEASE_PATHS``.

    :returns: Iterator of parse results.

    :raises OsReleaseNoFileError: If none of the candidates can be opened.
    """
    candidates: Sequence[PathType] = tuple(
        OS_RELEASE_PATHS if paths is None else paths
    )

    for path in candidates:
        try:
            results = parse_os_release(path)
        except OsReleaseIOError as error:
            logger.debug("Cannot open %r: %s", os.fspath(path), error.error)
            continue

        logger.debug("Using os-release file %r", os.fspath(path))
        return results

    raise OsReleaseNoFileError(candidates)


def collect_os_release(results: Iterable[ParseResult]) -> dict[str, str]:
    """Collect parse results into a dictionary, failing on the first error.

    Later entries for a repeated key replace earlier ones.

    :param results: Parse results, as returned by the ``parse_*`` functions.

    :returns: Dictionary of key-mappings.

    :raises OsReleaseError: The first error found in `results`.
    """
    mappings: dict[str, str] = {}

    for result in results:
        if isinstance(result, OsReleaseError):
            raise result
        mappings[result.key] = result.value

    return mappings


def iter_entries(results: Iterable[ParseResult]) -> Iterator[OsReleaseEntry]:
    """Yield the entries found in `results`, discarding errors."""
    for result in results:
        if isinstance(result, OsReleaseError):
            logger.debug("Discarding os-release result: %s", result.brief)
            continue
        yield result
