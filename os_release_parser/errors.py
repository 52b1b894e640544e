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

"""os-release errors."""
import dataclasses
import os
from typing import Iterable, Optional, Union


@dataclasses.dataclass
class OsReleaseError(Exception):
    """Unexpected error.

    :param brief: Brief description of error.
    :param details: Detailed information.
    :param resolution: Recommendation, if any.
    """

    brief: str
    details: Optional[str] = None
    resolution: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.brief]

        if self.details:
            parts.append(self.details)

        if self.resolution:
            parts.append(self.resolution)

        return "\n".join(parts)


class OsReleaseIOError(OsReleaseError):
    """Failed to open or read os-release data.

    :param error: The underlying exception.
    :param path: Path being read, if known.
    """

    def __init__(
        self,
        error: Exception,
        *,
        path: Optional[Union[str, "os.PathLike[str]"]] = None,
    ) -> None:
        self.error = error
        self.path = path

        if path is None:
            brief = "Failed to read os-release data."
        else:
            brief = f"Failed to read os-release file {os.fspath(path)!r}."

        super().__init__(brief=brief, details=f"* Error: {error!s}")


class OsReleaseNoFileError(OsReleaseError):
    """None of the candidate os-release files could be opened.

    :param paths: Paths that were tried, in order.
    """

    def __init__(self, paths: Iterable[Union[str, "os.PathLike[str]"]]) -> None:
        self.paths = [os.fspath(path) for path in paths]

        brief = "Failed to find os-release file."
        details = "\n".join(f"* Tried: {path!r}" for path in self.paths)
        resolution = "Ensure /etc/os-release or /usr/lib/os-release is readable."

        super().__init__(brief=brief, details=details or None, resolution=resolution)


class OsReleaseParseError(OsReleaseError):
    """A line is malformed (it has no ``=`` separator).

    :param line: The offending line.
    """

    def __init__(self, line: str) -> None:
        self.line = line

        super().__init__(
            brief="os-release data is malformed.",
            details=f"* Line without '=': {line!r}",
        )
