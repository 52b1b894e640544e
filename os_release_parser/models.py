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

"""Pydantic model for os-release data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pydantic

from os_release_parser.parser import (
    collect_os_release,
    get_os_release,
    parse_os_release,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

    from os_release_parser.parser import PathType

logger = logging.getLogger(__name__)


class OsRelease(pydantic.BaseModel, extra="allow", frozen=True):
    """Operating system identification.

    Well-known keys are exposed as lowercase attributes; any other key found in
    the file is kept as an extra field under its original name.
    """

    ansi_color: str | None = pydantic.Field(default=None, alias="ANSI_COLOR")
    bug_report_url: str | None = pydantic.Field(default=None, alias="BUG_REPORT_URL")
    build_id: str | None = pydantic.Field(default=None, alias="BUILD_ID")
    cpe_name: str | None = pydantic.Field(default=None, alias="CPE_NAME")
    home_url: str | None = pydantic.Field(default=None, alias="HOME_URL")
    id: str | None = pydantic.Field(default=None, alias="ID")
    id_like: str | None = pydantic.Field(default=None, alias="ID_LIKE")
    name: str | None = pydantic.Field(default=None, alias="NAME")
    pretty_name: str | None = pydantic.Field(default=None, alias="PRETTY_NAME")
    privacy_policy_url: str | None = pydantic.Field(
        default=None, alias="PRIVACY_POLICY_URL"
    )
    support_url: str | None = pydantic.Field(default=None, alias="SUPPORT_URL")
    variant: str | None = pydantic.Field(default=None, alias="VARIANT")
    variant_id: str | None = pydantic.Field(default=None, alias="VARIANT_ID")
    version: str | None = pydantic.Field(default=None, alias="VERSION")
    version_codename: str | None = pydantic.Field(
        default=None, alias="VERSION_CODENAME"
    )
    version_id: str | None = pydantic.Field(default=None, alias="VERSION_ID")

    @property
    def id_like_list(self) -> list[str]:
        """Space-separated ``ID_LIKE`` values, closest relative first."""
        if self.id_like is None:
            return []
        return self.id_like.split()

    @classmethod
    def unmarshal(cls, data: Mapping[str, str]) -> OsRelease:
        """Create and populate a new `OsRelease` object from dictionary data.

        :param data: Key-mappings as found in an os-release file.

        :return: The newly created `OsRelease` object.
        """
        return cls.model_validate(dict(data))

    def marshal(self) -> dict[str, Any]:
        """Create a dictionary of the os-release key-mappings.

        Unset well-known keys are omitted.

        :return: The newly created dictionary.
        """
        return self.model_dump(by_alias=True, exclude_none=True)


def load_os_release(path: PathType | None = None) -> OsRelease:
    """Load os-release data into an `OsRelease` object.

    :param path: Path to the os-release file.  If None, the standard locations
        are searched.

    :returns: The `OsRelease` object.

    :raises OsReleaseError: If the file cannot be found, opened or parsed.
    """
    results = get_os_release() if path is None else parse_os_release(path)
    os_release = OsRelease.unmarshal(collect_os_release(results))

    logger.debug("Loaded os-release for %r", os_release.pretty_name or os_release.id)
    return os_release
