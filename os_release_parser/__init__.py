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

"""os-release parser package."""

__version__ = "1.0.0"  # noqa: F401

from .errors import (  # noqa: F401
    OsReleaseError,
    OsReleaseIOError,
    OsReleaseNoFileError,
    OsReleaseParseError,
)
from .models import OsRelease, load_os_release  # noqa: F401
from .parser import (  # noqa: F401
    COMMON_KEYS,
    FileParseResults,
    OS_RELEASE_PATHS,
    OsReleaseEntry,
    ParseResult,
    collect_os_release,
    get_os_release,
    iter_entries,
    parse_os_release,
    parse_os_release_lines,
    parse_os_release_str,
)
