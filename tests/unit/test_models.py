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

import textwrap

import pydantic
import pytest
from logassert import Exact  # type: ignore
from os_release_parser import parser
from os_release_parser.errors import (
    OsReleaseIOError,
    OsReleaseNoFileError,
    OsReleaseParseError,
)
from os_release_parser.models import OsRelease, load_os_release

UBUNTU_OS_RELEASE = textwrap.dedent(
    """\
    PRETTY_NAME="Ubuntu 22.04.3 LTS"
    NAME="Ubuntu"
    VERSION_ID="22.04"
    VERSION="22.04.3 LTS (Jammy Jellyfish)"
    VERSION_CODENAME=jammy
    ID=ubuntu
    ID_LIKE=debian
    HOME_URL="https://www.ubuntu.com/"
    UBUNTU_CODENAME=jammy
    """
)


def test_unmarshal():
    os_release = OsRelease.unmarshal(
        {"NAME": "Fedora", "ID": "fedora", "VERSION_ID": "32", "LOGO": "fedora-logo"}
    )

    assert os_release.name == "Fedora"
    assert os_release.id == "fedora"
    assert os_release.version_id == "32"
    assert os_release.pretty_name is None
    assert os_release.model_extra == {"LOGO": "fedora-logo"}


def test_marshal():
    data = {"NAME": "Fedora", "ID": "fedora", "LOGO": "fedora-logo"}

    assert OsRelease.unmarshal(data).marshal() == data


def test_frozen():
    os_release = OsRelease.unmarshal({"ID": "fedora"})

    with pytest.raises(pydantic.ValidationError):
        os_release.id = "ubuntu"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("id_like", "expected"),
    [
        (None, []),
        ("debian", ["debian"]),
        ("rhel centos fedora", ["rhel", "centos", "fedora"]),
    ],
)
def test_id_like_list(id_like, expected):
    data = {} if id_like is None else {"ID_LIKE": id_like}

    assert OsRelease.unmarshal(data).id_like_list == expected


def test_load_os_release_path(logs, tmp_path):
    path = tmp_path / "os-release"
    path.write_text(UBUNTU_OS_RELEASE)

    os_release = load_os_release(path)

    assert os_release.pretty_name == "Ubuntu 22.04.3 LTS"
    assert os_release.version_codename == "jammy"
    assert os_release.id_like_list == ["debian"]
    assert os_release.model_extra == {"UBUNTU_CODENAME": "jammy"}
    assert Exact("Loaded os-release for 'Ubuntu 22.04.3 LTS'") in logs.debug


def test_load_os_release_default_paths(monkeypatch, tmp_path):
    path = tmp_path / "os-release"
    path.write_text("ID=fedora\n")
    monkeypatch.setattr(parser, "OS_RELEASE_PATHS", (tmp_path / "missing", path))

    assert load_os_release().id == "fedora"


def test_load_os_release_no_file(monkeypatch, tmp_path):
    monkeypatch.setattr(parser, "OS_RELEASE_PATHS", (tmp_path / "missing",))

    with pytest.raises(OsReleaseNoFileError):
        load_os_release()


def test_load_os_release_missing_path(tmp_path):
    with pytest.raises(OsReleaseIOError):
        load_os_release(tmp_path / "missing")


def test_load_os_release_malformed(tmp_path):
    path = tmp_path / "os-release"
    path.write_text("ID=fedora\nSOMETHING\n")

    with pytest.raises(OsReleaseParseError):
        load_os_release(path)
