# This file is part of keyprov.
#
# keyprov is free software: you can redistribute it and/or modify it under the terms of the GNU General
# Public License as published by the Free Software Foundation, either version 3 of the License, or (at your
# option) any later version.
#
# keyprov is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
# implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License along with keyprov. If not, see
# <http://www.gnu.org/licenses/>.
"""pytest configuration."""

# pylint: disable=redefined-outer-name  # requested pytest fixtures show up this way.

from collections.abc import Iterator
from pathlib import Path

import pytest

from keyprov.provisioner import KeyProvisioner
from keyprov.tests.base.utils import SettingsWrapper


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[SettingsWrapper]:
    """Fixture to modify settings (read from the environment) for a single test."""
    wrapper = SettingsWrapper(monkeypatch)
    yield wrapper
    wrapper.undo()


@pytest.fixture
def key_path(tmp_path: Path) -> Path:
    """Fixture for a path of a key file that does not exist yet."""
    return tmp_path / "foo.key"


@pytest.fixture
def provisioner() -> KeyProvisioner:
    """Fixture for a key provisioner using the default settings."""
    return KeyProvisioner()

