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
"""Test validators in :py:mod:`keyprov.pydantic.validators`."""

from pathlib import Path

import pytest

from keyprov.pydantic.validators import file_mode_validator, non_empty_path_validator
from keyprov.tests.base.doctest import doctest_module


def test_doctests() -> None:
    """Run doctests for this module."""
    failures, _tests = doctest_module("keyprov.pydantic.validators")
    assert failures == 0, f"{failures} doctests failed, see above for output."


@pytest.mark.parametrize("value", (0, 0o600, 0o644, 0o7777))
def test_file_mode_validator(value: int) -> None:
    """Test valid file modes."""
    assert file_mode_validator(value) == value


@pytest.mark.parametrize("value", (0o10000, -1))
def test_file_mode_validator_with_invalid_value(value: int) -> None:
    """Test invalid file modes."""
    with pytest.raises(ValueError, match=r"Not a valid file mode\.$"):
        file_mode_validator(value)


@pytest.mark.parametrize("value", (Path(""), Path(".")))
def test_non_empty_path_validator_with_empty_path(value: Path) -> None:
    """Test empty paths."""
    with pytest.raises(ValueError, match=r"^Path must not be empty\.$"):
        non_empty_path_validator(value)


def test_non_empty_path_validator() -> None:
    """Test a valid path."""
    assert non_empty_path_validator(Path("foo.key")) == Path("foo.key")
