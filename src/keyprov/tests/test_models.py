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
"""Test models in :py:mod:`keyprov.models`."""

from pathlib import Path
from typing import Any

from pydantic import SecretStr, ValidationError

import pytest

from keyprov.models import EllipticCurveParameters, KeySpec, RsaParameters
from keyprov.tests.base.doctest import doctest_module
from keyprov.tests.base.utils import SettingsWrapper


def test_doctests() -> None:
    """Load doctests."""
    failures, _tests = doctest_module("keyprov.models")
    assert failures == 0, f"{failures} doctests failed, see above for output."


def test_key_spec_defaults() -> None:
    """Test default values of a key specification."""
    spec = KeySpec(path="/tmp/foo.key")
    assert spec.path == Path("/tmp/foo.key")
    assert spec.authentication == "rsa"
    assert spec.size == 2048
    assert spec.curve == "secp384r1"
    assert spec.password is None
    assert spec.encrypted is False
    assert spec.parameters == RsaParameters(size=2048)


def test_key_spec_defaults_from_settings(settings: SettingsWrapper) -> None:
    """Test that default values are loaded from settings."""
    settings.set(DEFAULT_KEY_SIZE=4096, DEFAULT_ELLIPTIC_CURVE="secp521r1")
    spec = KeySpec(path="/tmp/foo.key")
    assert spec.size == 4096
    assert spec.curve == "secp521r1"


@pytest.mark.parametrize(
    ("options", "parameters"),
    (
        ({"authentication": "rsa"}, RsaParameters(size=2048)),
        ({"authentication": "rsa", "size": 1024}, RsaParameters(size=1024)),
        ({"authentication": "rsa", "curve": "secp256r1"}, RsaParameters(size=2048)),
        ({"authentication": "ec"}, EllipticCurveParameters(curve="secp384r1")),
        ({"authentication": "ec", "curve": "prime239v1"}, EllipticCurveParameters(curve="prime239v1")),
        ({"authentication": "ec", "size": 1024}, EllipticCurveParameters(curve="secp384r1")),
    ),
)
def test_key_spec_parameters(options: dict[str, Any], parameters: Any) -> None:
    """Test that only the parameters relevant to the algorithm are returned."""
    assert KeySpec(path="/tmp/foo.key", **options).parameters == parameters


def test_key_spec_password() -> None:
    """Test that passwords are stored as secret."""
    spec = KeySpec(path="/tmp/foo.key", password="2x$5{")
    assert isinstance(spec.password, SecretStr)
    assert spec.password.get_secret_value() == "2x$5{"
    assert spec.encrypted is True
    assert "2x$5{" not in repr(spec)
    assert "2x$5{" not in str(spec)


def test_key_spec_empty_password() -> None:
    """Test that an empty password is treated as no password."""
    spec = KeySpec(path="/tmp/foo.key", password="")
    assert spec.password is None
    assert spec.encrypted is False


def test_key_spec_is_frozen() -> None:
    """Test that key specifications cannot be modified."""
    spec = KeySpec(path="/tmp/foo.key")
    with pytest.raises(ValidationError, match=r"frozen"):
        spec.size = 4096  # type: ignore[misc]


def test_from_options() -> None:
    """Test creating a key specification from a configuration bundle."""
    options = {"path": "/tmp/foo.key", "authentication": "ec", "curve": "secp256r1", "password": "secret"}
    spec = KeySpec.from_options(options)
    assert spec.path == Path("/tmp/foo.key")
    assert spec.parameters == EllipticCurveParameters(curve="secp256r1")
    assert spec.encrypted is True


@pytest.mark.parametrize(
    "options",
    (
        {},  # path is required
        {"path": ""},
        {"path": "/tmp/foo.key", "authentication": "dsa"},
        {"path": "/tmp/foo.key", "size": 0},
        {"path": "/tmp/foo.key", "size": -2048},
        {"path": "/tmp/foo.key", "size": "large"},
        {"path": "/tmp/foo.key", "unknown": "value"},
    ),
)
def test_from_options_with_invalid_options(options: dict[str, Any]) -> None:
    """Test creating a key specification from invalid options."""
    with pytest.raises(ValidationError):
        KeySpec.from_options(options)


def test_validation_error_does_not_contain_password() -> None:
    """Test that validation errors do not show the password."""
    with pytest.raises(ValidationError) as ex_info:
        KeySpec.from_options({"path": "/tmp/foo.key", "size": 0, "password": "2x$5{"})
    assert "2x$5{" not in str(ex_info.value)
