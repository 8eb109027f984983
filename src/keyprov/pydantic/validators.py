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
"""Validators for Pydantic models."""

from pathlib import Path
from typing import Any

from keyprov import constants


def elliptic_curve_name_validator(value: str) -> str:
    """Validate that the given name is a known elliptic curve and return its canonical name.

    >>> elliptic_curve_name_validator("secp256r1")
    'secp256r1'
    >>> elliptic_curve_name_validator("prime256v1")
    'secp256r1'
    >>> elliptic_curve_name_validator("prime239v1")
    Traceback (most recent call last):
        ...
    ValueError: prime239v1: Elliptic curve is known to OpenSSL but not supported by cryptography.
    >>> elliptic_curve_name_validator("foo")
    Traceback (most recent call last):
        ...
    ValueError: foo: Unknown elliptic curve.
    """
    if value in constants.ELLIPTIC_CURVE_ALIASES:
        return constants.ELLIPTIC_CURVE_ALIASES[value]  # type: ignore[index]  # checked above
    if value in constants.UNSUPPORTED_ELLIPTIC_CURVES:
        raise ValueError(f"{value}: Elliptic curve is known to OpenSSL but not supported by cryptography.")
    if value not in constants.ELLIPTIC_CURVE_TYPES:
        raise ValueError(f"{value}: Unknown elliptic curve.")
    return value


def file_mode_parser(value: Any) -> Any:
    """Convert a string with an octal number to an int.

    >>> file_mode_parser("0o600")
    384
    >>> file_mode_parser("640")
    416
    >>> file_mode_parser(0o600)
    384
    """
    if isinstance(value, str):
        try:
            return int(value.removeprefix("0o"), 8)
        except ValueError as ex:
            raise ValueError(f"{value}: Not an octal number.") from ex
    return value


def file_mode_validator(value: int) -> int:
    """Validate that the given value is a valid set of permission bits."""
    if value & ~0o7777:
        raise ValueError(f"{oct(value)}: Not a valid file mode.")
    return value


def non_empty_path_validator(value: Path) -> Path:
    """Validate that a path is not empty.

    ``Path("")`` evaluates to the current directory (``"."``), so this checks the string representation.
    """
    if str(value) in ("", "."):
        raise ValueError("Path must not be empty.")
    return value
