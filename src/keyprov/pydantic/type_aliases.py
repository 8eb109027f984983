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
"""Reusable type aliases for Pydantic models."""

from pathlib import Path
from typing import Annotated

from annotated_types import Ge
from pydantic import AfterValidator, BeforeValidator

from keyprov.pydantic.validators import (
    elliptic_curve_name_validator,
    file_mode_parser,
    file_mode_validator,
    non_empty_path_validator,
)

#: A key size, a positive integer. Limits imposed by the cryptographic backend are checked at generation time.
KeySize = Annotated[int, Ge(1)]

#: Name of a supported elliptic curve. OpenSSL aliases are converted to the canonical name.
EllipticCurveNameTypeAlias = Annotated[str, AfterValidator(elliptic_curve_name_validator)]

#: Permission bits for files. Strings are parsed as octal numbers (``"0o600"`` and ``"600"`` are equivalent).
FileMode = Annotated[int, BeforeValidator(file_mode_parser), AfterValidator(file_mode_validator)]

#: A filesystem path that must not be empty.
KeyPath = Annotated[Path, AfterValidator(non_empty_path_validator)]
