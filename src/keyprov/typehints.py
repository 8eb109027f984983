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
"""Various type aliases used throughout keyprov."""

import argparse
from typing import Literal, Union

from cryptography.hazmat.primitives.asymmetric import ec, rsa

# IMPORTANT: Do **not** import any module from keyprov at runtime here, or you risk circular imports.

KeyAuthentication = Literal["rsa", "ec"]
"""Algorithms that keys can be generated with."""

EnsureState = Literal["present", "absent"]
"""States a key file can be ensured to be in."""

EllipticCurveName = Literal[
    "secp521r1",
    "secp384r1",
    "secp256r1",
    "secp256k1",
    "secp224r1",
    "secp192r1",
    "brainpoolP256r1",
    "brainpoolP384r1",
    "brainpoolP512r1",
]
"""Canonical names of elliptic curves supported by cryptography."""

EllipticCurveAlias = Literal["prime192v1", "prime256v1"]
"""OpenSSL names that are aliases for one of the canonical curve names."""

PrivateKeyTypes = Union[rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey]
"""Private key types that can be generated and inspected."""

ArgumentGroup = argparse._ArgumentGroup  # pylint: disable=protected-access
