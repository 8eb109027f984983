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
"""Collection of constants used by keyprov."""

from types import MappingProxyType

from cryptography.hazmat.primitives.asymmetric import ec

# IMPORTANT: Do **not** import any module from keyprov at runtime here, or you risk circular imports.
from keyprov.typehints import EllipticCurveAlias, EllipticCurveName, KeyAuthentication

#: Public exponent used for all generated RSA keys.
RSA_PUBLIC_EXPONENT = 65537

#: Algorithms that keys can be generated with.
KEY_AUTHENTICATIONS: tuple[KeyAuthentication, ...] = ("rsa", "ec")

#: Mapping of elliptic curve names to the implementing classes
ELLIPTIC_CURVE_TYPES: MappingProxyType[EllipticCurveName, type[ec.EllipticCurve]] = MappingProxyType(
    {
        "secp521r1": ec.SECP521R1,
        "secp384r1": ec.SECP384R1,
        "secp256r1": ec.SECP256R1,
        "secp256k1": ec.SECP256K1,
        "secp224r1": ec.SECP224R1,
        "secp192r1": ec.SECP192R1,
        "brainpoolP256r1": ec.BrainpoolP256R1,
        "brainpoolP384r1": ec.BrainpoolP384R1,
        "brainpoolP512r1": ec.BrainpoolP512R1,
    }
)

#: OpenSSL names (as shown by ``openssl ecparam -list_curves``) that name the same curve as a canonical name.
ELLIPTIC_CURVE_ALIASES: MappingProxyType[EllipticCurveAlias, EllipticCurveName] = MappingProxyType(
    {
        "prime192v1": "secp192r1",
        "prime256v1": "secp256r1",
    }
)

#: Curves known to OpenSSL that cryptography cannot generate keys on.
UNSUPPORTED_ELLIPTIC_CURVES: tuple[str, ...] = (
    "prime192v2",
    "prime192v3",
    "prime239v1",
    "prime239v2",
    "prime239v3",
    "sect163k1",
    "sect163r2",
    "sect233k1",
    "sect233r1",
    "sect283k1",
    "sect283r1",
    "sect409k1",
    "sect409r1",
    "sect571k1",
    "sect571r1",
)
