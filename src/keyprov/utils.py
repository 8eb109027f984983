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
"""Reusable utility functions used throughout keyprov."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import SecretStr

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.serialization import Encoding, PrivateFormat

from keyprov import constants
from keyprov.conf import model_settings
from keyprov.exceptions import KeyGenerationError, KeyLoadError
from keyprov.models import EllipticCurveParameters, KeyParameters, RsaParameters
from keyprov.pydantic.validators import elliptic_curve_name_validator
from keyprov.typehints import KeyAuthentication, PrivateKeyTypes

log = logging.getLogger(__name__)


def get_elliptic_curve(name: str) -> ec.EllipticCurve:
    """Get an elliptic curve instance for the given name.

    OpenSSL aliases for curves are also accepted:

    >>> get_elliptic_curve("prime256v1").name
    'secp256r1'
    >>> get_elliptic_curve("foo")
    Traceback (most recent call last):
        ...
    keyprov.exceptions.KeyGenerationError: foo: Unknown elliptic curve.
    """
    try:
        canonical_name = elliptic_curve_name_validator(name)
    except ValueError as ex:
        raise KeyGenerationError(str(ex)) from ex
    return constants.ELLIPTIC_CURVE_TYPES[canonical_name]()  # type: ignore[index]  # validated above


def validate_private_key_parameters(parameters: KeyParameters) -> KeyParameters:
    """Validate parameters for private key generation.

    This function can be used to fail early if invalid parameters are passed, before the private key is
    generated.

    >>> validate_private_key_parameters(RsaParameters(size=4096))
    RsaParameters(authentication='rsa', size=4096)
    >>> validate_private_key_parameters(RsaParameters(size=512))
    Traceback (most recent call last):
        ...
    keyprov.exceptions.KeyGenerationError: 512: Key size must be at least 1024 bits.
    """
    if isinstance(parameters, RsaParameters):
        if parameters.size < model_settings.MIN_KEY_SIZE:
            raise KeyGenerationError(
                f"{parameters.size}: Key size must be at least {model_settings.MIN_KEY_SIZE} bits."
            )
        if parameters.size > model_settings.MAX_KEY_SIZE:
            raise KeyGenerationError(
                f"{parameters.size}: Key size must be at most {model_settings.MAX_KEY_SIZE} bits."
            )
    elif isinstance(parameters, EllipticCurveParameters):
        get_elliptic_curve(parameters.curve)
    else:  # pragma: no cover  # unreachable, KeyParameters is a closed union
        raise KeyGenerationError(f"{parameters}: Unknown key parameters.")
    return parameters


def generate_private_key(parameters: KeyParameters) -> PrivateKeyTypes:
    """Generate a private key.

    Parameters
    ----------
    parameters : RsaParameters or EllipticCurveParameters
        The parameters for the private key. The type of the parameters determines the type of the key.

    Returns
    -------
    key
        A private key of the appropriate type.

    Raises
    ------
    KeyGenerationError
        If the parameters are not supported by the cryptography backend.
    """
    validate_private_key_parameters(parameters)

    try:
        if isinstance(parameters, RsaParameters):
            log.debug("Generating RSA key with %s bits.", parameters.size)
            return rsa.generate_private_key(
                public_exponent=constants.RSA_PUBLIC_EXPONENT, key_size=parameters.size
            )
        if isinstance(parameters, EllipticCurveParameters):
            # NOTE: ec.generate_private_key() generates the private scalar and public point on the curve.
            curve = get_elliptic_curve(parameters.curve)
            log.debug("Generating elliptic curve key on curve %s.", curve.name)
            return ec.generate_private_key(curve)
    except (ValueError, UnsupportedAlgorithm) as ex:
        raise KeyGenerationError(f"Could not generate private key: {ex}") from ex

    # COVERAGE NOTE: Unreachable code, as validate_private_key_parameters() raises for any other parameters.
    raise KeyGenerationError(f"{parameters}: Unknown key parameters.")  # pragma: no cover


def get_private_key_type(private_key: PrivateKeyTypes) -> KeyAuthentication:
    """Get the private key type as string from a given private key."""
    if isinstance(private_key, rsa.RSAPrivateKey):
        return "rsa"
    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        return "ec"
    raise KeyLoadError(f"{private_key}: Unknown private key type.")


def serialize_private_key(private_key: PrivateKeyTypes, password: Optional[SecretStr] = None) -> bytes:
    """Serialize a private key to PEM in the traditional OpenSSL format.

    If ``password`` is given, the key is encrypted with AES-256-CBC, using the password to derive the
    encryption key.
    """
    if password is None:
        encryption: serialization.KeySerializationEncryption = serialization.NoEncryption()
    else:
        # NOTE: cryptography uses AES-256-CBC for encrypting keys in the traditional OpenSSL format.
        encryption = serialization.BestAvailableEncryption(password.get_secret_value().encode("utf-8"))

    try:
        return private_key.private_bytes(
            encoding=Encoding.PEM, format=PrivateFormat.TraditionalOpenSSL, encryption_algorithm=encryption
        )
    except ValueError as ex:
        # The error message never contains the password itself (e.g. "password too long").
        raise KeyGenerationError(f"Could not serialize private key: {ex}") from ex


def load_private_key(data: bytes, password: Optional[SecretStr] = None) -> PrivateKeyTypes:
    """Load a PEM or DER encoded private key.

    Raises
    ------
    KeyLoadError
        If the data cannot be parsed or decrypted, or if the key is not an RSA or elliptic curve key.
    """
    password_bytes: Optional[bytes] = None
    if password is not None:
        password_bytes = password.get_secret_value().encode("utf-8")

    try:
        if data.lstrip().startswith(b"-----BEGIN"):
            key = serialization.load_pem_private_key(data, password_bytes)
        else:
            key = serialization.load_der_private_key(data, password_bytes)
    except TypeError as ex:
        # Raised if a password was given for an unencrypted key or vice versa.
        raise KeyLoadError(str(ex)) from ex
    except (ValueError, UnsupportedAlgorithm) as ex:
        # cryptography passes the OpenSSL error directly here and it is notoriously unstable.
        raise KeyLoadError("Could not decrypt or parse private key - bad password?") from ex

    if not isinstance(key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey)):
        raise KeyLoadError(f"{type(key).__name__}: Private key of this type is not supported.")
    return key


def write_private_key(
    path: Union[str, "os.PathLike[str]"],
    data: bytes,
    mode: Optional[int] = None,
    atomic: Optional[bool] = None,
) -> None:
    """Write serialized private key data to ``path``.

    The file is created with permissions ``mode`` before any data is written to it. If ``atomic`` is
    ``True``, data is first written to a temporary file in the same directory and then renamed to
    ``path``, so that ``path`` never contains a partially written key. If ``path`` is a symlink, the file it
    points to is replaced and the directory containing that file must be writable.

    Parameters
    ----------
    path : str or path-like
        The path to write to. An existing file will be overwritten.
    data : bytes
        The serialized private key.
    mode : int, optional
        Permission bits of the file, defaults to the ``FILE_MODE`` setting.
    atomic : bool, optional
        Whether to write the file atomically, defaults to the ``ATOMIC_WRITE`` setting.
    """
    path = Path(path)
    if mode is None:
        mode = model_settings.FILE_MODE
    if atomic is None:
        atomic = model_settings.ATOMIC_WRITE

    if not atomic:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as stream:
            os.chmod(path, mode)  # mode passed to os.open() is only used for new files
            stream.write(data)
        return

    # Replace the file a symlink points to, not the symlink itself.
    path = Path(os.path.realpath(path))
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as stream:
            os.chmod(temp_name, mode)
            stream.write(data)
            stream.flush()
            os.fsync(stream.fileno())
        os.replace(temp_name, path)
    except BaseException:
        os.unlink(temp_name)
        raise
