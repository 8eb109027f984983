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
"""Provision private key files on the local filesystem.

A managed path is either absent or present. :py:meth:`~keyprov.provisioner.KeyProvisioner.create` writes a new
key (overwriting any existing file) and :py:meth:`~keyprov.provisioner.KeyProvisioner.destroy` removes it
again. Callers that want idempotent behavior check
:py:meth:`~keyprov.provisioner.KeyProvisioner.exists` first or use
:py:meth:`~keyprov.provisioner.KeyProvisioner.ensure`.
"""

import errno
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import SecretStr

from cryptography.hazmat.primitives.asymmetric import ec, rsa

from keyprov.models import KeySpec, PrivateKeyInfo
from keyprov.typehints import EnsureState
from keyprov.utils import (
    generate_private_key,
    get_private_key_type,
    load_private_key,
    serialize_private_key,
    write_private_key,
)

log = logging.getLogger(__name__)

PathType = Union[str, "os.PathLike[str]"]

# Errors from os.stat() that mean that nothing exists at the path (the same as ignored by pathlib).
_NOT_FOUND_ERRNOS = (errno.ENOENT, errno.ENOTDIR, errno.EBADF, errno.ELOOP)


class KeyProvisioner:
    """Create, check and delete private key files.

    The provisioner holds no state, key material is never retained between calls.

    Parameters
    ----------
    mode : int, optional
        Permission bits for created files. If not given, the ``FILE_MODE`` setting is used.
    atomic : bool, optional
        Write files atomically. If not given, the ``ATOMIC_WRITE`` setting is used.
    """

    def __init__(self, mode: Optional[int] = None, atomic: Optional[bool] = None) -> None:
        self.mode = mode
        self.atomic = atomic

    def exists(self, path: PathType) -> bool:
        """Return ``True`` if anything exists at ``path``.

        The contents of the file are not validated. Unlike :py:meth:`pathlib.Path.exists`, errors other than
        the file not existing (e.g. permission errors) are not hidden. A path where a parent is not a
        directory or that contains a symlink loop does not exist.
        """
        try:
            os.stat(path)
        except OSError as ex:
            if ex.errno in _NOT_FOUND_ERRNOS:
                return False
            raise
        return True

    def create(self, spec: KeySpec) -> None:
        """Generate a new private key and write it to ``spec.path``.

        Any existing file at the path is overwritten.

        Raises
        ------
        KeyGenerationError
            If the key cannot be generated with the given parameters.
        OSError
            If the file cannot be written.
        """
        key = generate_private_key(spec.parameters)
        data = serialize_private_key(key, spec.password)

        write_private_key(spec.path, data, mode=self.mode, atomic=self.atomic)
        log.info("%s: Wrote %s private key (encrypted: %s).", spec.path, spec.authentication, spec.encrypted)

    def destroy(self, path: PathType) -> None:
        """Delete the file at ``path``.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        OSError
            If the file cannot be removed for any other reason.
        """
        Path(path).unlink()
        log.info("%s: Deleted private key.", path)

    def ensure(self, spec: KeySpec, state: EnsureState = "present", force: bool = False) -> bool:
        """Make sure that the key file is present or absent.

        If ``state`` is ``"present"``, the key is created unless a file already exists at the path (or
        ``force`` is ``True``). If ``state`` is ``"absent"``, an existing file is deleted.

        Returns ``True`` if the filesystem was changed, ``False`` otherwise.
        """
        if state == "present":
            if self.exists(spec.path) and force is False:
                log.debug("%s: Private key already exists.", spec.path)
                return False
            self.create(spec)
            return True
        if state == "absent":
            if not self.exists(spec.path):
                log.debug("%s: Private key is already absent.", spec.path)
                return False
            self.destroy(spec.path)
            return True
        raise ValueError(f"{state}: Unknown state.")

    def inspect(self, path: PathType, password: Optional[Union[str, SecretStr]] = None) -> PrivateKeyInfo:
        """Load the private key at ``path`` and return its properties.

        Raises
        ------
        KeyLoadError
            If the file does not contain a supported private key or the password is wrong.
        OSError
            If the file cannot be read.
        """
        if isinstance(password, str):
            password = SecretStr(password)
        if password is not None and not password.get_secret_value():
            password = None  # an empty password means no password, as in KeySpec

        data = Path(path).read_bytes()
        # NOTE: load_private_key() fails if a password is given for an unencrypted key or vice versa.
        key = load_private_key(data, password)
        authentication = get_private_key_type(key)

        size: Optional[int] = None
        curve: Optional[str] = None
        if isinstance(key, rsa.RSAPrivateKey):
            size = key.key_size
        elif isinstance(key, ec.EllipticCurvePrivateKey):  # pragma: no branch
            curve = key.curve.name

        return PrivateKeyInfo(
            path=Path(path),
            authentication=authentication,
            size=size,
            curve=curve,
            encrypted=password is not None,
        )
