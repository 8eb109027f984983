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
"""Models describing private keys managed by keyprov."""

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from keyprov.conf import model_settings
from keyprov.pydantic.type_aliases import KeyPath, KeySize
from keyprov.typehints import KeyAuthentication


class RsaParameters(BaseModel):
    """Parameters for generating an RSA key."""

    model_config = ConfigDict(frozen=True)

    authentication: Literal["rsa"] = "rsa"
    size: KeySize


class EllipticCurveParameters(BaseModel):
    """Parameters for generating an elliptic curve key.

    The curve name is not validated here, unknown curves are rejected when generating the key.
    """

    model_config = ConfigDict(frozen=True)

    authentication: Literal["ec"] = "ec"
    curve: str


KeyParameters = Annotated[
    Union[RsaParameters, EllipticCurveParameters], Field(discriminator="authentication")
]


class KeySpec(BaseModel):
    """Desired state of a single private key file.

    Both ``size`` and ``curve`` always have a value, but only the one matching ``authentication`` is used. Use
    :py:attr:`~keyprov.models.KeySpec.parameters` to get only the relevant parameters:

    >>> KeySpec(path="/tmp/foo.key").parameters
    RsaParameters(authentication='rsa', size=2048)
    >>> KeySpec(path="/tmp/foo.key", authentication="ec").parameters
    EllipticCurveParameters(authentication='ec', curve='secp384r1')

    The password is stored as :py:class:`~pydantic.SecretStr`, so it does not show up in any output:

    >>> KeySpec(path="/tmp/foo.key", password="secret").password
    SecretStr('**********')
    """

    # NOTE: we set frozen here to prevent accidental coding mistakes. Models should be immutable.
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: KeyPath
    authentication: KeyAuthentication = "rsa"
    size: KeySize = Field(default_factory=lambda: model_settings.DEFAULT_KEY_SIZE)
    curve: str = Field(default_factory=lambda: model_settings.DEFAULT_ELLIPTIC_CURVE)
    password: Optional[SecretStr] = None

    @field_validator("password", mode="after")
    @classmethod
    def empty_password_as_none(cls, password: Optional[SecretStr]) -> Optional[SecretStr]:
        """Treat an empty password as no password at all."""
        if password is not None and not password.get_secret_value():
            return None
        return password

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "KeySpec":
        """Create an instance from a key/value configuration bundle.

        >>> KeySpec.from_options({"path": "/tmp/foo.key", "size": 4096}).parameters
        RsaParameters(authentication='rsa', size=4096)
        """
        return cls.model_validate(dict(options))

    @property
    def parameters(self) -> Union[RsaParameters, EllipticCurveParameters]:
        """The parameters relevant for the configured algorithm."""
        if self.authentication == "rsa":
            return RsaParameters(size=self.size)
        return EllipticCurveParameters(curve=self.curve)

    @property
    def encrypted(self) -> bool:
        """True if the key will be encrypted with a password."""
        return self.password is not None


class PrivateKeyInfo(BaseModel):
    """Properties of an existing private key file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    authentication: KeyAuthentication
    size: Optional[int] = None
    curve: Optional[str] = None
    encrypted: bool
