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
"""Application configuration for keyprov.

Settings are read from environment variables prefixed with ``KEYPROV_``, e.g. ``KEYPROV_DEFAULT_KEY_SIZE``.
"""

from collections.abc import Iterable
from typing import Annotated, Any

from annotated_types import Ge
from pydantic import ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from keyprov.exceptions import ImproperlyConfigured
from keyprov.pydantic.type_aliases import EllipticCurveNameTypeAlias, FileMode


class SettingsModel(BaseSettings):
    """Pydantic model defining available settings."""

    model_config = SettingsConfigDict(env_prefix="KEYPROV_", frozen=True)

    DEFAULT_ELLIPTIC_CURVE: EllipticCurveNameTypeAlias = "secp384r1"
    DEFAULT_KEY_SIZE: Annotated[int, Ge(1)] = 2048
    MIN_KEY_SIZE: Annotated[int, Ge(1)] = 1024
    MAX_KEY_SIZE: Annotated[int, Ge(1)] = 16384
    FILE_MODE: FileMode = 0o600
    ATOMIC_WRITE: bool = True

    @model_validator(mode="after")
    def check_key_sizes(self) -> "SettingsModel":
        """Validate that the default key size is within the minimum and maximum key size."""
        if self.MIN_KEY_SIZE > self.DEFAULT_KEY_SIZE:
            raise ValueError(f"DEFAULT_KEY_SIZE cannot be lower then {self.MIN_KEY_SIZE}")
        if self.MAX_KEY_SIZE < self.DEFAULT_KEY_SIZE:
            raise ValueError(f"DEFAULT_KEY_SIZE cannot be higher then {self.MAX_KEY_SIZE}")
        return self


class SettingsProxy:
    """Proxy class to access settings from the model.

    This class exists to enable reloading of settings in test cases.
    """

    __settings: SettingsModel

    def __init__(self) -> None:
        self.reload()

    def __dir__(self, object: Any = None) -> Iterable[str]:  # pylint: disable=redefined-builtin
        return list(super().__dir__()) + list(SettingsModel.model_fields)

    def reload(self) -> None:
        """Reload settings model from the environment."""
        try:
            self.__settings = SettingsModel()
        except ValidationError as ex:
            raise ImproperlyConfigured(str(ex)) from ex

    def __getattr__(self, item: str) -> Any:
        return getattr(self.__settings, item)


model_settings = SettingsProxy()
