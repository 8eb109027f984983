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
"""Collection of argparse actions for the keyprov command line interface."""

import abc
import argparse
import getpass
import typing
from typing import Any, Optional

from pydantic import SecretStr

from keyprov import constants

ParseType = typing.TypeVar("ParseType")  # pylint: disable=invalid-name
ActionType = typing.TypeVar("ActionType")  # pylint: disable=invalid-name


class SingleValueAction(argparse.Action, typing.Generic[ParseType, ActionType], metaclass=abc.ABCMeta):
    """Abstract/generic base class for arguments that take a single value.

    The main purpose of this class is to improve type hinting.
    """

    type: type[ActionType]

    @abc.abstractmethod
    def parse_value(self, value: ParseType) -> ActionType:
        """Parse the value passed to the command line. Implementing classes must implement this method.

        Parameters
        ----------
        value : str
            The value passed by the command line.
        """
        raise NotImplementedError

    def __call__(  # type: ignore[override] # argparse.Action defines much looser type
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: ParseType,
        option_string: Optional[str] = None,
    ) -> None:
        setattr(namespace, self.dest, self.parse_value(values))


class EllipticCurveAction(SingleValueAction[str, str]):
    """Action to parse an elliptic curve name.

    OpenSSL aliases are converted to the canonical name of the curve:

    >>> parser = argparse.ArgumentParser()
    >>> parser.add_argument('--curve', action=EllipticCurveAction)  # doctest: +ELLIPSIS
    EllipticCurveAction(...)
    >>> parser.parse_args(['--curve', 'prime256v1'])
    Namespace(curve='secp256r1')
    """

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault(
            "choices", sorted(tuple(constants.ELLIPTIC_CURVE_TYPES) + tuple(constants.ELLIPTIC_CURVE_ALIASES))
        )
        kwargs.setdefault("metavar", "{secp256r1,secp384r1,secp521r1,...}")
        super().__init__(**kwargs)

    def parse_value(self, value: str) -> str:
        """Parse the value for this action."""
        # NOTE: Unknown values are ruled out by the choices argument set in the constructor.
        return constants.ELLIPTIC_CURVE_ALIASES.get(value, value)  # type: ignore[call-overload]


class KeySizeAction(SingleValueAction[str, int]):
    """Action for adding a key size, a positive integer.

    Limits imposed by the cryptographic backend are checked only when the key is generated.

    >>> parser = argparse.ArgumentParser()
    >>> parser.add_argument('--size', action=KeySizeAction)  # doctest: +ELLIPSIS
    KeySizeAction(...)
    >>> parser.parse_args(['--size', '4096'])
    Namespace(size=4096)
    """

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("metavar", "{2048,4096,8192,...}")
        super().__init__(**kwargs)

    def parse_value(self, value: str) -> int:
        """Parse the value for this action."""
        try:
            key_size = int(value)
        except ValueError as ex:
            raise argparse.ArgumentError(self, f"{value}: Must be an integer.") from ex

        if key_size < 1:
            raise argparse.ArgumentError(self, f"{key_size}: Must be a positive integer.")
        return key_size


class PasswordAction(argparse.Action):
    """Action for adding a password argument.

    If the cli does not pass an argument value, the action prompt the user for a password.

    >>> parser = argparse.ArgumentParser()
    >>> parser.add_argument('--password', action=PasswordAction)  # doctest: +ELLIPSIS
    PasswordAction(...)
    >>> parser.parse_args(['--password', 'secret'])
    Namespace(password=SecretStr('**********'))
    """

    def __init__(self, prompt: str = "Password: ", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.prompt = prompt

    def __call__(  # type: ignore[override] # argparse.Action defines much looser type for values
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Optional[str],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            values = getpass.getpass(prompt=self.prompt)

        setattr(namespace, self.dest, SecretStr(values))
