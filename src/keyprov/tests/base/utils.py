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
"""Utility functions and classes used in tests."""

from pathlib import Path
from typing import Any

from cryptography.hazmat.primitives.serialization import load_pem_private_key

import pytest

from keyprov.conf import model_settings
from keyprov.typehints import PrivateKeyTypes


class SettingsWrapper:
    """Wrapper to modify settings in test cases.

    Settings are passed to the settings model using environment variables, so the settings loading code is
    tested as well.
    """

    def __init__(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._monkeypatch = monkeypatch

    def set(self, **kwargs: Any) -> None:
        """Set the given settings and reload them."""
        for name, value in kwargs.items():
            self._monkeypatch.setenv(f"KEYPROV_{name}", str(value))
        model_settings.reload()

    def undo(self) -> None:
        """Restore the original environment and settings."""
        self._monkeypatch.undo()
        model_settings.reload()


def load_key(path: Path, password: bytes | None = None) -> PrivateKeyTypes:
    """Load the PEM encoded private key at ``path`` directly with cryptography."""
    return load_pem_private_key(path.read_bytes(), password)  # type: ignore[return-value]


def file_mode(path: Path) -> int:
    """Get the permission bits of the file at ``path``."""
    return path.stat().st_mode & 0o7777
