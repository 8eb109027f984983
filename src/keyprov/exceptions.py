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
"""Collection of exception classes for keyprov.

Filesystem errors are not wrapped: they propagate as the builtin :py:class:`OSError` (or one of its
subclasses like :py:class:`FileNotFoundError`).
"""


class KeyProvisionError(Exception):
    """Base class for all keyprov exceptions."""


class ImproperlyConfigured(KeyProvisionError):
    """Exception raised when keyprov is misconfigured."""


class KeyGenerationError(KeyProvisionError, ValueError):
    """Exception raised when a private key cannot be generated with the given parameters."""


class KeyLoadError(KeyProvisionError, ValueError):
    """Exception raised when an existing private key file cannot be parsed or decrypted."""
