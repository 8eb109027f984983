#!/usr/bin/env python3
#
# This file is part of keyprov.
#
# keyprov is free software: you can redistribute it and/or modify it under the terms of the GNU
# General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# keyprov is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with keyprov.  If not,
# see <http://www.gnu.org/licenses/>.

"""setuptools based setup.py file for keyprov."""

from setuptools import find_packages
from setuptools import setup

setup(
    name="keyprov",
    version="1.0.0",
    description="Provision private key files with a given algorithm, key size or curve and passphrase.",
    license="GPL-3.0-or-later",
    python_requires=">=3.10",
    packages=find_packages("src", exclude=("keyprov.tests", "keyprov.tests.*")),
    package_dir={"": "src"},
    install_requires=[
        "annotated-types",
        "cryptography>=42",
        "packaging",
        "pydantic>=2.5",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "test": [
            "coverage[toml]",
            "pytest",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "keyprov = keyprov.cli:run",
        ],
    },
)
