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
"""Command line interface for keyprov."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any, Optional

from pydantic import ValidationError

from keyprov import __version__, constants
from keyprov.conf import model_settings
from keyprov.exceptions import KeyProvisionError
from keyprov.management.actions import EllipticCurveAction, KeySizeAction, PasswordAction
from keyprov.models import KeySpec, PrivateKeyInfo
from keyprov.provisioner import KeyProvisioner
from keyprov.typehints import ArgumentGroup

log = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def add_key_arguments(group: ArgumentGroup) -> None:
    """Add arguments describing the private key to generate."""
    group.add_argument(
        "--authentication",
        choices=constants.KEY_AUTHENTICATIONS,
        default="rsa",
        help="Type of private key to generate (default: %(default)s).",
    )
    group.add_argument(
        "--size",
        action=KeySizeAction,
        help=f"Key size for RSA keys (default: {model_settings.DEFAULT_KEY_SIZE}).",
    )
    group.add_argument(
        "--curve",
        action=EllipticCurveAction,
        help=f"Elliptic curve for EC keys (default: {model_settings.DEFAULT_ELLIPTIC_CURVE}).",
    )
    group.add_argument(
        "--password",
        nargs="?",
        action=PasswordAction,
        help="Encrypt the private key with PASSWORD. If PASSWORD is not passed, you will be prompted. By "
        "default, the private key is not encrypted.",
    )


def get_parser() -> argparse.ArgumentParser:
    """Get the argument parser for the command line interface."""
    parser = argparse.ArgumentParser(prog="keyprov", description="Provision private key files.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity, pass twice for debug output.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    exists = subparsers.add_parser(
        "exists", help="Check if a key file exists. Exits with status 0 if it exists, 1 if it does not."
    )
    exists.add_argument("path", help="Path to the key file.")

    create = subparsers.add_parser(
        "create", help="Generate a new private key, overwriting any existing file."
    )
    create.add_argument("path", help="Path to the key file.")
    add_key_arguments(create.add_argument_group("Private key parameters"))

    destroy = subparsers.add_parser("destroy", help="Delete a key file. Fails if the file does not exist.")
    destroy.add_argument("path", help="Path to the key file.")

    ensure = subparsers.add_parser("ensure", help="Make sure that a key file is present or absent.")
    ensure.add_argument("path", help="Path to the key file.")
    ensure.add_argument(
        "--state",
        choices=("present", "absent"),
        default="present",
        help="Desired state of the key file (default: %(default)s).",
    )
    ensure.add_argument(
        "--force", action="store_true", default=False, help="Regenerate the key even if it already exists."
    )
    add_key_arguments(ensure.add_argument_group("Private key parameters"))

    inspect = subparsers.add_parser("inspect", help="Show properties of an existing private key.")
    inspect.add_argument("path", help="Path to the key file.")
    inspect.add_argument(
        "--password",
        nargs="?",
        action=PasswordAction,
        help="Password for the private key. If PASSWORD is not passed, you will be prompted.",
    )

    return parser


def get_key_spec(args: argparse.Namespace) -> KeySpec:
    """Get the key specification from parsed command line arguments."""
    options: dict[str, Any] = {"path": args.path, "authentication": args.authentication}
    for option in ("size", "curve", "password"):
        value = getattr(args, option)
        if value is not None:
            options[option] = value
    return KeySpec.from_options(options)


def format_private_key_info(info: PrivateKeyInfo) -> str:
    """Format properties of a private key for output on stdout."""
    lines = [f"Path: {info.path}", f"Type: {info.authentication.upper()}"]
    if info.size is not None:
        lines.append(f"Size: {info.size}")
    if info.curve is not None:
        lines.append(f"Curve: {info.curve}")
    lines.append(f"Encrypted: {'yes' if info.encrypted else 'no'}")
    return "\n".join(lines)


def configure_logging(verbosity: int) -> None:
    """Configure logging based on how often ``--verbose`` was passed."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the command line interface, returns the exit status."""
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    provisioner = KeyProvisioner()

    try:
        if args.command == "exists":
            return 0 if provisioner.exists(args.path) else 1
        if args.command == "create":
            provisioner.create(get_key_spec(args))
        elif args.command == "destroy":
            provisioner.destroy(args.path)
        elif args.command == "ensure":
            changed = provisioner.ensure(get_key_spec(args), state=args.state, force=args.force)
            print("changed" if changed else "unchanged")
        elif args.command == "inspect":
            print(format_private_key_info(provisioner.inspect(args.path, args.password)))
    except (KeyProvisionError, ValidationError, OSError) as ex:
        log.debug("Command failed.", exc_info=True)
        parser.exit(status=2, message=f"{parser.prog}: error: {ex}\n")

    return 0


def run() -> None:  # pragma: no cover
    """Entry point for the ``keyprov`` console script."""
    sys.exit(main())
