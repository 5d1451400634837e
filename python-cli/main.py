#!/usr/bin/env python3
"""
argonhash Command Line Interface

Create Argon2 hash strings and check passwords against them.

Usage:
    argonhash hash [OPTIONS]
    argonhash verify --hash HASH [OPTIONS]
    argonhash inspect HASH
    argonhash --version
    argonhash --help
"""

import sys
import os
import argparse
import getpass
import logging
from typing import Optional

# Add python-core to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'python-core'))

from argon2.exceptions import HashingError

from argonhash import ArgonConfig, ArgonError, __version__
from argonhash.errors import Base64DecodeError, FormatMismatchError
from argonhash.modes import Variant, supported_variants


class ArgonHashCLI:
    """Main CLI application for argonhash."""

    def __init__(self, stdout=None, stderr=None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def run(self, args: list) -> int:
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed = parser.parse_args(args)

        if parsed.verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(asctime)s %(name)s %(levelname)s %(message)s",
            )

        if hasattr(parsed, 'func'):
            try:
                return parsed.func(parsed)
            except (ArgonError, FormatMismatchError, Base64DecodeError, HashingError,
                    OSError, EOFError) as e:
                print(f"Error: {e}", file=self.stderr)
                return 1
        else:
            parser.print_help(self.stdout)
            return 0

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="argonhash",
            description="Argon2 password hashing",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
    argonhash hash --password foo
    argonhash hash --variant argon2i --time 3 --memory 32768
    argonhash verify --hash '$argon2id$v=13$m=65536,t=1,p=2$...$...'
    argonhash inspect '$argon2id$v=13$m=65536,t=1,p=2$...$...'
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'argonhash v{__version__}'
        )
        parser.add_argument('--verbose', '-v', action='store_true',
                            help='Enable debug logging')

        subparsers = parser.add_subparsers(title='commands', dest='command')

        self.add_hash_command(subparsers)
        self.add_verify_command(subparsers)
        self.add_inspect_command(subparsers)

        return parser

    def add_hash_command(self, subparsers):
        """Add hash command to parser."""
        defaults = ArgonConfig.default()
        cmd = subparsers.add_parser('hash', help='Create a hash string')
        cmd.add_argument('--password', '-p', help='Password (prompted if omitted)')
        cmd.add_argument('--time', '-t', type=int, default=defaults.time_cost,
                         help='Number of passes over memory')
        cmd.add_argument('--memory', '-m', type=int, default=defaults.memory_cost,
                         help='Memory cost in KiB')
        cmd.add_argument('--parallelism', type=int, default=defaults.parallelism,
                         help='Number of lanes')
        cmd.add_argument('--salt-length', type=int, default=defaults.salt_length,
                         help='Salt length in bytes')
        cmd.add_argument('--key-length', type=int, default=defaults.key_length,
                         help='Derived key length in bytes')
        cmd.add_argument('--variant', '-a', default=Variant.ARGON2ID.value,
                         choices=supported_variants(),
                         help='Argon2 variant')
        cmd.set_defaults(func=self.handle_hash)

    def add_verify_command(self, subparsers):
        """Add verify command to parser."""
        cmd = subparsers.add_parser('verify', help='Check a password against a hash string')
        cmd.add_argument('--hash', '-H', required=True, dest='hash_string',
                         help='Hash string to check against')
        cmd.add_argument('--password', '-p', help='Password (prompted if omitted)')
        cmd.set_defaults(func=self.handle_verify)

    def add_inspect_command(self, subparsers):
        """Add inspect command to parser."""
        cmd = subparsers.add_parser('inspect', help='Show the parameters of a hash string')
        cmd.add_argument('hash_string', help='Hash string to decode')
        cmd.set_defaults(func=self.handle_inspect)

    def _password(self, args) -> str:
        if args.password is not None:
            return args.password
        return getpass.getpass("Password: ")

    def handle_hash(self, args):
        """Handle hash command."""
        config = (
            ArgonConfig.default()
            .set_time(args.time)
            .set_memory(args.memory)
            .set_parallelism(args.parallelism)
            .set_salt_length(args.salt_length)
            .set_key_length(args.key_length)
            .set_variant(Variant(args.variant))
        )
        hash_string = config.create_hash(self._password(args))
        print(hash_string.decode("ascii"), file=self.stdout)
        return 0

    def handle_verify(self, args):
        """Handle verify command."""
        argon = ArgonConfig.from_hash(args.hash_string)
        if argon.match(self._password(args)):
            print("match", file=self.stdout)
            return 0
        print("no match", file=self.stdout)
        return 1

    def handle_inspect(self, args):
        """Handle inspect command."""
        argon = ArgonConfig.from_hash(args.hash_string)
        print(f"variant:     {argon.variant}", file=self.stdout)
        print(f"version:     {argon.version}", file=self.stdout)
        print(f"memory:      {argon.memory_cost} KiB", file=self.stdout)
        print(f"time:        {argon.time_cost}", file=self.stdout)
        print(f"parallelism: {argon.parallelism}", file=self.stdout)
        print(f"salt length: {argon.salt_length}", file=self.stdout)
        print(f"key length:  {argon.key_length}", file=self.stdout)
        return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    cli = ArgonHashCLI()
    return cli.run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
