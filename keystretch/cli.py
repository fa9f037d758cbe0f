#!/usr/bin/env python3
"""
keystretch command line interface

Derives a key from a password with PBKDF2-HMAC and prints the salt and key.

Examples:
  keystretch --password secret --salt NaCl --rounds 1000 --length 32
  keystretch --salt-hex 73616c74 --hash sha256 --format base64
  keystretch --init-config keystretch.json
"""

import argparse
import dataclasses
import getpass
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config_loader import create_sample_config, load_config
from .deriver import KeyDeriver
from .errors import DerivationError
from .hashes import SUPPORTED_HASHES
from .models import OUTPUT_FORMATS, DerivationConfig


class EventLog:
    """Appends timestamped events to a log file."""

    def __init__(self, log_path: Path):
        self.log_path = log_path

    def log(self, event: str, details: str = ""):
        """Append an entry to the log."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_entry = f"[{timestamp}] - {event}"
        if details:
            log_entry += f" - {details}"
        log_entry += "\n"

        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(log_entry)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keystretch",
        description="Derive a key from a password using PBKDF2-HMAC (PKCS #5 v2.0).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Security Notes:
  - Passing --password on the command line exposes it to the process list;
    omit it to be prompted instead
  - Keep the salt: the same password, salt, rounds and hash are needed to
    reproduce the key
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--password", help="Password (prompted if omitted)")

    salt_group = parser.add_mutually_exclusive_group()
    salt_group.add_argument("--salt", help="Salt as text (UTF-8)")
    salt_group.add_argument("--salt-hex", help="Salt as hex")

    parser.add_argument("--rounds", type=int, help="Iteration count")
    parser.add_argument("--length", type=int, help="Derived key length in bytes")
    parser.add_argument("--hash", choices=SUPPORTED_HASHES, help="Hash primitive under HMAC")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Key output format")
    parser.add_argument("--config", help="Path to keystretch.json")
    parser.add_argument("--init-config", metavar="PATH", help="Write a sample config file and exit")
    parser.add_argument("--log-file", help="Append derivation events to this file")
    return parser


def apply_overrides(config: DerivationConfig, args: argparse.Namespace) -> DerivationConfig:
    """Return a copy of ``config`` with command line values taking precedence."""
    overrides = {}
    if args.rounds is not None:
        overrides['rounds'] = args.rounds
    if args.length is not None:
        overrides['length'] = args.length
    if args.hash is not None:
        overrides['hash_name'] = args.hash
    if args.format is not None:
        overrides['output_format'] = args.format
    return dataclasses.replace(config, **overrides)


def _resolve_salt(args: argparse.Namespace) -> Optional[bytes]:
    if args.salt is not None:
        return args.salt.encode('utf-8')
    if args.salt_hex is not None:
        try:
            return bytes.fromhex(args.salt_hex)
        except ValueError:
            raise ValueError(f"--salt-hex is not valid hex: {args.salt_hex!r}") from None
    return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.init_config:
        create_sample_config(Path(args.init_config))
        return 0

    try:
        config = load_config(Path(args.config) if args.config else None)
        config = apply_overrides(config, args)
        event_log = EventLog(Path(args.log_file)) if args.log_file else None
        deriver = KeyDeriver(config, session_logger=event_log.log if event_log else None)
        salt = _resolve_salt(args)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    password = args.password
    if password is None:
        password = getpass.getpass("Enter password: ")

    try:
        derived = deriver.derive(password, salt)
    except DerivationError as e:
        print(f"[ERROR] Key derivation failed: {e}", file=sys.stderr)
        return 1

    if config.output_format == "raw":
        # stdout carries only the key bytes; the salt is still needed to re-derive it
        print(f"Salt (hex): {derived.salt.hex()}", file=sys.stderr)
        sys.stdout.flush()
        sys.stdout.buffer.write(derived.key)
        sys.stdout.flush()
        return 0

    print(f"[OK] Derived {len(derived.key)}-byte key "
          f"(PBKDF2-HMAC-{config.hash_name.upper()}, {config.rounds} rounds)")
    print(f"  Salt (hex): {derived.salt.hex()}")
    print(f"  Key ({config.output_format}): {derived.encode(config.output_format)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
