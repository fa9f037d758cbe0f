#!/usr/bin/env python3
"""
verify_vectors.py - Check the HMAC and PBKDF2 implementation against
published known-answer vectors (RFC 2202, RFC 6070).

Usage:
    python tools/verify_vectors.py
    python tools/verify_vectors.py --quiet
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from keystretch.vectors import check_vectors


def verify(quiet: bool = False) -> bool:
    """Run all vectors; return True if every one matches."""
    results = check_vectors()
    failed = [name for name, ok in results if not ok]

    if not quiet:
        for name, ok in results:
            print(f"[{'OK' if ok else 'FAIL'}] {name}")

    print(f"\n{len(results) - len(failed)}/{len(results)} vectors passed")
    if failed:
        print(f"[ERROR] Mismatched vectors: {', '.join(failed)}", file=sys.stderr)
        return False
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Verify HMAC-SHA1 and PBKDF2-HMAC-SHA1 against RFC test vectors."
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    args = parser.parse_args()

    sys.exit(0 if verify(args.quiet) else 1)


if __name__ == "__main__":
    main()
