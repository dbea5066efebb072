"""Command line for encrypting and decrypting files with a password."""

from __future__ import annotations

import argparse
import getpass
import sys
from typing import Sequence

from filecipher.filecrypto import FileCryptoError, decrypt_file, encrypt_file

_PROMPT = "Password: "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filecipher", description="Encrypt or decrypt a file with a password."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, summary in (
        ("encrypt", "encrypt FILE into FILE.enc"),
        ("decrypt", "decrypt FILE, dropping .enc or adding .dec"),
    ):
        command = commands.add_parser(name, help=summary)
        command.add_argument("file", help="file to process")
        command.add_argument(
            "-p", "--password", help="password (prompted for when omitted)"
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    password = args.password
    if password is None:
        password = getpass.getpass(_PROMPT)

    try:
        if args.command == "encrypt":
            output = encrypt_file(args.file, password)
            message = "File encrypted successfully!"
        else:
            output = decrypt_file(args.file, password)
            message = "File decrypted successfully!"
    except FileCryptoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"{message}\nSaved as: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())