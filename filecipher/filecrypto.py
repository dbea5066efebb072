"""Password-based AES-256-CBC encryption of whole files.

An encrypted file holds a 16-byte random salt followed by the cipher text.
Key and IV are derived from the password and salt with PBKDF2-HMAC-SHA256.
"""

from __future__ import annotations

import os
from pathlib import Path

from filecipher.aes import AESEncryption, Mode
from filecipher.cipher import KeySize
from filecipher.kdf import generate_salt, pbkdf2

SALT_LENGTH = 16
ITERATIONS = 10_000
KEY_LENGTH = 32
IV_LENGTH = 16
ENCRYPTED_SUFFIX = ".enc"
DECRYPTED_SUFFIX = ".dec"


class FileCryptoError(Exception):
    """Raised when a file cannot be encrypted or decrypted."""


def encrypted_name(path: str | os.PathLike[str]) -> Path:
    """Return the name an encrypted copy of ``path`` is saved under."""
    return Path(os.fspath(path) + ENCRYPTED_SUFFIX)


def decrypted_name(path: str | os.PathLike[str]) -> Path:
    """Return the name a decrypted copy of ``path`` is saved under."""
    name = os.fspath(path)
    if name.endswith(ENCRYPTED_SUFFIX):
        return Path(name[: -len(ENCRYPTED_SUFFIX)])
    return Path(name + DECRYPTED_SUFFIX)


def _read(path: str | os.PathLike[str]) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileCryptoError("Can't open file for reading!") from exc


def _write(path: str | os.PathLike[str], data: bytes, message: str) -> None:
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise FileCryptoError(message) from exc


class AesFileCrypto:
    """Encrypts and decrypts files with a key derived from a password."""

    def __init__(self, password: str | bytes) -> None:
        if isinstance(password, str):
            password = password.encode()
        if not password:
            raise FileCryptoError("Please enter a password!")
        self._password = bytes(password)
        self._aes = AESEncryption(KeySize.AES_256, Mode.CBC)

    def _derive(self, salt: bytes) -> tuple[bytes, bytes]:
        derived = pbkdf2(self._password, salt, ITERATIONS, KEY_LENGTH + IV_LENGTH)
        return derived[:KEY_LENGTH], derived[KEY_LENGTH:]

    def encrypt_file(
        self, input_file: str | os.PathLike[str], output_file: str | os.PathLike[str]
    ) -> Path:
        """Encrypt ``input_file`` into ``output_file`` and return the output path."""
        data = _read(input_file)
        salt = generate_salt(SALT_LENGTH)
        key, iv = self._derive(salt)
        encrypted = self._aes.encode(data, key, iv)
        _write(output_file, salt + encrypted, "Can't create encrypted file!")
        return Path(output_file)

    def decrypt_file(
        self, input_file: str | os.PathLike[str], output_file: str | os.PathLike[str]
    ) -> Path:
        """Decrypt ``input_file`` into ``output_file`` and return the output path."""
        data = _read(input_file)
        if len(data) < SALT_LENGTH:
            raise FileCryptoError("Invalid file format!")
        salt, body = data[:SALT_LENGTH], data[SALT_LENGTH:]
        key, iv = self._derive(salt)
        try:
            decrypted = self._aes.decode(body, key, iv)
        except ValueError as exc:
            raise FileCryptoError("Invalid file format!") from exc
        decrypted = self._aes.remove_padding(decrypted)
        _write(output_file, decrypted, "Can't create decrypted file!")
        return Path(output_file)


def encrypt_file(path: str | os.PathLike[str], password: str | bytes) -> Path:
    """Encrypt ``path`` next to itself with an ``.enc`` suffix."""
    return AesFileCrypto(password).encrypt_file(path, encrypted_name(path))


def decrypt_file(path: str | os.PathLike[str], password: str | bytes) -> Path:
    """Decrypt ``path``, dropping an ``.enc`` suffix or else adding ``.dec``."""
    return AesFileCrypto(password).decrypt_file(path, decrypted_name(path))