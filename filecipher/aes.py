"""AES encryption of byte strings in ECB, CBC, CFB and OFB modes."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from filecipher.cipher import BLOCK_SIZE, BlockCipher, KeySize
from filecipher import cipher as _cipher
from filecipher.padding import Padding, pad, remove_padding


class Mode(Enum):
    """Block cipher mode of operation."""

    ECB = "ecb"
    CBC = "cbc"
    CFB = "cfb"
    OFB = "ofb"


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _blocks(data: bytes) -> Iterator[bytes]:
    for start in range(0, len(data), BLOCK_SIZE):
        yield data[start : start + BLOCK_SIZE]


class AESEncryption:
    """AES with a fixed key size, mode and padding scheme."""

    def __init__(
        self,
        level: KeySize,
        mode: Mode,
        padding: Padding = Padding.ISO,
    ) -> None:
        self.level = level
        self.mode = mode
        self.padding = padding

    def _keyed(self, key: bytes, iv: bytes) -> BlockCipher:
        key = bytes(key)
        if len(key) != self.level.key_length:
            raise ValueError(
                f"{self.level.name} needs a {self.level.key_length}-byte key, "
                f"got {len(key)} bytes"
            )
        if self.mode is not Mode.ECB and len(iv) != BLOCK_SIZE:
            raise ValueError(
                f"{self.mode.name} mode needs a {BLOCK_SIZE}-byte IV, got {len(iv)} bytes"
            )
        return BlockCipher(self.level, key)

    def encode(self, raw_text: bytes, key: bytes, iv: bytes = b"") -> bytes:
        """Pad and encrypt ``raw_text``."""
        iv = bytes(iv)
        block_cipher = self._keyed(key, iv)
        data = pad(bytes(raw_text), self.padding, BLOCK_SIZE)
        out: list[bytes] = []
        if self.mode is Mode.ECB:
            out = [block_cipher.encrypt_block(block) for block in _blocks(data)]
        elif self.mode is Mode.CBC:
            previous = iv
            for block in _blocks(data):
                previous = block_cipher.encrypt_block(_xor(block, previous))
                out.append(previous)
        elif self.mode is Mode.CFB:
            previous = iv
            for block in _blocks(data):
                previous = _xor(block, block_cipher.encrypt_block(previous))
                out.append(previous)
        else:
            out = list(self._ofb(block_cipher, data, iv))
        return b"".join(out)

    def decode(self, raw_text: bytes, key: bytes, iv: bytes = b"") -> bytes:
        """Decrypt ``raw_text``; the padding is left in place."""
        iv = bytes(iv)
        data = bytes(raw_text)
        block_cipher = self._keyed(key, iv)
        if len(data) % BLOCK_SIZE:
            raise ValueError(
                f"cipher text length must be a multiple of {BLOCK_SIZE}, got {len(data)}"
            )
        out: list[bytes] = []
        if self.mode is Mode.ECB:
            out = [block_cipher.decrypt_block(block) for block in _blocks(data)]
        elif self.mode is Mode.CBC:
            previous = iv
            for block in _blocks(data):
                out.append(_xor(block_cipher.decrypt_block(block), previous))
                previous = block
        elif self.mode is Mode.CFB:
            previous = iv
            for block in _blocks(data):
                out.append(_xor(block, block_cipher.encrypt_block(previous)))
                previous = block
        else:
            out = list(self._ofb(block_cipher, data, iv))
        return b"".join(out)

    @staticmethod
    def _ofb(block_cipher: BlockCipher, data: bytes, iv: bytes) -> Iterator[bytes]:
        stream = iv
        for block in _blocks(data):
            stream = block_cipher.encrypt_block(stream)
            yield _xor(block, stream)

    def expand_key(self, key: bytes) -> bytes:
        """Return the full key schedule for ``key``."""
        return _cipher.expand_key(self.level, key)

    def remove_padding(self, raw_text: bytes) -> bytes:
        """Strip this instance's padding from decrypted data."""
        return remove_padding(raw_text, self.padding)


def crypt(
    level: KeySize,
    mode: Mode,
    raw_text: bytes,
    key: bytes,
    iv: bytes = b"",
    padding: Padding = Padding.ISO,
) -> bytes:
    """Pad and encrypt ``raw_text`` in one call."""
    return AESEncryption(level, mode, padding).encode(raw_text, key, iv)


def decrypt(
    level: KeySize,
    mode: Mode,
    raw_text: bytes,
    key: bytes,
    iv: bytes = b"",
    padding: Padding = Padding.ISO,
) -> bytes:
    """Decrypt ``raw_text`` in one call; the padding is left in place."""
    return AESEncryption(level, mode, padding).decode(raw_text, key, iv)