"""Block padding schemes used by the AES stream wrapper."""

from __future__ import annotations

from enum import Enum

from filecipher.cipher import BLOCK_SIZE

_ISO_MARKER = 0x80


class Padding(Enum):
    """How plain text is filled up to a whole number of blocks."""

    ZERO = "zero"
    PKCS7 = "pkcs7"
    ISO = "iso"


def pad(data: bytes, padding: Padding = Padding.ISO, alignment: int = BLOCK_SIZE) -> bytes:
    """Return ``data`` extended with ``padding`` to a multiple of ``alignment``."""
    if alignment <= 0:
        raise ValueError(f"alignment must be positive, got {alignment}")
    data = bytes(data)
    size = -len(data) % alignment
    if padding is Padding.PKCS7:
        size = size or alignment
        if size > 0xFF:
            raise ValueError(f"PKCS#7 padding cannot exceed 255 bytes, needs {size}")
        return data + bytes([size]) * size
    if padding is Padding.ISO:
        if not size:
            return data
        return data + bytes([_ISO_MARKER]) + bytes(size - 1)
    return data + bytes(size)


def remove_padding(data: bytes, padding: Padding = Padding.ISO) -> bytes:
    """Strip ``padding`` from decrypted ``data``.

    Data that does not carry the expected padding is returned unchanged.
    """
    data = bytes(data)
    if not data:
        return data
    if padding is Padding.ZERO:
        # Only reliable when the real data does not end with a zero byte.
        return data.rstrip(b"\x00")
    if padding is Padding.PKCS7:
        count = data[-1]
        if 0 < count <= len(data):
            return data[:-count]
        return data
    stripped = data.rstrip(b"\x00")
    if stripped and stripped[-1] == _ISO_MARKER:
        return stripped[:-1]
    return data