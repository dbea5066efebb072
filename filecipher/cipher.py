"""The AES block cipher: key schedule and single-block transforms."""

from __future__ import annotations

from enum import Enum

BLOCK_SIZE = 16
_COLUMNS = 4


class KeySize(Enum):
    """AES variant, identified by its key length in bits."""

    AES_128 = 128
    AES_192 = 192
    AES_256 = 256

    @property
    def key_length(self) -> int:
        """Key length in bytes."""
        return self.value // 8

    @property
    def nk(self) -> int:
        """Number of 32-bit words in the key."""
        return self.value // 32

    @property
    def rounds(self) -> int:
        """Number of cipher rounds."""
        return self.nk + 6

    @property
    def expanded_key_length(self) -> int:
        """Length in bytes of the full key schedule."""
        return BLOCK_SIZE * (self.rounds + 1)


def _xtime(x: int) -> int:
    return ((x << 1) ^ (0x1B if x & 0x80 else 0)) & 0xFF


def _gmul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _ginv(a: int) -> int:
    # a^254 is the multiplicative inverse in GF(2^8); 0 maps to 0.
    result, base, exponent = 1, a, 254
    while exponent:
        if exponent & 1:
            result = _gmul(result, base)
        base = _gmul(base, base)
        exponent >>= 1
    return result if a else 0


def _rotl8(x: int, shift: int) -> int:
    return ((x << shift) | (x >> (8 - shift))) & 0xFF


def _build_sboxes() -> tuple[bytes, bytes]:
    forward = bytearray(256)
    for value in range(256):
        inv = _ginv(value)
        forward[value] = (
            inv ^ _rotl8(inv, 1) ^ _rotl8(inv, 2) ^ _rotl8(inv, 3) ^ _rotl8(inv, 4) ^ 0x63
        )
    inverse = bytearray(256)
    for value, substituted in enumerate(forward):
        inverse[substituted] = value
    return bytes(forward), bytes(inverse)


def _build_rcon(count: int) -> tuple[int, ...]:
    values = [0x8D, 0x01]
    while len(values) < count:
        values.append(_xtime(values[-1]))
    return tuple(values)


_SBOX, _INV_SBOX = _build_sboxes()
_RCON = _build_rcon(15)
_MUL = {factor: bytes(_gmul(x, factor) for x in range(256)) for factor in (9, 11, 13, 14)}


def expand_key(key_size: KeySize, key: bytes) -> bytes:
    """Expand a user key into the full AES key schedule."""
    key = bytes(key)
    if len(key) != key_size.key_length:
        raise ValueError(
            f"{key_size.name} needs a {key_size.key_length}-byte key, got {len(key)} bytes"
        )
    nk = key_size.nk
    words = [key[i : i + 4] for i in range(0, len(key), 4)]
    for i in range(nk, _COLUMNS * (key_size.rounds + 1)):
        temp = words[-1]
        if i % nk == 0:
            rotated = temp[1:] + temp[:1]
            temp = bytes(_SBOX[b] for b in rotated)
            temp = bytes([temp[0] ^ _RCON[i // nk]]) + temp[1:]
        elif key_size is KeySize.AES_256 and i % nk == 4:
            temp = bytes(_SBOX[b] for b in temp)
        words.append(bytes(a ^ b for a, b in zip(words[i - nk], temp)))
    return b"".join(words)


def _sub_bytes(state: list[int], table: bytes) -> list[int]:
    return [table[b] for b in state]


def _shift_rows(state: list[int]) -> list[int]:
    return [state[((c + r) % 4) * 4 + r] for c in range(4) for r in range(4)]


def _inv_shift_rows(state: list[int]) -> list[int]:
    return [state[((c - r) % 4) * 4 + r] for c in range(4) for r in range(4)]


def _mix_columns(state: list[int]) -> list[int]:
    out: list[int] = []
    for c in range(0, BLOCK_SIZE, 4):
        a0, a1, a2, a3 = state[c : c + 4]
        total = a0 ^ a1 ^ a2 ^ a3
        out += [
            a0 ^ total ^ _xtime(a0 ^ a1),
            a1 ^ total ^ _xtime(a1 ^ a2),
            a2 ^ total ^ _xtime(a2 ^ a3),
            a3 ^ total ^ _xtime(a3 ^ a0),
        ]
    return out


def _inv_mix_columns(state: list[int]) -> list[int]:
    m9, m11, m13, m14 = _MUL[9], _MUL[11], _MUL[13], _MUL[14]
    out: list[int] = []
    for c in range(0, BLOCK_SIZE, 4):
        a, b, cc, d = state[c : c + 4]
        out += [
            m14[a] ^ m11[b] ^ m13[cc] ^ m9[d],
            m9[a] ^ m14[b] ^ m11[cc] ^ m13[d],
            m13[a] ^ m9[b] ^ m14[cc] ^ m11[d],
            m11[a] ^ m13[b] ^ m9[cc] ^ m14[d],
        ]
    return out


def _add_round_key(state: list[int], round_key: bytes) -> list[int]:
    return [s ^ k for s, k in zip(state, round_key)]


class BlockCipher:
    """AES keyed for encrypting and decrypting single 16-byte blocks."""

    def __init__(self, key_size: KeySize, key: bytes) -> None:
        self.key_size = key_size
        schedule = expand_key(key_size, key)
        self._round_keys = [
            schedule[i : i + BLOCK_SIZE] for i in range(0, len(schedule), BLOCK_SIZE)
        ]

    @staticmethod
    def _check_block(block: bytes) -> list[int]:
        data = list(bytes(block))
        if len(data) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(data)}")
        return data

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        state = _add_round_key(self._check_block(block), self._round_keys[0])
        for round_key in self._round_keys[1:-1]:
            state = _mix_columns(_shift_rows(_sub_bytes(state, _SBOX)))
            state = _add_round_key(state, round_key)
        state = _shift_rows(_sub_bytes(state, _SBOX))
        return bytes(_add_round_key(state, self._round_keys[-1]))

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        state = _add_round_key(self._check_block(block), self._round_keys[-1])
        for round_key in reversed(self._round_keys[1:-1]):
            state = _sub_bytes(_inv_shift_rows(state), _INV_SBOX)
            state = _inv_mix_columns(_add_round_key(state, round_key))
        state = _sub_bytes(_inv_shift_rows(state), _INV_SBOX)
        return bytes(_add_round_key(state, self._round_keys[0]))