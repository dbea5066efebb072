import pytest
from hypothesis import given, strategies as st

from filecipher.cipher import BlockCipher, KeySize, expand_key

PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")

FIPS_VECTORS = [
    (KeySize.AES_128, "69c4e0d86a7b0430d8cdb78070b4c55a"),
    (KeySize.AES_192, "dda97ca4864cdfe06eaf70a0ec0d7191"),
    (KeySize.AES_256, "8ea2b7ca516745bfeafc49904b496089"),
]

LAST_ROUND_KEYS = [
    (KeySize.AES_128, "13111d7fe3944a17f307a78b4d2b30c5"),
    (KeySize.AES_192, "a4970a331a78dc09c418c271e3a41d5d"),
    (KeySize.AES_256, "24fc79ccbf0979e9371ac23c6d68de36"),
]


def _sequential_key(size: KeySize) -> bytes:
    return bytes(range(size.key_length))


@pytest.mark.parametrize("size,expected", FIPS_VECTORS)
def test_standard_vectors_encrypt(size, expected):
    cipher = BlockCipher(size, _sequential_key(size))
    assert cipher.encrypt_block(PLAINTEXT).hex() == expected


@pytest.mark.parametrize("size,expected", FIPS_VECTORS)
def test_standard_vectors_decrypt(size, expected):
    cipher = BlockCipher(size, _sequential_key(size))
    assert cipher.decrypt_block(bytes.fromhex(expected)) == PLAINTEXT


@pytest.mark.parametrize("size", list(KeySize))
def test_expanded_key_length_and_prefix(size):
    key = _sequential_key(size)
    schedule = expand_key(size, key)
    assert len(schedule) == 16 * (size.rounds + 1)
    assert schedule[: size.key_length] == key


@pytest.mark.parametrize("size,expected", LAST_ROUND_KEYS)
def test_expanded_key_last_round_key(size, expected):
    schedule = expand_key(size, _sequential_key(size))
    assert schedule[-16:].hex() == expected


@pytest.mark.parametrize("size", list(KeySize))
def test_expanded_key_plain_words_follow_recurrence(size):
    schedule = expand_key(size, bytes(reversed(range(size.key_length))))
    words = [schedule[i : i + 4] for i in range(0, len(schedule), 4)]
    nk = size.nk
    for i in range(nk, len(words)):
        if i % nk == 0 or (size is KeySize.AES_256 and i % nk == 4):
            continue
        assert words[i] == bytes(a ^ b for a, b in zip(words[i - 1], words[i - nk]))


@pytest.mark.parametrize("size", list(KeySize))
def test_expand_key_rejects_wrong_length(size):
    with pytest.raises(ValueError):
        expand_key(size, bytes(size.key_length + 1))


def test_block_cipher_rejects_wrong_key_length():
    with pytest.raises(ValueError):
        BlockCipher(KeySize.AES_256, bytes(16))


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_blocks_must_be_sixteen_bytes(length):
    cipher = BlockCipher(KeySize.AES_128, bytes(16))
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(length))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(length))


def test_accepts_bytes_like_input():
    cipher = BlockCipher(KeySize.AES_128, bytearray(range(16)))
    assert cipher.encrypt_block(bytearray(PLAINTEXT)) == cipher.encrypt_block(PLAINTEXT)
    assert cipher.encrypt_block(memoryview(PLAINTEXT)) == cipher.encrypt_block(PLAINTEXT)


@given(
    size=st.sampled_from(list(KeySize)),
    key_seed=st.binary(min_size=32, max_size=32),
    block=st.binary(min_size=16, max_size=16),
)
def test_round_trip(size, key_seed, block):
    cipher = BlockCipher(size, key_seed[: size.key_length])
    encrypted = cipher.encrypt_block(block)
    assert len(encrypted) == 16
    assert cipher.decrypt_block(encrypted) == block


@given(
    key=st.binary(min_size=16, max_size=16),
    first=st.binary(min_size=16, max_size=16),
    second=st.binary(min_size=16, max_size=16),
)
def test_encryption_is_injective(key, first, second):
    cipher = BlockCipher(KeySize.AES_128, key)
    same_output = cipher.encrypt_block(first) == cipher.encrypt_block(second)
    assert same_output == (first == second)