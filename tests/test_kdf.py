import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from filecipher.kdf import generate_salt, pbkdf2


def test_known_vector_one_iteration():
    result = pbkdf2(b"password", b"salt", 1, 32)
    assert result.hex() == "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b"


def test_known_vector_two_iterations():
    result = pbkdf2(b"password", b"salt", 2, 32)
    assert result.hex() == "ae4d0c95af6b46d32d0adff928f06dd02a303f8ef3c251dfd6e2d85a95474c43"


def test_text_password_is_utf8():
    password = "password"
    assert pbkdf2(password, b"salt", 3, 20) == pbkdf2(password.encode("utf-8"), b"salt", 3, 20)


def test_non_positive_length_gives_empty():
    assert pbkdf2(b"password", b"salt", 10, 0) == b""
    assert pbkdf2(b"password", b"salt", 10, -5) == b""


def test_zero_iterations_behave_like_one():
    assert pbkdf2(b"password", b"salt", 0, 32) == pbkdf2(b"password", b"salt", 1, 32)


def test_multi_block_output_length_and_prefix():
    long_key = pbkdf2(b"password", b"salt", 100, 48)
    short_key = pbkdf2(b"password", b"salt", 100, 16)
    assert len(long_key) == 48
    assert long_key.startswith(short_key)


def test_different_salts_give_different_keys():
    assert pbkdf2(b"password", b"salt-a", 5, 32) != pbkdf2(b"password", b"salt-b", 5, 32)


@settings(max_examples=25)
@given(st.integers(min_value=1, max_value=100))
def test_output_has_requested_length(length):
    assert len(pbkdf2(b"password", b"salt", 2, length)) == length


def test_generate_salt_length():
    assert len(generate_salt(16)) == 16
    assert generate_salt(0) == b""


def test_generate_salt_is_random():
    assert len({generate_salt(16) for _ in range(8)}) == 8


def test_generate_salt_negative_length():
    with pytest.raises(ValueError):
        generate_salt(-1)