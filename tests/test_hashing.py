import pytest

from utils.hashing import get_password_hash, verify_password


@pytest.mark.parametrize("password", ["password123", "", "zażółć gęślą jaźń", "x" * 200])
def test_hash_verifies_same_password(password):
    assert verify_password(password, get_password_hash(password))


def test_wrong_password_is_rejected():
    stored = get_password_hash("password123")
    assert not verify_password("password124", stored)


def test_hash_format_and_random_salt():
    first = get_password_hash("password123")
    second = get_password_hash("password123")

    hashed, salt = first.split(".")
    assert len(hashed) == 128  # 64 byte scrypt key, hex encoded
    assert len(salt) == 32
    assert first != second


@pytest.mark.parametrize("stored", ["", "no-separator", "zz.salt", None])
def test_malformed_stored_value_never_verifies(stored):
    assert not verify_password("password123", stored)
