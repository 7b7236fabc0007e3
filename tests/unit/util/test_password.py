"""Unit tests for password hashing."""

from qna.util.password import check_password, hash_password


def test_hash_verifies_only_the_right_password():
    hashed = hash_password("secret123", rounds=4)

    assert check_password("secret123", hashed) is True
    assert check_password("secret124", hashed) is False


def test_long_passwords_are_accepted():
    password = "p" * 128

    assert check_password(password, hash_password(password, rounds=4)) is True


def test_malformed_hash_does_not_match():
    assert check_password("secret123", "not-a-bcrypt-hash") is False
