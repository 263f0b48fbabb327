"""Tests for password hashing."""

from tastetrail.services.passwords import PasswordHasher


def test_hash_is_salted_and_verifiable() -> None:
    hasher = PasswordHasher(rounds=4)

    first = hasher.hash("hunter2")
    second = hasher.hash("hunter2")

    assert first != second
    assert hasher.verify("hunter2", first)
    assert not hasher.verify("hunter3", first)


def test_verify_corrupt_hash_is_false() -> None:
    assert not PasswordHasher(rounds=4).verify("hunter2", "not-a-bcrypt-hash")
