"""Unit tests for password hashing."""

from scribe.util.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_hash_verifies_with_same_password(self):
        encoded = hash_password("correct horse", 1000)

        assert verify_password("correct horse", encoded)
        assert not verify_password("wrong horse", encoded)

    def test_hashes_are_salted(self):
        first = hash_password("same", 1000)
        second = hash_password("same", 1000)

        assert first != second
        assert verify_password("same", first)
        assert verify_password("same", second)

    def test_iterations_are_recorded_in_hash(self):
        encoded = hash_password("pw", 1234)

        assert encoded.startswith("pbkdf2_sha256$1234$")

    def test_malformed_hash_never_verifies(self):
        assert not verify_password("pw", "")
        assert not verify_password("pw", "plaintext")
        assert not verify_password("pw", "md5$1$abc$def")
        assert not verify_password("pw", "pbkdf2_sha256$many$abc$def")
