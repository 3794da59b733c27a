import pytest

from modules.auth.passwords import hash_password, verify_password


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("password123")
        assert hashed != "password123"
        assert hashed.startswith("$pbkdf2-sha256$")

    def test_hash_is_salted(self):
        assert hash_password("password123") != hash_password("password123")

    def test_verify(self):
        hashed = hash_password("password123")
        assert verify_password("password123", hashed)
        assert not verify_password("password124", hashed)

    def test_blank_password_cannot_be_hashed(self):
        with pytest.raises(ValueError):
            hash_password("")

    @pytest.mark.parametrize(
        "password, password_hash",
        [
            ("", "$pbkdf2-sha256$29000$abc$def"),
            ("password123", ""),
            ("password123", "not-a-hash"),
            ("password123", "password123"),
        ],
    )
    def test_verify_never_raises(self, password, password_hash):
        assert verify_password(password, password_hash) is False
