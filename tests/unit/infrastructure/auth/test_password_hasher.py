"""
Unit tests for bcrypt password hashing.
"""

from tasktracker.infrastructure.auth.password_hasher import BcryptPasswordHasher


class TestBcryptPasswordHasher:
    """Test cases for BcryptPasswordHasher."""

    def setup_method(self):
        self.hasher = BcryptPasswordHasher(rounds=4)

    def test_hash_verifies(self):
        digest = self.hasher.hash("secret1")

        assert digest != "secret1"
        assert self.hasher.verify("secret1", digest) is True

    def test_wrong_password_does_not_verify(self):
        digest = self.hasher.hash("secret1")

        assert self.hasher.verify("secret2", digest) is False

    def test_hash_is_salted(self):
        assert self.hasher.hash("secret1") != self.hasher.hash("secret1")

    def test_cost_factor_is_embedded(self):
        assert self.hasher.hash("secret1").startswith("$2b$04$")

    def test_malformed_digest_returns_false(self):
        """Test that a corrupt stored digest never raises."""
        assert self.hasher.verify("secret1", "not-a-bcrypt-digest") is False

    def test_empty_inputs_return_false(self):
        digest = self.hasher.hash("secret1")

        assert self.hasher.verify("", digest) is False
        assert self.hasher.verify("secret1", "") is False

    def test_long_secret_truncated_consistently(self):
        """Test that secrets past 72 bytes hash and verify the same way."""
        secret = "a" * 100
        digest = self.hasher.hash(secret)

        assert self.hasher.verify(secret, digest) is True
        assert self.hasher.verify("a" * 72, digest) is True
