"""Test cluster key and username validation."""

import pytest

from clustermgr.core.validation import (
    is_valid_cluster_key,
    is_valid_username,
    validate_cluster_key,
    validate_username,
)
from clustermgr.errors import InvalidKeyError


class TestClusterKeyValidation:
    @pytest.mark.parametrize(
        "key", ["mycluster", "my-cluster", "my_cluster_01", "1a2b3c4d5e6f", "A-Z_0"]
    )
    def test_valid_keys(self, key):
        """Test that letters, digits, dashes and underscores are accepted."""
        assert is_valid_cluster_key(key) is True

    @pytest.mark.parametrize(
        "key",
        [
            "",
            "my cluster",
            "mycluster'",
            "a' or name = 'b",
            "cluster;drop",
            "clüster",
            "cluster.name",
            "cluster\n",
        ],
    )
    def test_invalid_keys(self, key):
        """Test that any other character is rejected."""
        assert is_valid_cluster_key(key) is False

    def test_validate_raises_with_key_in_message(self):
        with pytest.raises(InvalidKeyError, match="'bad key' isn't valid"):
            validate_cluster_key("bad key")

    def test_validate_accepts_valid_key(self):
        validate_cluster_key("mycluster")


class TestUsernameValidation:
    def test_valid_username(self):
        assert is_valid_username("my_user-1") is True

    @pytest.mark.parametrize("username", ["", "user@example.com", "user/name", "user name"])
    def test_invalid_username(self, username):
        assert is_valid_username(username) is False

    def test_validate_raises(self):
        with pytest.raises(InvalidKeyError, match="Username 'user@example.com' isn't valid"):
            validate_username("user@example.com")
