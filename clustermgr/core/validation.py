"""Checks that user-supplied identifiers are safe to put in search queries."""

import re

from ..errors import InvalidKeyError

SAFE_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_cluster_key(key: str) -> bool:
    """Check if a cluster name, ID or external ID has only safe characters."""
    return bool(key) and SAFE_KEY_RE.fullmatch(key) is not None


def is_valid_username(username: str) -> bool:
    """Check if a username has only safe characters."""
    return bool(username) and SAFE_KEY_RE.fullmatch(username) is not None


def validate_cluster_key(key: str) -> None:
    if not is_valid_cluster_key(key):
        raise InvalidKeyError(
            f"Cluster name, identifier or external identifier '{key}' isn't valid: it "
            "must contain only letters, digits, dashes and underscores"
        )


def validate_username(username: str) -> None:
    if not is_valid_username(username):
        raise InvalidKeyError(
            f"Username '{username}' isn't valid: it must contain only letters, digits, "
            "dashes and underscores"
        )
