"""Core resolution and validation logic."""

from .grace_period import parse_grace_period, resolve_grace_period
from .interactive import InteractivePrompter, NonInteractivePrompter, Prompter, confirm
from .roles import canonicalize_role
from .schedule import resolve_schedule
from .upgrade import build_upgrade_request
from .validation import is_valid_cluster_key, is_valid_username

__all__ = [
    "parse_grace_period",
    "resolve_grace_period",
    "InteractivePrompter",
    "NonInteractivePrompter",
    "Prompter",
    "confirm",
    "canonicalize_role",
    "resolve_schedule",
    "build_upgrade_request",
    "is_valid_cluster_key",
    "is_valid_username",
]
