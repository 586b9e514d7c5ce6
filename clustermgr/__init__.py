"""Manage upgrades and user roles of managed clusters."""

__version__ = "0.1.0"
