"""Cluster management API interaction module."""

from .client import ManagementClient

__all__ = ["ManagementClient"]
