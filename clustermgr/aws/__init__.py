"""AWS interaction module."""

from .client import AWSClient

__all__ = ["AWSClient"]
