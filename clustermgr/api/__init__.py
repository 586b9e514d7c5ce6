"""API layer for clustermgr business logic."""

from .revoke_service import RevokeService
from .upgrade_service import UpgradeService

__all__ = ["RevokeService", "UpgradeService"]
