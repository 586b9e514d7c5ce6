"""Data models for clustermgr."""

from .cluster import ClusterRecord, ClusterState, ClusterVersionRef, GracePeriodValue, ScheduledUpgrade
from .membership import Creator, RevokeOptions, Role
from .upgrade import ClusterUpdate, NodeDrainGracePeriod, UpgradeOptions, UpgradePolicy, UpgradeRequest

__all__ = [
    "ClusterRecord",
    "ClusterState",
    "ClusterVersionRef",
    "GracePeriodValue",
    "ScheduledUpgrade",
    "Creator",
    "RevokeOptions",
    "Role",
    "ClusterUpdate",
    "NodeDrainGracePeriod",
    "UpgradeOptions",
    "UpgradePolicy",
    "UpgradeRequest",
]
