"""Cluster-related models."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, field_validator

DEFAULT_CHANNEL_GROUP = "stable"


class ClusterState(str, Enum):
    """States reported by the management service."""

    READY = "ready"
    INSTALLING = "installing"
    PENDING = "pending"
    ERROR = "error"
    UNINSTALLING = "uninstalling"
    HIBERNATING = "hibernating"
    POWERING_DOWN = "powering_down"
    RESUMING = "resuming"
    VALIDATING = "validating"
    WAITING = "waiting"
    UNKNOWN = "unknown"


class GracePeriodValue(BaseModel):
    """A numeric value with a unit, as stored by the service."""

    value: float
    unit: str = "minutes"


class ClusterVersionRef(BaseModel):
    """Reference to the version a cluster runs."""

    id: str = ""
    channel_group: str = DEFAULT_CHANNEL_GROUP


class ClusterRecord(BaseModel):
    """Cluster as returned by the management API."""

    id: str
    name: str = ""
    external_id: Optional[str] = None
    state: ClusterState = ClusterState.UNKNOWN
    openshift_version: Optional[str] = None
    version: ClusterVersionRef = ClusterVersionRef()
    node_drain_grace_period: Optional[GracePeriodValue] = None

    @field_validator("state", mode="before")
    @classmethod
    def _known_state(cls, value: Any) -> Any:
        if value in {state.value for state in ClusterState} or isinstance(value, ClusterState):
            return value
        return ClusterState.UNKNOWN

    @property
    def is_ready(self) -> bool:
        """Check if the cluster can be upgraded."""
        return self.state == ClusterState.READY

    @property
    def version_id(self) -> str:
        """ID of the current version in the versions collection."""
        if self.openshift_version:
            version_id = f"openshift-v{self.openshift_version}"
            channel_group = self.version.channel_group or DEFAULT_CHANNEL_GROUP
            if channel_group != DEFAULT_CHANNEL_GROUP:
                version_id = f"{version_id}-{channel_group}"
            return version_id
        return self.version.id


class ScheduledUpgrade(BaseModel):
    """An upgrade policy already registered for a cluster."""

    id: str = ""
    version: str
    next_run: datetime
    schedule_type: str = "manual"
