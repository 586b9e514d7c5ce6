"""Upgrade scheduling models."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel

MINUTES_PER_HOUR = 60
HOUR_UNITS = ("hour", "hours")
MINUTE_UNITS = ("minute", "minutes")


class NodeDrainGracePeriod(BaseModel):
    """Time budget for draining a node, as given by the user."""

    value: float
    unit: str

    class Config:
        frozen = True

    def to_minutes(self) -> float:
        """Normalize the period to minutes."""
        if self.unit in HOUR_UNITS:
            return self.value * MINUTES_PER_HOUR
        return self.value


class UpgradePolicy(BaseModel):
    """Instruction to upgrade a cluster to a version at a given time."""

    version: str
    next_run: datetime
    schedule_type: str = "manual"

    class Config:
        frozen = True

    def to_payload(self) -> Dict[str, Any]:
        """Render the request body."""
        next_run = self.next_run
        if next_run.tzinfo is None:
            next_run = next_run.replace(tzinfo=timezone.utc)
        return {
            "kind": "UpgradePolicy",
            "schedule_type": self.schedule_type,
            "version": self.version,
            "next_run": next_run.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        }


class ClusterUpdate(BaseModel):
    """Cluster settings changed together with an upgrade."""

    node_drain_grace_minutes: float

    class Config:
        frozen = True

    def to_payload(self) -> Dict[str, Any]:
        """Render the request body."""
        return {
            "node_drain_grace_period": {
                "value": self.node_drain_grace_minutes,
                "unit": "minutes",
            }
        }


class UpgradeRequest(BaseModel):
    """Everything submitted to schedule one upgrade."""

    policy: UpgradePolicy
    cluster_update: ClusterUpdate

    class Config:
        frozen = True


class UpgradeOptions(BaseModel):
    """Values given on the command line for `upgrade cluster`."""

    cluster_key: str
    version: Optional[str] = None
    schedule_date: Optional[str] = None
    schedule_time: Optional[str] = None
    node_drain_grace_period: Optional[str] = None
    interactive: bool = False
