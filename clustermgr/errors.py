"""Error kinds raised by clustermgr services."""

from datetime import datetime
from typing import Optional


class ClusterMgrError(Exception):
    """Base class for every error reported to the user."""


class ConfigError(ClusterMgrError):
    """Required configuration is missing or malformed."""


class InvalidKeyError(ClusterMgrError):
    """A cluster key or username contains unsafe characters."""


class ClusterNotFoundError(ClusterMgrError):
    """No cluster, or more than one, matches the given key."""


class ClusterNotReadyError(ClusterMgrError):
    """The cluster is not in the ready state."""


class InvalidVersionError(ClusterMgrError):
    """The requested version is not an available upgrade."""


class InvalidScheduleFormatError(ClusterMgrError):
    """Schedule date or time does not match the expected format."""


class InvalidGracePeriodError(ClusterMgrError):
    """Node drain grace period is not '<number> <unit>'."""


class InvalidRoleError(ClusterMgrError):
    """The role is not one of the groups that can be revoked."""


class PromptError(ClusterMgrError):
    """An interactive prompt was aborted or left a required value empty."""


class RemoteCallError(ClusterMgrError):
    """A call to a remote service failed."""

    def __init__(
        self,
        message: str,
        reason: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code
        self.code = code

    def with_context(self, message: str) -> "RemoteCallError":
        """Return a copy whose message is prefixed with what was being done."""
        return RemoteCallError(
            f"{message}: {self}",
            reason=self.reason,
            status_code=self.status_code,
            code=self.code,
        )


class InformationalStop(ClusterMgrError):
    """Ends a command early without it being a failure."""


class NoUpgradesAvailableError(InformationalStop):
    """The cluster has no versions to upgrade to."""


class AlreadyScheduledError(InformationalStop):
    """An upgrade is already scheduled for the cluster."""

    def __init__(self, message: str, version: str, next_run: datetime):
        super().__init__(message)
        self.version = version
        self.next_run = next_run
