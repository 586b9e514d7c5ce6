"""Builds the requests that schedule a cluster upgrade."""

from datetime import datetime
from typing import List, Optional

from ..errors import InvalidVersionError, NoUpgradesAvailableError
from ..model.cluster import ClusterRecord
from ..model.upgrade import ClusterUpdate, UpgradeOptions, UpgradePolicy, UpgradeRequest
from ..utils.logger import get_logger
from .grace_period import resolve_grace_period
from .interactive import Prompter
from .schedule import resolve_schedule

logger = get_logger(__name__)

VERSION_HELP = "Version of OpenShift that the cluster will be upgraded to"


def resolve_version(
    available_upgrades: List[str], requested: Optional[str], prompter: Prompter
) -> str:
    """Pick the target version among the available upgrades.

    The first available upgrade is the recommended one and is used when no
    version was requested.
    """
    if not available_upgrades:
        raise NoUpgradesAvailableError("There are no available upgrades")

    version = requested
    if not version or prompter.enabled:
        version = prompter.ask(
            "Version",
            options=available_upgrades,
            default=version or available_upgrades[0],
            required=True,
            help=VERSION_HELP,
        )

    if version not in available_upgrades:
        raise InvalidVersionError(
            f"Expected a valid version to upgrade to, '{version}' is not one of: "
            f"{', '.join(available_upgrades)}"
        )
    return version


def build_upgrade_request(
    cluster: ClusterRecord,
    available_upgrades: List[str],
    options: UpgradeOptions,
    prompter: Prompter,
    now: Optional[datetime] = None,
) -> UpgradeRequest:
    """Resolve version, schedule and grace period into an upgrade request."""
    version = resolve_version(available_upgrades, options.version, prompter)
    next_run = resolve_schedule(options.schedule_date, options.schedule_time, prompter, now)
    grace_period = resolve_grace_period(cluster, options.node_drain_grace_period, prompter)

    logger.debug(
        f"Upgrade of cluster '{cluster.id}' to {version} at {next_run.isoformat()} "
        f"with a {grace_period.to_minutes():g} minute drain grace period"
    )
    return UpgradeRequest(
        policy=UpgradePolicy(version=version, next_run=next_run),
        cluster_update=ClusterUpdate(node_drain_grace_minutes=grace_period.to_minutes()),
    )
