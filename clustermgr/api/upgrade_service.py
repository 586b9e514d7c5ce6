"""Upgrade API service for scheduling cluster upgrades."""

from datetime import datetime, timezone
from typing import Optional

from ..aws import AWSClient
from ..core.interactive import InteractivePrompter, NonInteractivePrompter, Prompter
from ..core.upgrade import build_upgrade_request
from ..core.validation import validate_cluster_key
from ..errors import AlreadyScheduledError, ClusterNotReadyError, RemoteCallError
from ..model.upgrade import UpgradeOptions, UpgradeRequest
from ..ocm import ManagementClient
from ..utils.logger import get_logger

logger = get_logger(__name__)


class UpgradeService:
    """High-level service for scheduling a cluster upgrade."""

    def __init__(
        self,
        client: ManagementClient,
        aws_client: AWSClient,
        prompter: Optional[Prompter] = None,
    ):
        self.client = client
        self.aws_client = aws_client
        self.prompter = prompter or InteractivePrompter()

    def schedule_upgrade(
        self, options: UpgradeOptions, now: Optional[datetime] = None
    ) -> UpgradeRequest:
        """Schedule an upgrade and return what was submitted.

        The upgrade policy is created first and the cluster update second. If
        the second call fails the policy stays in place.
        """
        cluster_key = options.cluster_key
        validate_cluster_key(cluster_key)
        prompter = self.prompter if options.interactive else NonInteractivePrompter()

        creator = self.aws_client.get_creator()

        logger.debug(f"Loading cluster '{cluster_key}'")
        try:
            cluster = self.client.get_cluster(cluster_key, creator.arn)
        except RemoteCallError as e:
            raise e.with_context(f"Failed to get cluster '{cluster_key}'")

        if not cluster.is_ready:
            raise ClusterNotReadyError(f"Cluster '{cluster_key}' is not yet ready")

        try:
            scheduled = self.client.get_scheduled_upgrade(cluster.id)
        except RemoteCallError as e:
            raise e.with_context(f"Failed to get scheduled upgrades for cluster '{cluster_key}'")
        if scheduled is not None:
            next_run = scheduled.next_run.astimezone(timezone.utc)
            raise AlreadyScheduledError(
                f"There is already a scheduled upgrade to version {scheduled.version} "
                f"on {next_run.strftime('%Y-%m-%d %H:%M UTC')}",
                version=scheduled.version,
                next_run=scheduled.next_run,
            )

        logger.debug(f"Loading available upgrades for version '{cluster.version_id}'")
        try:
            available_upgrades = self.client.get_available_upgrades(cluster.version_id)
        except RemoteCallError as e:
            raise e.with_context("Failed to find available upgrades")

        request = build_upgrade_request(cluster, available_upgrades, options, prompter, now)

        try:
            self.client.add_upgrade_policy(cluster.id, request.policy)
        except RemoteCallError as e:
            raise e.with_context(f"Failed to schedule upgrade for cluster '{cluster_key}'")

        try:
            self.client.update_cluster(cluster.id, request.cluster_update)
        except RemoteCallError as e:
            logger.warning(
                f"Upgrade policy for cluster '{cluster_key}' was created but the cluster "
                "update failed"
            )
            raise e.with_context(f"Failed to update cluster '{cluster_key}'")

        logger.info(f"Upgrade of cluster '{cluster_key}' to {request.policy.version} scheduled")
        return request
