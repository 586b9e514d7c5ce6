"""Revoke API service for removing users from cluster groups."""

from typing import Callable, Optional

from ..aws import AWSClient
from ..core.interactive import confirm as confirm_action
from ..core.roles import canonicalize_role
from ..core.validation import validate_cluster_key, validate_username
from ..errors import RemoteCallError
from ..model.membership import RevokeOptions
from ..ocm import ManagementClient
from ..utils.logger import get_logger

logger = get_logger(__name__)


class RevokeService:
    """High-level service for revoking a role from a cluster user."""

    def __init__(
        self,
        client: ManagementClient,
        aws_client: AWSClient,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        self.client = client
        self.aws_client = aws_client
        self.confirm = confirm or confirm_action

    def revoke_role(self, options: RevokeOptions) -> bool:
        """Revoke the role, returning False if the user declined."""
        cluster_key = options.cluster_key
        username = options.username
        validate_cluster_key(cluster_key)
        validate_username(username)
        role = canonicalize_role(options.role).value

        creator = self.aws_client.get_creator()

        logger.debug(f"Loading cluster '{cluster_key}'")
        try:
            cluster = self.client.get_cluster(cluster_key, creator.arn)
        except RemoteCallError as e:
            raise e.with_context(f"Failed to get cluster '{cluster_key}'")

        if not self.confirm(f"revoke role {role} from user {username} in cluster {cluster_key}"):
            logger.debug("Revocation declined")
            return False

        logger.debug(f"Removing user '{username}' from group '{role}' in cluster '{cluster_key}'")
        try:
            self.client.delete_group_user(cluster.id, role, username)
        except RemoteCallError as e:
            logger.debug(str(e))
            raise RemoteCallError(
                f"Failed to revoke '{role}' from user '{username}' in cluster "
                f"'{cluster_key}': {e.reason}",
                reason=e.reason, status_code=e.status_code, code=e.code,
            )
        return True
