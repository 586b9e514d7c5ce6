"""Client for the cluster management API."""

from typing import Any, Dict, List, Optional

import requests

from ..config import Config
from ..errors import ClusterNotFoundError, RemoteCallError
from ..model.cluster import ClusterRecord, ScheduledUpgrade
from ..model.upgrade import ClusterUpdate, UpgradePolicy
from ..utils.logger import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/clusters_mgmt/v1"
CREATOR_ARN_PROPERTY = "rosa_creator_arn"
USER_AGENT = "clustermgr/0.1.0"


class ManagementClient:
    """Wrapper for the clusters_mgmt REST API."""

    def __init__(self, api_url: str, token: str, timeout: float = 30.0):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            }
        )

    @classmethod
    def from_config(cls, config: Config) -> "ManagementClient":
        config.validate_connection()
        return cls(config.api_url, config.token, timeout=config.api_timeout)

    def __enter__(self) -> "ManagementClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _url(self, path: str) -> str:
        return f"{self.api_url}{API_PREFIX}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Send a request and return the decoded body."""
        url = self._url(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise RemoteCallError(f"Request to {url} failed: {e}", reason=str(e))

        if not response.ok:
            raise self._error_from_response(response)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            raise RemoteCallError(
                f"Failed to parse response from {url}", status_code=response.status_code
            )

    def _error_from_response(self, response: requests.Response) -> RemoteCallError:
        """Turn an error response into a RemoteCallError."""
        reason = None
        code = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            reason = body.get("reason")
            code = body.get("code")
        if not reason:
            reason = response.text or response.reason

        logger.debug(f"Request failed with status {response.status_code}: {reason}")
        return RemoteCallError(
            f"status is {response.status_code}, identifier is '{code}', reason is '{reason}'",
            reason=reason,
            status_code=response.status_code,
            code=code,
        )

    def get_cluster(self, cluster_key: str, creator_arn: str) -> ClusterRecord:
        """Find the single cluster matching a name, ID or external ID."""
        query = (
            f"(id = '{cluster_key}' or name = '{cluster_key}' or external_id = '{cluster_key}') "
            f"and properties.{CREATOR_ARN_PROPERTY} = '{creator_arn}'"
        )
        body = self._request("GET", "/clusters", params={"search": query, "page": 1, "size": 1})

        total = body.get("total", 0)
        if total == 0:
            raise ClusterNotFoundError(f"There is no cluster with identifier or name '{cluster_key}'")
        if total > 1:
            raise ClusterNotFoundError(
                f"There are {total} clusters with identifier or name '{cluster_key}'"
            )
        return ClusterRecord(**body["items"][0])

    def get_scheduled_upgrade(self, cluster_id: str) -> Optional[ScheduledUpgrade]:
        """Return the upgrade already scheduled for a cluster, if any."""
        body = self._request("GET", f"/clusters/{cluster_id}/upgrade_policies")
        for item in body.get("items", []):
            if item.get("next_run") and item.get("version"):
                return ScheduledUpgrade(**item)
        return None

    def get_available_upgrades(self, version_id: str) -> List[str]:
        """List the versions a cluster on `version_id` can upgrade to, newest first."""
        body = self._request("GET", f"/versions/{version_id}")
        return list(reversed(body.get("available_upgrades") or []))

    def add_upgrade_policy(self, cluster_id: str, policy: UpgradePolicy) -> Dict[str, Any]:
        return self._request(
            "POST", f"/clusters/{cluster_id}/upgrade_policies", json=policy.to_payload()
        )

    def update_cluster(self, cluster_id: str, update: ClusterUpdate) -> Dict[str, Any]:
        return self._request("PATCH", f"/clusters/{cluster_id}", json=update.to_payload())

    def delete_group_user(self, cluster_id: str, group: str, username: str) -> None:
        """Remove a user from a cluster group."""
        self._request("DELETE", f"/clusters/{cluster_id}/groups/{group}/users/{username}")
