"""AWS identity client."""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config import Config
from ..errors import RemoteCallError
from ..model.membership import Creator
from ..utils.logger import get_logger

logger = get_logger(__name__)


class AWSClient:
    """Wrapper for the AWS calls clustermgr needs."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None):
        try:
            self.session = boto3.Session(profile_name=profile, region_name=region)
        except BotoCoreError as e:
            raise RemoteCallError(f"Failed to create AWS client: {e}", reason=str(e))

    @classmethod
    def from_config(cls, config: Config) -> "AWSClient":
        return cls(profile=config.aws_profile, region=config.aws_region)

    def get_creator(self) -> Creator:
        """Return the identity the AWS credentials belong to."""
        try:
            identity = self.session.client("sts").get_caller_identity()
        except ClientError as e:
            reason = e.response.get("Error", {}).get("Message", str(e))
            raise RemoteCallError(f"Failed to get AWS creator: {reason}", reason=reason)
        except BotoCoreError as e:
            raise RemoteCallError(f"Failed to get AWS creator: {e}", reason=str(e))

        logger.debug(f"Using AWS identity '{identity['Arn']}'")
        return Creator(
            arn=identity["Arn"],
            account_id=identity["Account"],
            user_id=identity.get("UserId", ""),
        )
