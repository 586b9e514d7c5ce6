"""Cluster group membership and identity models."""

from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    """Cluster groups a user can be removed from."""

    CLUSTER_ADMINS = "cluster-admins"
    DEDICATED_ADMINS = "dedicated-admins"


class RevokeOptions(BaseModel):
    """Values given on the command line for `revoke user`."""

    cluster_key: str
    username: str
    role: str


class Creator(BaseModel):
    """AWS identity running the command."""

    arn: str
    account_id: str
    user_id: str = ""
