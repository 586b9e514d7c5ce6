"""`revoke` commands."""

import typer

from ..api import RevokeService
from ..aws import AWSClient
from ..core.roles import canonicalize_role
from ..core.validation import validate_cluster_key, validate_username
from ..errors import ClusterMgrError
from ..model.membership import RevokeOptions
from ..utils.reporter import Reporter
from .common import exit_on_error, get_config, management_client

app = typer.Typer(no_args_is_help=True)


@app.callback()
def revoke():
    """Revoke role from a specific resource."""


@app.command("user")
def user(
    ctx: typer.Context,
    role: str = typer.Argument(..., help="Role to revoke: cluster-admins or dedicated-admins"),
    cluster_key: str = typer.Option(
        ..., "--cluster", "-c", help="Name or ID of the cluster to delete the users from"
    ),
    username: str = typer.Option(..., "--user", "-u", help="Username to revoke the role from"),
):
    """Revoke role from cluster user.

    Examples:

      clustermgr revoke user cluster-admins --user=myusername --cluster=mycluster

      clustermgr revoke user dedicated-admins --user=myusername --cluster=mycluster
    """
    reporter = Reporter()
    options = RevokeOptions(cluster_key=cluster_key, username=username, role=role)

    try:
        validate_cluster_key(cluster_key)
        validate_username(username)
        canonicalize_role(role)
        config = get_config(ctx)
        with management_client(config, reporter) as client:
            service = RevokeService(client, AWSClient.from_config(config))
            revoked = service.revoke_role(options)
    except ClusterMgrError as e:
        exit_on_error(e, reporter)

    if revoked:
        reporter.info(f"Revoked role '{role}' from user '{username}' in cluster '{cluster_key}'")


app.command("role", hidden=True)(user)
