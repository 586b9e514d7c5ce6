"""`upgrade` commands."""

from typing import Optional

import typer

from ..api import UpgradeService
from ..aws import AWSClient
from ..core.grace_period import DEFAULT_GRACE_PERIOD, GRACE_PERIOD_HELP
from ..core.interactive import InteractivePrompter
from ..core.upgrade import VERSION_HELP
from ..core.validation import validate_cluster_key
from ..errors import ClusterMgrError
from ..model.upgrade import UpgradeOptions
from ..utils.reporter import Reporter
from .common import exit_on_error, get_config, management_client

app = typer.Typer(no_args_is_help=True)


@app.callback()
def upgrade():
    """Upgrade a resource."""


@app.command("cluster")
def cluster(
    ctx: typer.Context,
    cluster_key: str = typer.Option(
        ..., "--cluster", "-c", help="Name or ID of the cluster to schedule the upgrade for"
    ),
    version: Optional[str] = typer.Option(None, "--version", help=VERSION_HELP),
    schedule_date: Optional[str] = typer.Option(
        None,
        "--schedule-date",
        help="Next date the upgrade should run at the specified time. Format should be 'yyyy-mm-dd'",
    ),
    schedule_time: Optional[str] = typer.Option(
        None,
        "--schedule-time",
        help="Next time the upgrade should run on the specified date. Format should be 'HH:mm'",
    ),
    node_drain_grace_period: Optional[str] = typer.Option(
        None,
        "--node-drain-grace-period",
        help=f"{GRACE_PERIOD_HELP} (default: {DEFAULT_GRACE_PERIOD})",
    ),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Prompt for values instead of using defaults"
    ),
):
    """Upgrade cluster to a new available version.

    Examples:

      clustermgr upgrade cluster --cluster=mycluster --interactive

      clustermgr upgrade cluster -c mycluster --version 4.5.20
    """
    reporter = Reporter()
    options = UpgradeOptions(
        cluster_key=cluster_key,
        version=version,
        schedule_date=schedule_date,
        schedule_time=schedule_time,
        node_drain_grace_period=node_drain_grace_period,
        interactive=interactive,
    )

    try:
        validate_cluster_key(cluster_key)
        config = get_config(ctx)
        with management_client(config, reporter) as client:
            service = UpgradeService(client, AWSClient.from_config(config), InteractivePrompter())
            service.schedule_upgrade(options)
    except ClusterMgrError as e:
        exit_on_error(e, reporter)

    reporter.info(f"Upgrade successfully scheduled for cluster '{cluster_key}'")
