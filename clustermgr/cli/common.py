"""Helpers shared by the command handlers."""

from contextlib import contextmanager
from typing import Iterator

import requests
import typer

from ..config import Config
from ..errors import ClusterMgrError, InformationalStop
from ..ocm import ManagementClient
from ..utils.logger import get_logger
from ..utils.reporter import Reporter

logger = get_logger(__name__)


def get_config(ctx: typer.Context) -> Config:
    """Return the configuration loaded by the root callback."""
    if isinstance(ctx.obj, Config):
        return ctx.obj
    return Config.from_env()


@contextmanager
def management_client(config: Config, reporter: Reporter) -> Iterator[ManagementClient]:
    """Open one management API connection and close it on every path."""
    client = ManagementClient.from_config(config)
    try:
        yield client
    finally:
        try:
            client.close()
        except requests.exceptions.RequestException as e:
            reporter.error(f"Failed to close connection: {e}")


def exit_on_error(error: ClusterMgrError, reporter: Reporter) -> None:
    """Report an error and end the command with the matching exit code."""
    if isinstance(error, InformationalStop):
        reporter.warn(str(error))
        raise typer.Exit(0)
    logger.debug(f"{type(error).__name__}: {error}")
    reporter.error(str(error))
    raise typer.Exit(1)
