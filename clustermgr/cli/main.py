"""Main CLI interface using Typer."""

import typer
from rich.console import Console

from .. import __version__
from ..config import Config
from ..errors import ConfigError
from ..utils.logger import get_logger, set_log_level
from ..utils.reporter import Reporter
from . import revoke, upgrade

# Create CLI app
app = typer.Typer(
    name="clustermgr",
    help="Manage upgrades and user roles of managed clusters",
    add_completion=True,
    no_args_is_help=True,
)

console = Console()
logger = get_logger(__name__)

app.add_typer(upgrade.app, name="upgrade")
app.add_typer(revoke.app, name="revoke")


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Manage upgrades and user roles of managed clusters."""
    try:
        config = Config.from_env()
    except ConfigError as e:
        Reporter().error(str(e))
        raise typer.Exit(1)

    set_log_level("DEBUG" if debug else config.log_level)
    if debug:
        logger.debug("Debug mode enabled")
    ctx.obj = config


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]clustermgr[/bold] version {__version__}")


if __name__ == "__main__":
    app()
