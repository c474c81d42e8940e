"""Command line interface for vacuum."""

import httpx
import typer
from rich.console import Console

from vacuum.config import CREDITS, Settings
from vacuum.errors import PayloadError
from vacuum.etl import LaunchETL
from vacuum.logging_config import configure_logging, get_logger
from vacuum.render import RenderMode, Segment, palette_for

app = typer.Typer(
    name="vacuum",
    help="A CLI for listing upcoming spaceflight events.",
    no_args_is_help=True,
    add_completion=False,
)

logger = get_logger(__name__)

VERBOSITY_LEVELS = {0: None, 1: "INFO"}


@app.callback()
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(0, "-v", count=True, help="Increase log verbosity"),
) -> None:
    settings = Settings()
    configure_logging(settings, VERBOSITY_LEVELS.get(verbose, "DEBUG"))
    ctx.obj = settings
    logger.debug("options", verbose=verbose, command=ctx.invoked_subcommand)


@app.command()
def about() -> None:
    """Program information"""
    palette = palette_for(Console())
    typer.echo(f"{palette.paint('Vacuum', Segment.TITLE)} - a spaceflight event CLI")
    typer.echo()
    typer.echo(CREDITS)


@app.command()
def launch(
    ctx: typer.Context,
    number: int = typer.Option(1, "-n", min=1, help="Number of launch events to list"),
    verbose: bool = typer.Option(False, "-v", help="List more details for each event"),
) -> None:
    """List launch events"""
    settings: Settings = ctx.obj or Settings()
    etl = LaunchETL(
        mode=RenderMode.EXTENDED if verbose else RenderMode.COMPACT,
        palette=palette_for(Console()),
        sink=typer.echo,
        settings=settings,
    )

    logger.debug("launch options", number=number, extended=verbose)

    url = etl.url(number)
    logger.info("lookup", url=url)
    try:
        launches = etl.transform(etl.extract(url))
    except httpx.HTTPError as e:
        typer.echo(f"Failed to lookup: {e}", err=True)
        raise typer.Exit(code=1)
    except PayloadError as e:
        typer.echo(f"Failed to parse: {e}", err=True)
        raise typer.Exit(code=1)

    etl.load(launches)


if __name__ == "__main__":
    app()
