import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the hostrepo tool."""
    try:
        ver = importlib.metadata.version("hostrepo")
        click.echo(f"hostrepo version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of hostrepo. Is it installed correctly?")
