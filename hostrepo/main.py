import click
from .cli_logger import logger, NORMAL, VERBOSE, TRACE
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the directory holding hostrepo.toml.")
@click.option("--verbose", "-v", is_flag=True, help="Print debug messages.")
@click.option("--trace", is_flag=True, help="Print trace messages (implies --verbose).")
@click.pass_context
def cli(ctx, path, verbose, trace):
    """Resolve package repo conventions for build hosts."""
    ctx.obj = {"path": path}
    if trace:
        logger.set_verbosity(TRACE)
    elif verbose:
        logger.set_verbosity(VERBOSE)
    else:
        logger.set_verbosity(NORMAL)

cli.add_command(config)
cli.add_command(config_dir)
cli.add_command(repo_type)
cli.add_command(repo_filename)
cli.add_command(candidates)
cli.add_command(repo_path)
cli.add_command(noask)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
