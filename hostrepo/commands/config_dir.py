import click
from .. import conventions
from ..context import setting
from ..decorators import handle_exceptions

@click.command(name="config-dir")
@click.option("--platform", default=None, help="Platform of the target host, e.g. el-7-x86_64.")
@click.pass_context
@handle_exceptions
def config_dir(ctx, platform):
    """Print the package-manager config directory for the platform."""
    platform = setting(ctx, platform, "host.platform", "--platform")
    click.echo(conventions.package_config_dir(platform))
