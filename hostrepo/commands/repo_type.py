import click
from .. import conventions
from ..context import setting
from ..decorators import handle_exceptions

@click.command(name="repo-type")
@click.option("--platform", default=None, help="Platform of the target host, e.g. el-7-x86_64.")
@click.pass_context
@handle_exceptions
def repo_type(ctx, platform):
    """Print the repo type (rpm or deb) for the platform."""
    platform = setting(ctx, platform, "host.platform", "--platform")
    click.echo(conventions.repo_type(platform))
