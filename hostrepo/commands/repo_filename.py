import click
from .. import conventions
from ..context import setting
from ..decorators import handle_exceptions

@click.command(name="repo-filename")
@click.argument("package_name", required=False)
@click.argument("build_version", required=False)
@click.option("--platform", default=None, help="Platform of the target host, e.g. el-7-x86_64.")
@click.option("--pe/--no-pe", default=None, help="Name the file for an enterprise edition host.")
@click.pass_context
@handle_exceptions
def repo_filename(ctx, package_name, build_version, platform, pe):
    """Print the repo list/definition filename for a package build."""
    platform = setting(ctx, platform, "host.platform", "--platform")
    package_name = setting(ctx, package_name, "package.name", "PACKAGE_NAME")
    build_version = setting(ctx, build_version, "package.version", "BUILD_VERSION")
    pe = setting(ctx, pe, "host.pe", default=False)
    click.echo(conventions.repo_filename(platform, package_name, build_version, is_pe=bool(pe)))
