import click
from ..cli_logger import logger
from ..context import setting, build_probe
from ..decorators import handle_exceptions
from ..errors import UnsupportedPlatform
from ..resolver import RepoResolver

@click.command(name="repo-path")
@click.argument("package_name", required=False)
@click.argument("build_version", required=False)
@click.option("--platform", default=None, help="Platform of the target host, e.g. el-7-x86_64.")
@click.option("--buildserver", "buildserver_url", default=None, help="Base URL of the buildserver.")
@click.option("--repo", "build_repos", multiple=True, help="Repo to search before the defaults. Repeatable.")
@click.pass_context
@handle_exceptions
def repo_path(ctx, package_name, build_version, platform, buildserver_url, build_repos):
    """Find the repo to install a package build from."""
    platform = setting(ctx, platform, "host.platform", "--platform")
    package_name = setting(ctx, package_name, "package.name", "PACKAGE_NAME")
    build_version = setting(ctx, build_version, "package.version", "BUILD_VERSION")
    buildserver_url = setting(ctx, buildserver_url, "buildserver.url", default="")
    build_repos = setting(ctx, build_repos, "buildserver.build_repos", default=[])

    probe = build_probe(ctx)
    try:
        resolver = RepoResolver(platform, probe)
        logger.debug(f"Searching repos for {package_name} {build_version} on {resolver.platform}...")
        path = resolver.resolve(build_repos, buildserver_url.rstrip("/"), package_name, build_version)
    finally:
        probe.host.close()
    if path is None:
        raise UnsupportedPlatform(f"repo path convention unknown for platform '{platform}'")
    logger.debug(f"Using repo {path}")
    click.echo(path)
