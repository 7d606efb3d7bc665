import click
from ..context import setting
from ..decorators import handle_exceptions
from ..resolver import RepoResolver

@click.command()
@click.option("--platform", default=None, help="Platform of the target host, e.g. el-7-x86_64.")
@click.option("--repo", "build_repos", multiple=True, help="Repo to search before the defaults. Repeatable.")
@click.pass_context
@handle_exceptions
def candidates(ctx, platform, build_repos):
    """List the repos searched for the platform, in search order."""
    platform = setting(ctx, platform, "host.platform", "--platform")
    build_repos = setting(ctx, build_repos, "buildserver.build_repos", default=[])
    resolver = RepoResolver(platform, probe=None)
    for repo in resolver.default_candidates(build_repos):
        click.echo(repo)
