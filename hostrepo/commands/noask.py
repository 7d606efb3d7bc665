import click
from .. import noask as noask_module
from ..context import setting
from ..decorators import handle_exceptions

@click.command()
@click.option("--platform", default=None, help="Platform of the target host, e.g. solaris-10-i386.")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True), default=None,
              help="Write the noask file here instead of stdout.")
@click.pass_context
@handle_exceptions
def noask(ctx, platform, output):
    """Print the Solaris noask admin file for the platform."""
    platform = setting(ctx, platform, "host.platform", "--platform")
    text = noask_module.noask_text(platform)
    if output:
        with open(output, "w") as f:
            f.write(text)
        return
    click.echo(text, nl=False)
