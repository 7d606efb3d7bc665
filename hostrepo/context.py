"""Helpers shared by the CLI commands: merge options with hostrepo.toml."""
import click

from . import config as config_module
from .host import UnixHost
from .probe import ExistenceProbe
from .utils import SSHConfig, SSHExecutor


def get_config(ctx):
    if "config" not in ctx.obj:
        ctx.obj["config"] = config_module.load_config(path=ctx.obj["path"])
    return ctx.obj["config"]


def setting(ctx, value, key, option_name=None, default=None):
    """Return ``value`` if given on the command line, else ``key`` from the config.

    When ``option_name`` is set and neither source has a value, a
    UsageError naming the option is raised.
    """
    if value is not None and value != ():
        return value
    value = config_module.get_setting(get_config(ctx), key, default)
    if option_name and value in (None, ""):
        raise click.UsageError(
            f"Missing {option_name}: pass it on the command line or set '{key}' in {config_module.CONFIG_FILE}."
        )
    return value


def build_host(conf):
    """A UnixHost over SSH when ``host.hostname`` is configured, else local."""
    hostname = config_module.get_setting(conf, "host.hostname")
    if not hostname:
        return UnixHost()
    ssh_config = SSHConfig(
        host=hostname,
        port=int(config_module.get_setting(conf, "host.port", 22)),
        user=config_module.get_setting(conf, "host.user", "root"),
        password=config_module.get_setting(conf, "host.password") or None,
        key_path=config_module.get_setting(conf, "host.key_path") or None,
    )
    return UnixHost(SSHExecutor(ssh_config), name=hostname)


def build_probe(ctx):
    return ExistenceProbe(build_host(get_config(ctx)))
