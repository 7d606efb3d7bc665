import click
import copy
import os
import json
from .. import config as config_module
from ..cli_logger import logger

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the hostrepo.toml configuration file."""
    pass

@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing hostrepo.toml.")
@click.pass_context
def init(ctx, force):
    """Write a hostrepo.toml with default settings."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if os.path.exists(config_file_path) and not force:
        logger.error(f"Error: {config_file_path} already exists. Use --force to overwrite it.")
        return
    if config_module.save_config(copy.deepcopy(config_module.DEFAULT_CONFIG), path=ctx.obj["path"]):
        logger.success(f"Wrote default configuration to {config_file_path}")

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the hostrepo.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No hostrepo.toml found. Please run 'hostrepo config init' first.")
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading hostrepo.toml at {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No hostrepo.toml found. Please run 'hostrepo config init' first.")
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the hostrepo.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No hostrepo.toml found. Please run 'hostrepo config init' first.")
        return

    missing = object()
    value = config_module.get_setting(conf, key, missing)
    if value is missing:
        logger.error(f"Error: Key '{key}' not found in hostrepo.toml")
        return
    click.echo(value)

def _coerce(value):
    """TOML-typed values for booleans, integers and comma lists."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if value.isdigit():
        return int(value)
    if "," in value:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the hostrepo.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No hostrepo.toml found. Please run 'hostrepo config init' first.")
        return

    keys = key.split('.')
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = _coerce(value)

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from the hostrepo.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No hostrepo.toml found. Please run 'hostrepo config init' first.")
        return

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in hostrepo.toml")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
