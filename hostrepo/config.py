import toml
import os
from .cli_logger import logger

CONFIG_FILE = "hostrepo.toml"

DEFAULT_CONFIG = {
    "host": {
        "platform": "",
        "pe": False,
        "hostname": "",
        "user": "root",
        "port": 22,
        "key_path": "",
    },
    "buildserver": {
        "url": "",
        "build_repos": [],
    },
    "package": {
        "name": "",
        "version": "",
    },
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.debug(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.debug(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_setting(config, key, default=None):
    """Look up a dotted key such as ``host.platform``."""
    value = config
    for k in key.split("."):
        if not isinstance(value, dict) or k not in value:
            return default
        value = value[k]
    return value
