"""Loading configuration files from disk."""

import logging
from pathlib import Path

import yaml

from ftree.config.schema import Configuration
from ftree.exceptions import ConfigurationError
from ftree.types import PathType

logger = logging.getLogger(__name__)

CONFIG_NAMES = ("ftree.yaml", "ftree.yml", ".ftreerc.yaml", ".ftreerc.yml")


def load_config(config_file: PathType) -> Configuration:
    """Read, parse and validate a YAML configuration file.

    Args:
        config_file: Path to the configuration file.

    Returns:
        The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid YAML or fails validation.
    """
    path = Path(config_file)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"not a valid YAML document: {e}", source=str(path))

    logger.debug("Loaded configuration from %s", path)
    return Configuration.from_mapping(data, source=str(path))


def default_config_file(directory: PathType) -> Path:
    """Return the first conventional config file name present in ``directory``.

    Only ``directory`` itself is checked. When none exists, the path of ``ftree.yaml``
    inside it is returned so the caller can report it.
    """
    base = Path(directory)
    for name in CONFIG_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return base / CONFIG_NAMES[0]
