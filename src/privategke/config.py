import json
from pathlib import Path

from pydantic import ValidationError

from .logger import logger
from .schemas.cluster import ClusterConfig


class ConfigError(Exception):
    """Raised when a cluster config file cannot be read or validated."""


def load_config(path: str | Path) -> ClusterConfig:
    """
    Loads cluster inputs from a JSON file (tfvars.json layout).
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e

    try:
        config = ClusterConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid cluster config in {config_path}: {e}") from e

    logger.debug(f"Loaded config for {config.name} from {config_path}")
    return config
