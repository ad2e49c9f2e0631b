import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from roster.config.models import RosterConfig

CONFIG_ENV_VAR = "ROSTER_CONFIG"
DATA_DIR_ENV_VAR = "ROSTER_DATA_DIR"
DEFAULT_CONFIG_PATH = Path("roster.yaml")


def resolve_config_path(path: Path | None = None) -> Path:
    if path is not None:
        return path
    return Path(os.environ.get(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_PATH)))


def load_config(path: Path | None = None) -> RosterConfig:
    """
    Load and validate the roster config file.
    A missing file yields the defaults; ROSTER_DATA_DIR overrides storage.path.
    Raises ValueError if the YAML or its schema is invalid.
    """
    path = resolve_config_path(path)

    data = {}
    if path.exists():
        with open(path) as f:
            content = f.read()

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in config file {path}: {e}") from e

    try:
        config = RosterConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Config validation failed for {path}:\n{e}") from e

    data_dir = os.environ.get(DATA_DIR_ENV_VAR)
    if data_dir:
        config.storage.path = data_dir

    return config
