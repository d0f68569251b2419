"""Configuration model for file sorter."""

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..exceptions import ConfigurationError

PATH_ENV_VAR = "FILE_SORTER_PATH"
OUTPUT_DIRNAME = "organized"


@dataclass
class Config:
    """Main configuration model."""
    source_directory: Path
    verbose: bool = False

    @property
    def output_directory(self) -> Path:
        """Root of the category folders."""
        return self.source_directory / OUTPUT_DIRNAME


def _config_to_dict(config: Config) -> Dict[str, Any]:
    data = asdict(config)
    data["source_directory"] = str(config.source_directory)
    return data


def _dict_to_config(data: Mapping[str, Any]) -> Config:
    if not isinstance(data, Mapping):
        raise ConfigurationError("Configuration must be a JSON object")

    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    if not data.get("source_directory"):
        raise ConfigurationError("Configuration is missing 'source_directory'")

    return Config(
        source_directory=Path(data["source_directory"]),
        verbose=bool(data.get("verbose", False)),
    )


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

    return _dict_to_config(config_data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w') as f:
        json.dump(_config_to_dict(config), f, indent=2)


def resolve_config(
    directory: Optional[Path] = None,
    config_path: Optional[Path] = None,
    verbose: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Work out the run configuration.

    The directory comes from the explicit argument, then the
    ``FILE_SORTER_PATH`` environment variable, then the config file. There is
    no default directory.
    """
    environ = os.environ if environ is None else environ
    file_config = load_config(config_path) if config_path else None

    if directory is None and environ.get(PATH_ENV_VAR):
        directory = Path(environ[PATH_ENV_VAR])
    if directory is None and file_config is not None:
        directory = file_config.source_directory
    if directory is None:
        raise ConfigurationError(
            f"No directory to organize: pass DIRECTORY, set {PATH_ENV_VAR} "
            "or give a config file with 'source_directory'"
        )

    if file_config is not None:
        verbose = verbose or file_config.verbose

    return Config(source_directory=directory, verbose=verbose)
