"""
Configuration loader for plangraph.

Loads plangraph.yaml from the given path or the current directory.
If no config file exists, returns defaults.

Example plangraph.yaml:

    validation:
      content_checks: true     # metadata, summary, OKR and tag-format checks
      min_title_length: 5
      okr_checks: default      # none, default or strict (needs content_checks)
      strict: false            # treat warnings as failures in `validate`
    output:
      indent: 2
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import jsonschema
import yaml

from plangraph.lib.constants import CONFIG_FILENAME

logger = logging.getLogger(__name__)

CONFIG_SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "config.schema.json"


class ConfigError(Exception):
    """Configuration could not be used."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


@dataclass
class PlangraphConfig:
    """Settings from plangraph.yaml."""
    content_checks: bool = True
    min_title_length: int = 5
    okr_checks: str = "default"
    strict: bool = False
    indent: int = 2
    source: Optional[Path] = None  # File the settings came from, None for defaults


def _config_problems(data) -> list[str]:
    """Describe every schema violation as "<key>: <problem>".

    Keys are dotted config keys such as "validation.strict"; problems with
    the file as a whole are reported against "(top level)".
    """
    schema = json.loads(CONFIG_SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = jsonschema.Draft7Validator(schema)
    problems = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        key = ".".join(str(p) for p in error.absolute_path) or "(top level)"
        problems.append(f"{key}: {error.message}")
    return problems


def load_config(config_path: Optional[Path] = None) -> PlangraphConfig:
    """Load plangraph.yaml and return PlangraphConfig.

    An explicit config_path must exist. Without one, plangraph.yaml in the
    current directory is used if present, otherwise defaults.

    Raises:
        ConfigError: If an explicit file is missing or unreadable, or the
            settings are not valid plangraph settings
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
        if not config_path.exists():
            return PlangraphConfig()
    elif not config_path.exists():
        raise ConfigError(config_path, "Config file not found")

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(config_path, f"Cannot read config: {e}") from None

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return PlangraphConfig()

    if not data:
        return PlangraphConfig(source=config_path)

    problems = _config_problems(data)
    if problems:
        raise ConfigError(config_path, "; ".join(problems))

    validation = data.get("validation", {})
    output = data.get("output", {})
    return PlangraphConfig(
        content_checks=validation.get("content_checks", True),
        min_title_length=validation.get("min_title_length", 5),
        okr_checks=validation.get("okr_checks", "default"),
        strict=validation.get("strict", False),
        indent=output.get("indent", 2),
        source=config_path,
    )
