"""Configuration for the environment accessor.

Options are passed explicitly or loaded from a JSON/YAML file. The library
never reads the process environment to configure itself, since that is the
very table it manages.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from procenv.enums import JoinMode


def _load_mapping(path: Path) -> dict[str, Any]:
    """Load a JSON or YAML file whose top level must be a mapping."""
    suffix = path.suffix.lower()
    if suffix not in (".json", ".yml", ".yaml"):
        raise ValueError(f"Unsupported config file type: {path.name}")

    with path.open("r", encoding="utf-8") as f:
        if suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


class EnvConfig(BaseModel):
    """Behavioral options for RuntimeEnvService.

    All fields have defaults, so ``EnvConfig()`` reproduces the plain
    accessor: aliasing join, no locking, names-only debug logs.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    join_mode: JoinMode = Field(
        default=JoinMode.ALIAS,
        description=(
            "'alias' returns the override mapping itself when the base is empty; "
            "'copy' always returns a fresh dict and never mutates its arguments."
        ),
    )
    thread_safe: bool = Field(
        default=False,
        description="Guard every table access with a single re-entrant lock.",
    )
    log_values: bool = Field(
        default=False,
        description=(
            "Include variable values in debug logs. Values are redacted when "
            "the name looks secret-like."
        ),
    )
    log_max_chars: int = Field(
        default=200,
        ge=0,
        description="Maximum characters of a value preview in logs (0 disables truncation).",
    )

    @classmethod
    def from_file(cls, config_path: str | Path) -> "EnvConfig":
        """Load options from a .json, .yml or .yaml file.

        Args:
            config_path: Path to the config file.

        Returns:
            Configured EnvConfig instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the suffix is unsupported or the top level is not a mapping.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        return cls(**_load_mapping(path))
