"""Configuration parsing for htmlbuilder.yaml"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from htmlbuilder.exceptions import ConfigError

CONFIG_FILENAME = "htmlbuilder.yaml"


class BuilderConfig(BaseModel):
    """Compiler options.

    marker: character whose leading count gives a line's depth
    attribute_separator: splits the `[...]` attribute list
    decode_entities: resolve `&amp;`-style references in content
    container: tag of the element trees are mounted into by default
    """

    marker: str = ">"
    attribute_separator: str = ";"
    decode_entities: bool = True
    container: str = "body"

    model_config = {"validate_assignment": True}

    @field_validator("marker", "attribute_separator")
    @classmethod
    def single_character(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError("must be a single non-whitespace character")
        return value

    @classmethod
    def load(cls, path: Path) -> "BuilderConfig":
        """Load config from yaml file, defaults if it does not exist"""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(str(path), "not valid YAML") from exc

        if not isinstance(data, dict):
            raise ConfigError(str(path), "top level must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(path), str(exc)) from exc


def find_config_file(start: Path | None = None) -> Path | None:
    """Find htmlbuilder.yaml in the given directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None
