"""Group configuration models and file loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tg_common.config.env import parse_path_env
from tg_common.errors import ConfigurationError
from tg_core.loader import import_reference, is_reference

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "tabgroups.yml"
CONFIG_PATH_ENV = "TG_CONFIG_PATH"


class GroupDefinition(BaseModel):
    """A raw, user-supplied group definition."""

    name: str = Field(min_length=1, description="Group name; may contain punctuation")
    matcher: Any = Field(
        default=None,
        description="Predicate (item) -> bool, or a 'module:attr' reference in files",
    )
    priority: int | None = Field(default=None, description="Display order, ascending")
    highlight: Any = Field(
        default=None,
        description="Style attributes such as guifg/guibg; non-mappings are ignored",
    )
    icon: str | None = None
    separator: Any = Field(
        default=None,
        description="Separator strategy name or callable; defaults to 'pill'",
    )

    model_config = {"extra": "ignore", "arbitrary_types_allowed": True}

    @field_validator("separator", mode="before")
    @classmethod
    def _unwrap_style(cls, value: Any) -> Any:
        # `separator: {style: tab}` is accepted as shorthand for `separator: tab`.
        if isinstance(value, Mapping):
            return value.get("style")
        return value


class GroupsOptions(BaseModel):
    toggle_hidden_on_enter: bool = Field(
        default=False,
        description="Un-hide a group when one of its items is entered",
    )

    model_config = {"extra": "ignore"}


class GroupsSection(BaseModel):
    options: GroupsOptions = Field(default_factory=GroupsOptions)
    items: list[GroupDefinition] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class TabGroupsConfig(BaseModel):
    """Top-level config: highlight table plus group definitions."""

    highlights: dict[str, dict[str, Any]] = Field(default_factory=dict)
    groups: GroupsSection = Field(default_factory=GroupsSection)

    model_config = {"extra": "ignore"}


def coerce_definition(raw: GroupDefinition | Mapping[str, Any], index: int) -> GroupDefinition:
    """Validate one raw definition, reporting the 1-based index on failure."""
    if isinstance(raw, GroupDefinition):
        return raw
    try:
        return GroupDefinition.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid group definition at position {index}",
            context={"index": index, "errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc


def resolve_config_path(path: Path | str | None = None) -> Path:
    """Explicit path, else $TG_CONFIG_PATH, else ./tabgroups.yml."""
    if path is not None:
        return Path(path).expanduser()
    env_path = parse_path_env(os.environ.get(CONFIG_PATH_ENV))
    if env_path is not None:
        return env_path
    return Path.cwd() / DEFAULT_CONFIG_NAME


def _resolve_references(config: TabGroupsConfig) -> None:
    for definition in config.groups.items:
        if is_reference(definition.matcher):
            definition.matcher = import_reference(definition.matcher)
        if is_reference(definition.separator):
            definition.separator = import_reference(definition.separator)


def parse_config(data: Mapping[str, Any] | None) -> TabGroupsConfig:
    """Validate a config mapping and resolve ``module:attr`` references."""
    try:
        config = TabGroupsConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid tab groups configuration",
            context={"errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc
    _resolve_references(config)
    return config


def load_config(path: Path | str | None = None) -> TabGroupsConfig:
    """Load a YAML (or JSON) config file."""
    config_path = resolve_config_path(path)
    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            context={"path": config_path},
        )
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Cannot parse {config_path}",
            context={"path": config_path},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping at the top level.",
            context={"path": config_path},
        )
    config = parse_config(data)
    logger.debug(
        "Loaded %d group definitions from %s", len(config.groups.items), config_path
    )
    return config
