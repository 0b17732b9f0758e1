"""CLI settings resolved from flags, ``TS2DATE_*`` env vars and ts2date.toml.

Later sources only fill what earlier ones leave unset:

  1. ``--attributes`` and the other global CLI flags
  2. env vars, e.g. ``TS2DATE_PROCESSOR__ATTRIBUTES_LIST``
  3. the ``[processor]`` table of the config file
  4. model defaults

The config file is ``--config`` when given, else ``$TS2DATE_CONFIG``,
else the nearest ``ts2date.toml`` in the working directory or a parent.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from ts2date.config.models import ProcessorConfig

CONFIG_FILENAME = "ts2date.toml"
CONFIG_ENV_VAR = "TS2DATE_CONFIG"

_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


def locate_config_file(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    """Pick the config file to read, or None when there is none."""
    if explicit is not None:
        return explicit if explicit.is_file() else None
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        path = Path(from_env)
        return path if path.is_file() else None
    here = (cwd or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class Ts2DateSettings(BaseSettings):
    """Frozen settings shared by every command."""

    model_config = {
        "frozen": True,
        "env_prefix": "TS2DATE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    processor: ProcessorConfig = Field(default_factory=ProcessorConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlConfigSettingsSource(settings_cls, toml_file=_active_toml.get())
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: Path | str | None = None,
        attributes: str | None = None,
        cwd: Path | None = None,
        **flags: Any,
    ) -> Ts2DateSettings:
        """Resolve settings for one CLI invocation.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        explicit = Path(config_path) if config_path else None
        toml_path = locate_config_file(explicit, cwd)
        if attributes is not None:
            flags["processor"] = {"attributes_list": attributes}

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _active_toml.reset(token)
