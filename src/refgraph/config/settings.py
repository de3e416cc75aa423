"""RefgraphSettings: one frozen object merged from flags, env and TOML.

Sources, strongest first: CLI flags (init kwargs), ``REFGRAPH_*``
environment variables with ``__`` between section and field, the
``refgraph.toml`` file, then the defaults baked into the section models.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from refgraph.config.discovery import find_config
from refgraph.config.models import InputConfig, NeighborhoodConfig, OutputConfig

# Config file chosen by from_cli(), read while the model is being built.
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


class RefgraphSettings(BaseSettings):
    """Settings for one refgraph invocation.

    Stored on :class:`~refgraph.commands._context.AppContext` by the root
    group and read by every command.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "REFGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    neighborhood: NeighborhoodConfig = Field(default_factory=NeighborhoodConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    input: InputConfig = Field(default_factory=InputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        toml_path = _active_toml.get()
        if toml_path is not None:
            sources += (TomlConfigSettingsSource(settings_cls, toml_file=toml_path),)
        return sources

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> RefgraphSettings:
        """Build settings for a CLI invocation.

        An explicit *config_path* must exist. Without one, ``refgraph.toml``
        is looked up from *search_from* (default: cwd) towards the root.

        Raises:
            click.ClickException: The explicit file is missing, or the
                TOML cannot be parsed.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(search_from)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _active_toml.reset(token)
