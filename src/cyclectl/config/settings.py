"""CycleSettings: CLI flags, env vars and cyclectl.toml merged into one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CYCLECTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``cyclectl.toml`` found by :func:`find_config`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from cyclectl.config.discovery import find_config
from cyclectl.config.models import BuilderConfig, DetectorConfig, StoreConfig

# pydantic resolves sources inside __init__, so the file chosen by
# from_cli() travels through this variable.
_toml_file: ContextVar[Path | None] = ContextVar("cyclectl_toml_file", default=None)


class CycleSettings(BaseSettings):
    """Resolved settings for one cyclectl invocation.

    Attributes:
        store_root: Directory holding ``.cyclectl/`` (parent of
            ``cyclectl.toml``, or CWD if no config found).
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CYCLECTL_",
        "env_nested_delimiter": "__",
    }

    store_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    store: StoreConfig = Field(default_factory=StoreConfig)
    builder: BuilderConfig = Field(default_factory=BuilderConfig)
    detector: DetectorConfig = Field(default_factory=DetectorConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        store_root: Path | None = None,
        **cli_flags: Any,
    ) -> CycleSettings:
        """Build settings for a CLI run.

        An explicit *config_path* wins over discovery; a path that is not
        a file is ignored. Without *store_root*, the store lives next to
        the config file, or in the CWD when there is none.
        """
        if config_path:
            toml_file = Path(config_path) if Path(config_path).is_file() else None
        else:
            toml_file = find_config(store_root)

        if store_root is None:
            store_root = toml_file.parent if toml_file else Path.cwd()

        token = _toml_file.set(toml_file)
        try:
            return cls(store_root=store_root, config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        finally:
            _toml_file.reset(token)
