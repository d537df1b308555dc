"""Settings for one CLI run, assembled by pydantic-settings.

Sources, strongest first:
  1. CLI flags, passed as init kwargs by the root group
  2. ``CASHDRAWER_*`` env vars (``CASHDRAWER_DRAWER__CURRENCY_LABEL=EUR``)
  3. the ``cashdrawer.toml`` picked by :func:`resolve_config`
  4. defaults from :mod:`cashdrawer.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cashdrawer.config.discovery import load_config, resolve_config
from cashdrawer.config.models import DrawerConfig

# File chosen by from_cli, read back by settings_customise_sources.
_config_file: ContextVar[Path | None] = ContextVar("_config_file", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feeds the keys a ``cashdrawer.toml`` actually sets into the settings.

    The file is validated against :class:`CashDrawerConfig` first, so a
    bad file stops the CLI with a message naming it.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values: dict[str, Any] = {}
        if path is None:
            return
        try:
            config = load_config(path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
        except ValidationError as exc:
            raise click.ClickException(f"Invalid settings in {path}:\n{exc}") from exc
        self._values = config.model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


class CashDrawerSettings(BaseSettings):
    """Everything a command needs to know about this run.

    Attributes:
        config_path: The TOML file that was read, or None when running
            on defaults.
        drawer: The [drawer] section (float, currency label and symbol).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CASHDRAWER_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    drawer: DrawerConfig = Field(default_factory=DrawerConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No .env or secrets directory: a till is configured by its TOML file.
        return init_settings, env_settings, TomlSettingsSource(settings_cls, _config_file.get())

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **flags: Any,
    ) -> CashDrawerSettings:
        """Build settings for a CLI run.

        *config_path* is the ``--config`` value; without it the file is
        discovered from *search_from* (default: cwd).
        """
        path = resolve_config(config_path, search_from)
        token = _config_file.set(path)
        try:
            return cls(config_path=path, **flags)
        finally:
            _config_file.reset(token)
