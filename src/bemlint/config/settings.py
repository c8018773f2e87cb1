"""BemlintSettings: one frozen object for flags, environment and config file.

Highest priority first:

* keyword arguments (the CLI flags),
* ``BEMLINT_*`` environment variables, ``__`` between nesting levels
  (``BEMLINT_LINT__STRICT=true``),
* ``bemlint.toml`` or ``[tool.bemlint]`` in ``pyproject.toml``,
* defaults on the section models.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from bemlint.config.discovery import config_section, find_config
from bemlint.config.models import LintConfig, ScanConfig


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
    return config_section(data, path)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the discovered config file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = _load_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


# The config path has to reach settings_customise_sources, which pydantic
# calls as a classmethod during __init__.
_pending = threading.local()


def _resolve_config_path(config_path: str | None, start: Path | None) -> Path | None:
    if not config_path:
        return find_config(start)
    explicit = Path(config_path)
    if not explicit.is_file():
        raise click.ClickException(f"Config file not found: {config_path}")
    return explicit


class BemlintSettings(BaseSettings):
    """Merged settings for a bemlint run, held by the CLI's AppContext.

    ``project_root`` anchors default lint targets and ``[scan] exclude``
    globs: the config file's directory, or the cwd when there is none.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BEMLINT_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    lint: LintConfig = Field(default_factory=LintConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        config_file = getattr(_pending, "config_file", None)
        return init_settings, env_settings, TomlSettingsSource(settings_cls, config_file)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> BemlintSettings:
        """Build settings for one CLI invocation.

        Raises:
            click.ClickException: *config_path* does not exist, or the
                config file is not valid TOML, or a value fails validation.
        """
        config_file = _resolve_config_path(config_path, project_root)
        if project_root is None:
            project_root = config_file.parent if config_file else Path.cwd()

        _pending.config_file = config_file
        try:
            return cls(project_root=project_root, config_path=config_file, **cli_flags)
        except ValidationError as exc:
            source = config_file or "environment"
            raise click.ClickException(f"Invalid configuration in {source}:\n{exc}") from exc
        finally:
            _pending.config_file = None
