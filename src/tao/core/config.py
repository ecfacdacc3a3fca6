"""Settings resolved from INI files with pydantic-settings env fallbacks."""

from __future__ import annotations

import configparser
import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from tao.core.exceptions import SettingsError

SETTINGS_FILE = "settings.ini"
LOCAL_SETTINGS_FILE = "settings.local.ini"

Sections = dict[str, dict[str, str]]


class DatabaseConfig(BaseModel):
    """The ``[database]`` section."""

    model_config = ConfigDict(frozen=True)

    dsn: str = ""
    username: str | None = None
    password: str | None = None
    connect_timeout: int = 5  # seconds, fail fast on unreachable hosts


class AppSettings(BaseSettings):
    """Root settings: typed ``[database]`` plus any other INI sections.

    Sections without a declared field are kept as plain mappings and are
    reachable through :meth:`section` or item access.
    """

    model_config = SettingsConfigDict(
        env_prefix="TAO_",
        env_nested_delimiter="__",
        frozen=True,
        extra="allow",
    )

    log_level: str = "INFO"
    database: DatabaseConfig = DatabaseConfig()

    def section(self, name: str) -> dict[str, Any]:
        """Return a copy of one section, empty if it is not defined."""
        if name == "database":
            return self.database.model_dump()
        value = (self.model_extra or {}).get(name)
        return dict(value) if isinstance(value, dict) else {}

    def __getitem__(self, name: str) -> dict[str, Any]:
        if name != "database" and name not in (self.model_extra or {}):
            raise KeyError(name)
        return self.section(name)


def read_ini(path: Path) -> Sections:
    """Parse one INI file into ``{section: {key: value}}``."""
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with path.open(encoding="utf-8") as fh:
            parser.read_file(fh)
    except (OSError, configparser.Error) as exc:
        raise SettingsError(str(path), str(exc)) from exc
    return {name: dict(parser.items(name)) for name in parser.sections()}


def merge_sections(base: Sections, local: Sections) -> Sections:
    """Local sections replace base sections of the same name."""
    merged = dict(base)
    merged.update(local)
    return merged


def settings_dir() -> Path:
    """Directory holding the settings files.

    ``TAO_SETTINGS_DIR`` wins; otherwise the running script's directory.
    """
    override = os.environ.get("TAO_SETTINGS_DIR")
    if override:
        return Path(override)
    script = sys.argv[0] if sys.argv else ""
    if not script:
        return Path.cwd()
    return Path(script).resolve().parent


@lru_cache(maxsize=None)
def _load(directory: Path) -> AppSettings:
    sections = read_ini(directory / SETTINGS_FILE)
    local = directory / LOCAL_SETTINGS_FILE
    if local.is_file() and os.access(local, os.R_OK):
        sections = merge_sections(sections, read_ini(local))
    try:
        return AppSettings(**sections)
    except ValidationError as exc:
        raise SettingsError(str(directory / SETTINGS_FILE), str(exc)) from exc


def load_settings(directory: str | Path | None = None) -> AppSettings:
    """Load and cache the settings for ``directory`` (default: :func:`settings_dir`)."""
    base = Path(directory) if directory is not None else settings_dir()
    return _load(base.resolve())
