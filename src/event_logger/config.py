"""Event logger configuration.

Resolution order for the log location:
1. ``--file`` CLI option
2. ``EVENT_LOGGER_FILE`` environment variable
3. ``[storage]`` table in ``<home>/config.toml``
4. ``results/events.txt`` relative to the working directory
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "EVENT_LOGGER_HOME"
FILE_ENV_VAR = "EVENT_LOGGER_FILE"
CONFIG_FILENAME = "config.toml"

DEFAULT_DIRECTORY = "results"
DEFAULT_FILE_NAME = "events.txt"


def _is_windows() -> bool:
    return os.name == "nt"


def get_event_logger_home() -> Path:
    """Return the per-user directory holding ``config.toml``.

    Resolution order:
    1. EVENT_LOGGER_HOME environment variable (all platforms)
    2. ~/.event-logger/ on macOS/Linux
    3. %LOCALAPPDATA%\\event-logger\\ on Windows (via platformdirs)
    """
    if env_home := os.environ.get(HOME_ENV_VAR):
        return Path(env_home)

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("event-logger"))

    return Path.home() / ".event-logger"


@dataclass(frozen=True)
class Settings:
    """Resolved storage location."""

    directory: Path
    file_name: str
    origin: str = "default"

    @property
    def file_path(self) -> Path:
        return self.directory / self.file_name


class ConfigFile:
    """Read and update the ``[storage]`` table of ``config.toml``."""

    def __init__(self, home: Path | None = None) -> None:
        self.config_dir = home if home is not None else get_event_logger_home()
        self.config_file = self.config_dir / CONFIG_FILENAME

    def _load(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return {}
        return toml.load(self.config_file)

    def storage(self) -> dict[str, str]:
        """Return the string-valued entries of the ``[storage]`` table."""
        section = self._load().get("storage")
        if not isinstance(section, dict):
            return {}
        return {k: v for k, v in section.items() if isinstance(v, str)}

    def set_storage(self, **values: str) -> None:
        """Persist *values* into the ``[storage]`` table."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        config = self._load()
        section = config.get("storage")
        if not isinstance(section, dict):
            section = {}
            config["storage"] = section
        section.update(values)

        with open(self.config_file, "w", encoding="utf-8") as f:
            toml.dump(config, f)


def load_settings(file_override: str | Path | None = None, home: Path | None = None) -> Settings:
    """Resolve where the event log lives."""
    if file_override:
        path = Path(file_override)
        return Settings(directory=path.parent, file_name=path.name, origin="option")

    if env_file := os.environ.get(FILE_ENV_VAR):
        path = Path(env_file)
        return Settings(directory=path.parent, file_name=path.name, origin="env")

    config_file = ConfigFile(home)
    try:
        storage = config_file.storage()
    except toml.TomlDecodeError as e:
        logger.warning("Ignoring malformed %s: %s", config_file.config_file, e)
        storage = {}
    if storage:
        return Settings(
            directory=Path(storage.get("directory", DEFAULT_DIRECTORY)),
            file_name=storage.get("file_name", DEFAULT_FILE_NAME),
            origin="config",
        )

    return Settings(directory=Path(DEFAULT_DIRECTORY), file_name=DEFAULT_FILE_NAME)
