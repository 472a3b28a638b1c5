"""Configuration file loader and writer."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .models import PydevfileConfig, PydevfileSettings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Locate the project devfile and its pydevfile configuration."""

    CONFIG_FILENAME = "pydevfile.yaml"
    USER_CONFIG_DIR = Path.home() / ".pydevfile"

    def __init__(self, project_path: Path | None = None):
        """Initialize config loader.

        Args:
            project_path: Project directory path. If None, uses current directory.
        """
        self._project_path = project_path or Path.cwd()

    def get_config_path(self) -> Path | None:
        """Find config file (project-level first, then user-level).

        Returns:
            Path to config file if found, None otherwise.
        """
        project_config = self._project_path / self.CONFIG_FILENAME
        if project_config.exists():
            return project_config

        user_config = self.USER_CONFIG_DIR / self.CONFIG_FILENAME
        if user_config.exists():
            return user_config

        return None

    def load(self) -> PydevfileConfig:
        """Load configuration, returning defaults if no config exists."""
        config_path = self.get_config_path()
        if config_path is None:
            logger.debug("No config file found, using defaults")
            return PydevfileConfig()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            logger.info(f"Loaded config from: {config_path}")
            return PydevfileConfig.model_validate(data)
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            return PydevfileConfig()

    def get_devfile_path(
        self, settings: PydevfileSettings, path: Path | str | None = None
    ) -> Path:
        """Resolve the devfile to parse.

        An explicit ``path`` is used as given; otherwise ``devfile_name`` is
        looked up in the project directory. Absolute names are kept.
        """
        if path:
            return Path(path)
        return self._project_path / Path(settings.devfile_name).expanduser()

    def save(self, config: PydevfileConfig, user_level: bool = False) -> Path:
        """Save configuration to file.

        Args:
            config: Configuration to save.
            user_level: If True, save to user-level config directory.

        Returns:
            Path where config was saved.
        """
        if user_level:
            self.USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            config_path = self.USER_CONFIG_DIR / self.CONFIG_FILENAME
        else:
            config_path = self._project_path / self.CONFIG_FILENAME

        data = config.model_dump(exclude_none=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                data,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

        logger.info(f"Saved config to: {config_path}")
        return config_path


def load_config(project_path: Path | str | None = None) -> PydevfileConfig:
    """Load configuration from project or user directory."""
    path = Path(project_path) if project_path else None
    return ConfigLoader(path).load()
