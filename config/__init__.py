"""
Configuration Module for Invoice Parser.

Settings live in config/settings.yaml and are read once per process through
the ConfigurationManager singleton. Extraction code never reads the file
directly; it asks for dotted keys:

    from config import get_config

    scan_rows = get_config("extraction.metadata_scan_rows", 10)

A different settings file can be selected with the CLI's --config option,
which must be handled before any component reads a key.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

# Bundled settings file
DEFAULT_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

# Relative file paths in settings resolve against the project root
PROJECT_ROOT = Path(__file__).parent.parent

# Dotted keys holding file paths
PATH_KEYS = ("logging.file.path",)


class ConfigurationManager:
    """
    Process-wide access to the invoice parser settings.

    The first instantiation decides which file is loaded; later calls
    return the same instance regardless of their argument. Call reset()
    to load another file.

    Attributes:
        config_path (Path): File the settings were loaded from.

    Example:
        >>> config = ConfigurationManager()
        >>> config.get("extraction.metadata_scan_rows")
        10
        >>> config.section("output")["default_format"]
        'json'
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Load settings on first use.

        Args:
            config_path: Optional settings file. Defaults to the bundled
                config/settings.yaml.
        """
        if self._initialized:
            return

        self.config_path = Path(config_path) if config_path else DEFAULT_SETTINGS_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Read and parse the settings file.

        Raises:
            FileNotFoundError: If the settings file doesn't exist.
            ValueError: If the file does not hold a YAML mapping.
            yaml.YAMLError: If the file is not valid YAML.
        """
        if not self.config_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")

        self._config = loaded
        self._resolve_paths()

    def _resolve_paths(self) -> None:
        """Make relative file paths absolute under the project root."""
        for key in PATH_KEYS:
            *parents, leaf = key.split('.')
            node = self._config
            for name in parents:
                node = node.get(name) if isinstance(node, dict) else None
            if not isinstance(node, dict) or not node.get(leaf):
                continue
            if not Path(node[leaf]).is_absolute():
                node[leaf] = str(PROJECT_ROOT / node[leaf])

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted key.

        Args:
            key: Dotted key, e.g. "output.default_format".
            default: Returned when any part of the key is missing.

        Example:
            >>> config.get("input.csv.encoding")
            'utf-8-sig'
            >>> config.get("input.xlsx.sheet", "Sheet1")
            'Sheet1'
        """
        node: Any = self._config
        for name in key.split('.'):
            if not isinstance(node, dict) or name not in node:
                return default
            node = node[name]
        return node

    def section(self, name: str) -> Dict[str, Any]:
        """Return a copy of one top-level section, or {} if absent."""
        value = self._config.get(name)
        return dict(value) if isinstance(value, dict) else {}

    def reload(self) -> None:
        """Re-read the current settings file."""
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded settings so the next instantiation reloads."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ConfigurationManager().get(key, default)."""
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config', 'DEFAULT_SETTINGS_PATH']
