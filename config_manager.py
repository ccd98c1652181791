# ==============================================================================
# File: config_manager.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via _MAJOR_VERSION._MINOR_VERSION.PATCH>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial creation to load optional bundler settings from a JSON file.",
    "Missing default config file falls back to built-in tables from config.py.",
    "An explicitly requested config file that is missing or malformed raises ConfigurationError.",
    "Added selection, output and sorting sections.",
]
# ------------------------------------------------------------------------------
import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Any, FrozenSet, Mapping, Optional
import argparse
import sys

import config
from bundle_models import ConfigurationError


class ConfigManager:
    """
    Loads bundler settings from a JSON file.
    Provides structured access to the exclusion list, the language map and
    output/sorting preferences, falling back to the built-ins in config.py.
    """
    DEFAULT_CONFIG_FILE = config.DEFAULT_CONFIG_FILE

    def __init__(self, config_path: Optional[Path] = None):
        self.explicit = config_path is not None
        self.config_path = Path(config_path) if config_path is not None else self.DEFAULT_CONFIG_FILE
        self._data: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Loads and attempts to parse the JSON configuration file."""
        if not self.config_path.exists():
            if self.explicit:
                raise ConfigurationError(f"Configuration file not found at {self.config_path}.")
            return {}

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON format in {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Could not read configuration file {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {self.config_path} must contain a JSON object.")
        return data

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"Section '{name}' in {self.config_path} must be a JSON object.")
        return section

    @property
    def EXCLUDED_DIRECTORIES(self) -> FrozenSet[str]:
        """Directory names skipped during traversal."""
        names = self._section('selection').get('excluded_directories')
        if names is None:
            return config.EXCLUDED_DIRECTORIES
        return frozenset(names)

    @property
    def LANGUAGE_MAP(self) -> Mapping[str, str]:
        """Built-in language map, extended or overridden by the 'language_map' entries."""
        merged = dict(config.LANGUAGE_MAP)
        for tag, extension in self._section('selection').get('language_map', {}).items():
            if not extension.startswith('.'):
                extension = "." + extension
            merged[tag.lower()] = extension
        return MappingProxyType(merged)

    @property
    def ENCODING(self) -> str:
        return self._section('output').get('encoding', config.DEFAULT_ENCODING)

    @property
    def SHOW_PROGRESS(self) -> bool:
        return bool(self._section('output').get('show_progress', True))

    @property
    def CASE_SENSITIVE_SORT(self) -> bool:
        """Whether name ordering compares paths case-sensitively."""
        return bool(self._section('sorting').get('case_sensitive', True))


if __name__ == "__main__":

    parser = argparse.ArgumentParser(description="Config Manager for code_bundler: Loads bundler settings from JSON.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    parser.add_argument('--config', type=str, help='Path to a JSON settings file.')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Configuration Manager")
        sys.exit(0)

    try:
        manager = ConfigManager(Path(args.config) if args.config else None)
    except ConfigurationError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    print(f"Loaded config from: {manager.config_path.resolve()}")
    print(f"Excluded directories: {sorted(manager.EXCLUDED_DIRECTORIES)}")
    print(f"Encoding: {manager.ENCODING}")
    print(f"Case-sensitive sort: {manager.CASE_SENSITIVE_SORT}")
    for tag, extension in sorted(manager.LANGUAGE_MAP.items()):
        print(f"    {tag:<12} -> {extension}")
