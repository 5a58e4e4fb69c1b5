"""
Configuration — Purpose tables and settings

Config hierarchy (highest to lowest priority):
  1. Environment variables
  2. Project config (.purpose/config.yaml)
  3. User config (~/.purpose/config.yaml)
  4. Defaults

The classifier never reads YAML. It reads a PurposeConfig: three
ordered, already-compiled tables plus a default purpose. Config turns
declarations into a PurposeConfig; ConfigStore holds the current one
and lets callers replace it (reload) without touching the classifier.
"""

import copy
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Pattern

import yaml

from .core.purposes import GENERAL, Purpose
from .errors import ConfigError
from .presentation.symbols import get_symbols

logger = logging.getLogger(__name__)


# Built-in tables. User declarations take precedence over these.
DEFAULT_MODE_PURPOSES: Dict[str, str] = {
    "prog-mode": "edit",
    "text-mode": "edit",
    "comint-mode": "terminal",
    "eshell-mode": "terminal",
    "term-mode": "terminal",
    "dired-mode": "dired",
    "ibuffer-mode": "buffers",
    "Buffer-menu-mode": "buffers",
    "occur-mode": "search",
    "grep-mode": "search",
    "compilation-mode": "search",
    "image-mode": "image",
    "package-menu-mode": "package",
}

DEFAULT_NAME_PURPOSES: Dict[str, str] = {
    ".gitignore": "edit",
    ".hgignore": "edit",
    ".editorconfig": "edit",
    "*shell*": "terminal",
    "*eshell*": "terminal",
    "*ansi-term*": "terminal",
    "*terminal*": "terminal",
}

DEFAULT_REGEXP_PURPOSES: Dict[str, str] = {
    r"^ \*Minibuf-[0-9]*\*$": "minibuf",
}

DEFAULT_PURPOSE = GENERAL.name


@dataclass(frozen=True)
class PurposeConfig:
    """
    Compiled purpose tables.

    Iteration order of each table is its insertion order. When several
    mode keys or several patterns match one buffer, the first in that
    order wins.
    """
    mode_purposes: Dict[str, Purpose] = field(default_factory=dict)
    name_purposes: Dict[str, Purpose] = field(default_factory=dict)
    regexp_purposes: Dict[Pattern, Purpose] = field(default_factory=dict)
    default_purpose: Purpose = GENERAL

    @classmethod
    def build(cls,
              modes: Optional[Dict[str, Any]] = None,
              names: Optional[Dict[str, Any]] = None,
              regexps: Optional[Dict[str, Any]] = None,
              default: Any = DEFAULT_PURPOSE) -> "PurposeConfig":
        """Compile plain name -> purpose-name dicts into a PurposeConfig."""
        compiled: Dict[Pattern, Purpose] = {}
        for pattern, purpose in (regexps or {}).items():
            try:
                compiled[re.compile(pattern)] = Purpose(purpose)
            except re.error as e:
                raise ConfigError(f"Invalid purpose regexp {pattern!r}: {e}")
        try:
            return cls(
                mode_purposes={mode: Purpose(p) for mode, p in (modes or {}).items()},
                name_purposes={name: Purpose(p) for name, p in (names or {}).items()},
                regexp_purposes=compiled,
                default_purpose=Purpose(default),
            )
        except ValueError as e:
            raise ConfigError(str(e))


class ConfigStore:
    """
    Holder of the current PurposeConfig.

    `replace` swaps in a new configuration and bumps `generation`, so
    anything caching derived data (the purpose registry) can tell its
    cache is stale. Listeners are called after each replacement.
    """

    def __init__(self, config: Optional[PurposeConfig] = None):
        self._config = config or PurposeConfig()
        self.generation = 0
        self._listeners: List[Callable[[PurposeConfig], None]] = []

    @property
    def current(self) -> PurposeConfig:
        return self._config

    def replace(self, config: PurposeConfig) -> None:
        self._config = config
        self.generation += 1
        logger.debug("Purpose configuration replaced (generation %d)", self.generation)
        for listener in list(self._listeners):
            listener(config)

    def subscribe(self, listener: Callable[[PurposeConfig], None]) -> None:
        self._listeners.append(listener)


def _merge_tables(user: Dict[str, Any], defaults: Dict[str, str], use_defaults: bool) -> Dict[str, Any]:
    """User entries first, then built-ins the user did not override."""
    merged = dict(user)
    if use_defaults:
        for key, value in defaults.items():
            merged.setdefault(key, value)
    return merged


@dataclass
class PurposesConfig:
    """Declared purpose tables."""
    default: str = DEFAULT_PURPOSE
    use_defaults: bool = True
    modes: Dict[str, str] = field(default_factory=dict)
    names: Dict[str, str] = field(default_factory=dict)
    regexps: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not self.default:
            return "Default purpose cannot be empty"
        for table_name, table in (("modes", self.modes), ("names", self.names), ("regexps", self.regexps)):
            for key, value in table.items():
                if not value:
                    return f"Empty purpose for {table_name} entry '{key}'"
        for pattern in self.regexps:
            try:
                re.compile(pattern)
            except re.error as e:
                return f"Invalid regexp '{pattern}': {e}"
        return None


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"
    format: str = "table"  # "table" | "json"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"

        valid_formats = ("table", "json")
        if self.format not in valid_formats:
            return f"Unknown format '{self.format}'. Valid: {', '.join(valid_formats)}"
        return None


@dataclass
class Config:
    """Application configuration."""
    purposes: PurposesConfig = field(default_factory=PurposesConfig)
    mode_parents: Dict[str, str] = field(default_factory=dict)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def validate(self) -> Optional[str]:
        return self.purposes.validate() or self.display.validate()

    def to_purpose_config(self) -> PurposeConfig:
        """Compile declared tables, appending built-ins when enabled."""
        use_defaults = self.purposes.use_defaults
        return PurposeConfig.build(
            modes=_merge_tables(self.purposes.modes, DEFAULT_MODE_PURPOSES, use_defaults),
            names=_merge_tables(self.purposes.names, DEFAULT_NAME_PURPOSES, use_defaults),
            regexps=_merge_tables(self.purposes.regexps, DEFAULT_REGEXP_PURPOSES, use_defaults),
            default=self.purposes.default,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "purposes": {
                "default": self.purposes.default,
                "use_defaults": self.purposes.use_defaults,
                "modes": dict(self.purposes.modes),
                "names": dict(self.purposes.names),
                "regexps": dict(self.purposes.regexps),
            },
            "modes": dict(self.mode_parents),
            "display": {
                "symbols": self.display.symbols,
                "format": self.display.format
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        purposes_data = data.get("purposes") or {}
        display_data = data.get("display") or {}

        return cls(
            purposes=PurposesConfig(
                default=str(purposes_data.get("default", DEFAULT_PURPOSE)),
                use_defaults=_as_bool(purposes_data.get("use_defaults", True)),
                modes=_str_table(purposes_data.get("modes")),
                names=_str_table(purposes_data.get("names")),
                regexps=_str_table(purposes_data.get("regexps")),
            ),
            mode_parents=_str_table(data.get("modes")),
            display=DisplayConfig(
                symbols=display_data.get("symbols", "auto"),
                format=display_data.get("format", "table")
            )
        )


def _str_table(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    return bool(value)


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment (PURPOSE_DEFAULT, PURPOSE_USE_DEFAULTS)
      2. Project config (.purpose/config.yaml)
      3. User config (~/.purpose/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".purpose"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_DIR = ".purpose"
    PROJECT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        if os.environ.get("PURPOSE_DEFAULT"):
            config_data.setdefault("purposes", {})["default"] = os.environ["PURPOSE_DEFAULT"]
        if os.environ.get("PURPOSE_USE_DEFAULTS"):
            config_data.setdefault("purposes", {})["use_defaults"] = os.environ["PURPOSE_USE_DEFAULTS"]

        self._config = Config.from_dict(config_data)
        return self._config

    def reload(self) -> Config:
        """Drop the cached config and read all sources again."""
        self._config = None
        return self.load()

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", path)
            return {}
        return data

    def save_project(self, data: Dict[str, Any]):
        """Write raw settings to the project config file."""
        self._write(self.project_config_path, data)

    def save_user(self, data: Dict[str, Any]):
        """Write raw settings to the user config file."""
        self._write(self.user_config_path, data)

    def _write(self, path: Path, data: Dict[str, Any]):
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

        # Next load re-reads every layer
        self._config = None

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "purposes.default")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful

        Only the chosen layer's file is rewritten. Values that come from
        the other file or the environment are not copied into it.
        """
        # Validate against a copy so a rejected value leaves the cache alone
        config = copy.deepcopy(self.load())

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'purposes.default')"

        section, setting = parts

        if section == "purposes":
            if setting == "default":
                config.purposes.default = value
            elif setting == "use_defaults":
                config.purposes.use_defaults = _as_bool(value)
            else:
                return f"Unknown purposes setting: {setting}. Valid: default, use_defaults"
            error = config.purposes.validate()
            if error:
                return error

        elif section == "display":
            if setting == "symbols":
                config.display.symbols = value
            elif setting == "format":
                config.display.format = value
            else:
                return f"Unknown display setting: {setting}. Valid: symbols, format"
            error = config.display.validate()
            if error:
                return error
        else:
            return f"Unknown section: {section}. Valid: purposes, display"

        path = self.project_config_path if scope == "project" else self.user_config_path
        layer = self._read(path)
        if not isinstance(layer.get(section), dict):
            layer[section] = {}
        layer[section][setting] = getattr(getattr(config, section), setting)

        if scope == "project":
            self.save_project(layer)
        else:
            self.save_user(layer)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts

        if section == "purposes":
            if setting == "default":
                return config.purposes.default
            elif setting == "use_defaults":
                return str(config.purposes.use_defaults).lower()
        elif section == "display":
            if setting == "symbols":
                return config.display.symbols
            elif setting == "format":
                return config.display.format

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)
        purposes = config.purposes

        lines = [
            "Configuration:",
            "",
            "Purposes:",
            f"  Default: {purposes.default}",
            f"  Built-in tables: {symbols.check_pass if purposes.use_defaults else symbols.check_fail}",
            f"  Mode entries: {len(purposes.modes)}",
            f"  Name entries: {len(purposes.names)}",
            f"  Regexp entries: {len(purposes.regexps)}",
            f"  Mode parents: {len(config.mode_parents)}",
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            f"  Format: {config.display.format}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
