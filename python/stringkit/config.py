"""Configuration providers for stringkit.

The toolkit never reads configuration directly; it asks a provider for a key:

    encoding  - text encoding used to decode ``bytes`` input (e.g. "UTF-8")
    ascii     - ordered transliteration table, pattern -> replacement
    strings   - pluralization bundle: irregular, uncountable, plural, singular

Bundled defaults live in defaults.json next to this module. A user file
(stringkit.json) is merged over them key by key.
"""

import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STRINGKIT_CONFIG"
CONFIG_FILENAME = "stringkit.json"
DEFAULTS_PATH = Path(__file__).parent / "defaults.json"

# Used when defaults.json is missing from an installation
FALLBACK_DEFAULTS: dict[str, Any] = {
    "encoding": "UTF-8",
    "ascii": {},
    "strings": {
        "irregular": {},
        "uncountable": [],
        "plural": [["$", "s"]],
        "singular": [["s$", ""]],
    },
}

_defaults: Optional[dict[str, Any]] = None


def load_defaults() -> dict[str, Any]:
    """Load the bundled defaults (cached after the first call)."""
    global _defaults
    if _defaults is not None:
        return _defaults

    try:
        with open(DEFAULTS_PATH, encoding="utf-8") as f:
            _defaults = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read %s (%s), using fallback defaults", DEFAULTS_PATH, e)
        _defaults = FALLBACK_DEFAULTS
    return _defaults


def _find_config() -> Optional[Path]:
    """Find a user config file from the environment or the working directory."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    paths = [Path(env_path)] if env_path else []
    paths += [
        Path.cwd() / CONFIG_FILENAME,
        Path.cwd().parent / CONFIG_FILENAME,
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read a JSON config file into a dict.

    Raises:
        ConfigurationError: if the file cannot be read or is not a JSON object.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


class ConfigProvider(ABC):
    """Capability interface: look up a configuration value by key."""

    @abstractmethod
    def fetch(self, key: str) -> Any:
        """Return the value stored under key.

        Raises:
            ConfigurationError: if the key is unknown.
        """
        pass

    def get(self, key: str, fallback: Any = None) -> Any:
        """Return the value under key, or fallback if it is unknown."""
        try:
            return self.fetch(key)
        except ConfigurationError:
            return fallback


class DictConfigProvider(ConfigProvider):
    """Provider backed by an in-memory mapping."""

    def __init__(self, values: Mapping[str, Any]):
        self._values = dict(values)

    def fetch(self, key: str) -> Any:
        if key not in self._values:
            raise ConfigurationError(
                f"Unknown configuration key: {key}. "
                f"Available: {sorted(self._values)}"
            )
        return self._values[key]

    def keys(self) -> list[str]:
        return sorted(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={self.keys()})"


class JsonConfigProvider(DictConfigProvider):
    """Provider reading a JSON file merged over the bundled defaults.

    With an explicit path the file must exist and parse. Without one, the
    file is looked up via $STRINGKIT_CONFIG and the working directory; a
    discovered file that fails to parse is skipped with a warning.
    """

    def __init__(self, path: Optional[Path | str] = None):
        values = copy.deepcopy(load_defaults())
        self.path: Optional[Path] = None

        if path is not None:
            self.path = Path(path)
            values.update(read_config_file(self.path))
        else:
            found = _find_config()
            if found:
                try:
                    values.update(read_config_file(found))
                    self.path = found
                except ConfigurationError as e:
                    logger.warning("%s; using bundled defaults", e)

        logger.debug("Loaded configuration from %s", self.path or DEFAULTS_PATH)
        super().__init__(values)


def as_provider(config: Any = None) -> ConfigProvider:
    """Coerce None, a provider, a mapping or a file path into a provider."""
    if config is None:
        return JsonConfigProvider()
    if isinstance(config, ConfigProvider):
        return config
    if isinstance(config, Mapping):
        return DictConfigProvider(config)
    if isinstance(config, (str, Path)):
        return JsonConfigProvider(config)
    raise ConfigurationError(f"Cannot build a config provider from {type(config).__name__}")


def config_pairs(section: Any, name: str) -> list[tuple[str, str]]:
    """Normalize a mapping or a list of 2-item pairs into a list of tuples.

    Args:
        section: Mapping of key -> value, or a list of [key, value] pairs.
        name: Section name used in error messages.

    Raises:
        ConfigurationError: if the section or one of its entries is malformed.
    """
    if isinstance(section, Mapping):
        items = list(section.items())
    elif isinstance(section, (list, tuple)):
        items = []
        for item in section:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ConfigurationError(
                    f"Config section '{name}' must contain "
                    f"[pattern, replacement] pairs, got {item!r}"
                )
            items.append((item[0], item[1]))
    else:
        raise ConfigurationError(
            f"Config section '{name}' must be a mapping or a list of pairs, "
            f"got {type(section).__name__}"
        )

    for key, value in items:
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigurationError(
                f"Config section '{name}' must map strings to strings, "
                f"got {key!r} -> {value!r}"
            )
    return items
