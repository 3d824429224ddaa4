"""
Configuration management for tprint
"""
import copy
import os
from typing import Any, Optional

import yaml

from tprint.formatters.values import validate_template
from tprint.table.align import Alignment, ValueKind
from tprint.utils.exceptions import ConfigurationException, FormatError
from tprint.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG = {
    'table': {
        'show_borders': False,
        'show_header': True,
        'spaces_left': 0,
        'spaces_between': 2,
        'caption_align': 'left',
        'data_align': 'left',
    },
    'formats': {
        'int32': '%d',
        'uint64': '%llu',
        'double': '%0.3f',
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


def _parse_bool(value: str) -> bool:
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationException(f"Invalid boolean value: {value!r}")


class TPrintConfig:
    """tprint configuration management"""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration

        Args:
            config_path: Path to config file (default: ~/.tprint/config.yaml)
        """
        self.config_path = config_path or os.getenv(
            'TPRINT_CONFIG', os.path.expanduser('~/.tprint/config.yaml')
        )
        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file"""
        default_config = copy.deepcopy(DEFAULT_CONFIG)

        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
                if not isinstance(file_config, dict):
                    raise ConfigurationException("top level must be a mapping")
                return self._merge_config(default_config, file_config)
            except (OSError, yaml.YAMLError, ConfigurationException) as e:
                logger.warning(f"Failed to load config file {self.config_path}: {e}")
                return default_config

        return default_config

    def _merge_config(self, default: dict, override: dict) -> dict:
        """Recursively merge configuration dictionaries

        An empty section (``table:`` with nothing below it) keeps the defaults.

        Raises:
            ConfigurationException: If a section is not a mapping
        """
        result = default.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict):
                if value is None:
                    continue
                if not isinstance(value, dict):
                    raise ConfigurationException(f"Section '{key}' must be a mapping")
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _int_setting(self, env_name: str, key: str) -> int:
        value = os.getenv(env_name, self.config['table'][key])
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ConfigurationException(f"{key} must be an integer, got {value!r}")
        if number < 0:
            raise ConfigurationException(f"{key} must not be negative")
        return number

    @property
    def show_borders(self) -> bool:
        """Draw borders around tables"""
        env = os.getenv('TPRINT_BORDERS')
        if env is not None:
            return _parse_bool(env)
        return bool(self.config['table']['show_borders'])

    @property
    def show_header(self) -> bool:
        """Display the caption row"""
        return bool(self.config['table']['show_header'])

    @property
    def spaces_left(self) -> int:
        """Spaces on the left side of the table"""
        return self._int_setting('TPRINT_SPACES_LEFT', 'spaces_left')

    @property
    def spaces_between(self) -> int:
        """Spaces between columns"""
        return self._int_setting('TPRINT_SPACES_BETWEEN', 'spaces_between')

    @property
    def caption_align(self) -> Alignment:
        try:
            return Alignment.parse(self.config['table']['caption_align'])
        except ValueError as e:
            raise ConfigurationException(str(e))

    @property
    def data_align(self) -> Alignment:
        try:
            return Alignment.parse(self.config['table']['data_align'])
        except ValueError as e:
            raise ConfigurationException(str(e))

    @property
    def formats(self) -> dict:
        """Template overrides keyed by ValueKind"""
        overrides = {}
        for name, template in (self.config.get('formats') or {}).items():
            try:
                overrides[ValueKind.parse(name)] = template
            except ValueError as e:
                raise ConfigurationException(str(e))
        return overrides

    @property
    def log_level(self) -> str:
        """Get log level"""
        return os.getenv('TPRINT_LOG_LEVEL', self.config['logging']['level'])

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path"""
        return self.config['logging']['file']

    def set_value(self, key: str, value: str):
        """Set a dotted configuration key and save the file

        The value is converted to the type of the built-in default.

        Args:
            key: Dotted key, e.g. "table.spaces_left"
            value: Value as given on the command line

        Raises:
            ConfigurationException: For unknown keys or unconvertible values
        """
        section, _, name = key.partition('.')
        if section not in DEFAULT_CONFIG or name not in DEFAULT_CONFIG[section]:
            raise ConfigurationException(f"Unknown configuration key: {key}")

        self.config.setdefault(section, {})[name] = self._coerce(key, DEFAULT_CONFIG[section][name], value)
        self.save_config()

    def _coerce(self, key: str, default: Any, value: str) -> Any:
        if isinstance(default, bool):
            return _parse_bool(value)
        if isinstance(default, int):
            try:
                number = int(value)
            except ValueError:
                raise ConfigurationException(f"{key} must be an integer, got {value!r}")
            if number < 0:
                raise ConfigurationException(f"{key} must not be negative")
            return number
        if key.endswith('_align'):
            try:
                return Alignment.parse(value).value
            except ValueError as e:
                raise ConfigurationException(str(e))
        if key.startswith('formats.'):
            try:
                validate_template(value, ValueKind.parse(key.split('.', 1)[1]))
            except FormatError as e:
                raise ConfigurationException(str(e))
        return value

    def save_config(self):
        """Write the configuration to file"""
        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            yaml.dump(self.config, f, default_flow_style=False)

        # Set restrictive permissions
        try:
            os.chmod(self.config_path, 0o600)
        except OSError:
            pass  # Windows doesn't support chmod

    def dump(self) -> str:
        """Effective configuration as YAML"""
        return yaml.dump(self.config, default_flow_style=False)
