"""
Configuration Management System
===============================

Dataclass-based configuration with YAML file loading support.
All settings have sensible defaults; a missing config file is not an error.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Any, Dict
import yaml
import logging

from file_commands.utils.exceptions import ConfigurationError
from file_commands.utils.logging_config import LoggingConfig

logger = logging.getLogger(__name__)

MB = 1024 * 1024


def _positive_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    try:
        value = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"'{key}' must be an integer, got {value!r}",
            config_key=key,
            expected_type="int",
            cause=e,
        )
    if value <= 0:
        raise ConfigurationError(f"'{key}' must be positive, got {value}", config_key=key)
    return value


@dataclass
class InterpreterConfig:
    """Command interpreter settings.

    Attributes:
        recent_limit: How many files a recency filter keeps unless the
            command says "all".
        large_file_bytes: Threshold used by "show large files".
        small_file_bytes: Threshold used by "show small files".
        extra_types: Additional type words mapped to extension lists.
    """
    recent_limit: int = 10
    large_file_bytes: int = 5 * MB
    small_file_bytes: int = 1 * MB
    extra_types: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InterpreterConfig":
        """Create InterpreterConfig from dictionary."""
        if not data:
            return cls()
        extra_types = data.get("extra_types") or {}
        if not isinstance(extra_types, dict):
            raise ConfigurationError(
                "'extra_types' must map type words to extension lists",
                config_key="extra_types",
                expected_type="mapping",
            )
        return cls(
            recent_limit=_positive_int(data, "recent_limit", cls.recent_limit),
            large_file_bytes=_positive_int(data, "large_file_bytes", cls.large_file_bytes),
            small_file_bytes=_positive_int(data, "small_file_bytes", cls.small_file_bytes),
            extra_types={str(k): [str(e) for e in v] for k, v in extra_types.items()},
        )


@dataclass
class ScannerConfig:
    """Directory scanning configuration.

    Attributes:
        ignore_patterns: Glob patterns for files to leave out of the collection.
        recursive: Whether to descend into subdirectories.
        include_hidden: Whether dot-files are listed.
    """
    ignore_patterns: List[str] = field(default_factory=lambda: [
        "*.tmp", "*.crdownload", "~$*", ".DS_Store", "Thumbs.db", "*.part"
    ])
    recursive: bool = False
    include_hidden: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScannerConfig":
        """Create ScannerConfig from dictionary."""
        if not data:
            return cls()
        return cls(
            ignore_patterns=list(data.get("ignore_patterns", cls().ignore_patterns)),
            recursive=bool(data.get("recursive", False)),
            include_hidden=bool(data.get("include_hidden", False)),
        )


@dataclass
class Config:
    """Main configuration container.

    Aggregates all configuration sections and provides loading from YAML.
    """
    interpreter: InterpreterConfig = field(default_factory=InterpreterConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the configuration file. If None, looks for
                        file_commands.yaml in the current directory.

        Returns:
            Config instance with loaded settings.

        Raises:
            yaml.YAMLError: If config file is not valid YAML.
            ConfigurationError: If a value is out of range.
        """
        if config_path is None:
            config_path = Path("file_commands.yaml")

        if not config_path.exists():
            logger.debug(f"Config file not found at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Top level of {config_path} must be a mapping",
                expected_type="mapping",
            )

        logger.info(f"Loaded configuration from {config_path}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        return cls(
            interpreter=InterpreterConfig.from_dict(data.get("interpreter", {})),
            scanner=ScannerConfig.from_dict(data.get("scanner", {})),
            logging=LoggingConfig.from_dict(data.get("logging", {})),
        )

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path where to save the configuration.
        """
        data = {
            "interpreter": {
                "recent_limit": self.interpreter.recent_limit,
                "large_file_bytes": self.interpreter.large_file_bytes,
                "small_file_bytes": self.interpreter.small_file_bytes,
                "extra_types": self.interpreter.extra_types,
            },
            "scanner": {
                "ignore_patterns": self.scanner.ignore_patterns,
                "recursive": self.scanner.recursive,
                "include_hidden": self.scanner.include_hidden,
            },
            "logging": {
                "level": self.logging.level,
                "log_dir": str(self.logging.log_dir),
                "console_output": self.logging.console_output,
                "file_output": self.logging.file_output,
                "json_format": self.logging.json_format,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count,
            },
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to {config_path}")
