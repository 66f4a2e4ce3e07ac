# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating spam-detect configuration.
#
# The configuration file is optional. It lives in the working directory,
# next to the dataset:
#
#   spam-detect.toml
#
#   [dataset]
#   path = "emails.csv"
#
#   [classifier]
#   threshold = 2
#
#   [logging]
#   level = "WARNING"
#
# Without a config file every default applies.
# =============================================================================

import logging
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from spam_detect.spam.classifier import DEFAULT_THRESHOLD


# Default config file, relative to the working directory
CONFIG_FILE_NAME = "spam-detect.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DatasetConfig:
    """
    Configuration for the training dataset.

    Attributes:
        path: CSV file to read. Created with sample data if missing.
    """
    path: Path = field(default_factory=lambda: Path("emails.csv"))


@dataclass
class ClassifierConfig:
    """
    Configuration for the spam classifier.

    Attributes:
        threshold: Messages with more indicator words than this are spam.
    """
    threshold: int = DEFAULT_THRESHOLD


@dataclass
class LoggingConfig:
    """
    Configuration for diagnostic logging (written to stderr).

    Attributes:
        level: Standard logging level name.
    """
    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        """The numeric logging level."""
        return logging.getLevelName(self.level)


@dataclass
class Config:
    """
    Main configuration container for spam-detect.

    Attributes:
        dataset: Dataset location.
        classifier: Classifier settings.
        log: Logging settings.

    Usage:
        >>> config = Config.load()
        >>> config.dataset.path
        PosixPath('emails.csv')
    """
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the config file."""
        return Path(CONFIG_FILE_NAME)

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Uses config_file_path() if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to the config file.

        Args:
            path: Config file to write. Uses config_file_path() if None.
        """
        config_path = path or self.config_file_path()

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        config = cls()

        # Dataset settings
        dataset = _section(data, "dataset")
        dataset_path = dataset.get("path", "emails.csv")
        if not isinstance(dataset_path, str) or not dataset_path:
            raise ConfigError("dataset.path must be a non-empty string")
        config.dataset = DatasetConfig(path=Path(dataset_path))

        # Classifier settings
        classifier = _section(data, "classifier")
        threshold = classifier.get("threshold", DEFAULT_THRESHOLD)
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise ConfigError("classifier.threshold must be a non-negative integer")
        config.classifier = ClassifierConfig(threshold=threshold)

        # Logging settings
        log = _section(data, "logging")
        level = log.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")
        config.log = LoggingConfig(level=level.upper())

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "dataset": {
                "path": str(self.dataset.path),
            },
            "classifier": {
                "threshold": self.classifier.threshold,
            },
            "logging": {
                "level": self.log.level,
            },
        }


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config table, or an empty one if it's absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section
