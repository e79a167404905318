# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Spam Blaster configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spam-blaster/  (default: ~/.config/spam-blaster/)
#
# Files:
#   - config.toml: Classifier tuning and default corpus directories
#
# Trained state is never written anywhere; every run starts from the
# corpus directories.
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from spam_blaster.spam import ClassifierConfig, LedgerMode, TokenizerConfig, UnknownTokenPolicy


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spam-blaster"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Spam Blaster.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spam-blaster/
    This is where user configuration files live (config.toml).
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DirectoryConfig:
    """
    Default corpus directories offered by the UI.

    Attributes:
        spam: Directory of known spam messages.
        ham: Directory of known ham messages.
        unfiltered: Directory of messages to classify.
    """
    spam: str = ""
    ham: str = ""
    unfiltered: str = ""


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        theme: Color theme ("dark" or "light").
    """
    theme: str = "dark"


@dataclass
class Config:
    """
    Main configuration container for Spam Blaster.

    Attributes:
        classifier: Classifier tuning (token count, ledger mode, ...).
        tokenizer: Tokenizer settings.
        directories: Default corpus directories.
        ui: User interface configuration.

    Usage:
        >>> config = Config.load()
        >>> config.classifier.max_tokens
        15
    """
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    directories: DirectoryConfig = field(default_factory=DirectoryConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Uses the XDG location if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a config file.

        Creates the config directory if it doesn't exist.

        Args:
            path: File to write. Uses the XDG location if None.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value is out of range or of the wrong kind.
        """
        config = cls()

        # Classifier settings
        classifier = _section(data, "classifier")
        try:
            config.classifier = ClassifierConfig(
                max_tokens=classifier.get("max_tokens", 15),
                ledger_mode=LedgerMode(classifier.get("ledger_mode", "replace")),
                unknown_tokens=UnknownTokenPolicy(classifier.get("unknown_tokens", "neutral")),
                epsilon=classifier.get("epsilon", 1e-6),
            )
        except ValueError as e:
            raise ConfigError(f"Invalid [classifier] setting: {e}") from e

        # Tokenizer settings
        tokenizer = _section(data, "tokenizer")
        delimiters = tokenizer.get("delimiters", " ,.-")
        if not isinstance(delimiters, str) or not delimiters:
            raise ConfigError("delimiters must be a non-empty string")
        config.tokenizer = TokenizerConfig(delimiters=delimiters)

        # Default directories
        directories = _section(data, "directories")
        config.directories = DirectoryConfig(
            spam=_string(directories, "directories", "spam", ""),
            ham=_string(directories, "directories", "ham", ""),
            unfiltered=_string(directories, "directories", "unfiltered", ""),
        )

        # UI settings
        ui = _section(data, "ui")
        config.ui = UIConfig(
            theme=_string(ui, "ui", "theme", "dark"),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        # Classifier settings
        data["classifier"] = {
            "max_tokens": self.classifier.max_tokens,
            "ledger_mode": self.classifier.ledger_mode.value,
            "unknown_tokens": self.classifier.unknown_tokens.value,
            "epsilon": self.classifier.epsilon,
        }

        # Tokenizer settings
        data["tokenizer"] = {
            "delimiters": self.tokenizer.delimiters,
        }

        # Default directories
        data["directories"] = {
            "spam": self.directories.spam,
            "ham": self.directories.ham,
            "unfiltered": self.directories.unfiltered,
        }

        # UI settings
        data["ui"] = {
            "theme": self.ui.theme,
        }

        return data


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print configuration paths for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:       {get_xdg_config_home()}")
    print(f"Config file:  {Config.config_file_path()}")


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level table of the parsed TOML, empty if it is missing."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def _string(section: dict[str, Any], section_name: str, key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"[{section_name}] {key} must be a string, got {value!r}")
    return value
