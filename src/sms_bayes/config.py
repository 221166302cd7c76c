# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating SMS-Bayes configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/sms-bayes/  (default: ~/.config/sms-bayes/)
#   - Data:    $XDG_DATA_HOME/sms-bayes/    (default: ~/.local/share/sms-bayes/)
#
# Files:
#   - config.toml: User configuration (dataset paths, vocabulary, prior)
#   - results.tsv: Predictions from the last run (in data directory)
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from sms_bayes.bayes.prior import PRIOR_PRESETS


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "sms-bayes"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for SMS-Bayes.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/sms-bayes/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_data_home() -> Path:
    """
    Returns the XDG data directory for SMS-Bayes.

    Respects $XDG_DATA_HOME if set, otherwise uses ~/.local/share/sms-bayes/
    This is where run output lives (prediction results).
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        base = Path(xdg_data)
    else:
        base = Path.home() / ".local" / "share"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DatasetConfig:
    """
    Where the labelled data lives and how its labels are spelled.

    Attributes:
        train_path: Training set (label<TAB>text per line).
        test_path: Test set, same format.
        spam_label: Label string marking spam in the files.
        ham_label: Label string marking legitimate messages.
    """
    train_path: Path | None = None
    test_path: Path | None = None
    spam_label: str = "spam"
    ham_label: str = "ham"


@dataclass
class VocabularyConfig:
    """
    Configuration for vocabulary extraction.

    Attributes:
        cutoff: Minimum occurrences across the corpus for a word to become
                a feature.
        min_token_length: Shorter tokens are ignored.
        drop_stop_words: Remove common English stop words.
    """
    cutoff: int = 3
    min_token_length: int = 2
    drop_stop_words: bool = False


@dataclass
class ModelConfig:
    """
    Configuration for the classifier.

    Attributes:
        prior: Prior preset.
               - "uniform": every class equally likely
               - "researched": 80% spam / 20% ham
               - "dataset": class frequencies of the whole dataset
        positive_class: Class id treated as positive by the metrics
                        (0 = spam with the default label ids).
        workers: Threads used for batch prediction (0 = predict inline).
    """
    prior: str = "uniform"
    positive_class: int = 0
    workers: int = 0


@dataclass
class OutputConfig:
    """
    Configuration for run output.

    Attributes:
        results_path: TSV file receiving (text, prediction) pairs.
                      Defaults to the XDG data directory.
        write_results: Whether to write the results file at all.
    """
    results_path: Path | None = None
    write_results: bool = True


@dataclass
class Config:
    """
    Main configuration container for SMS-Bayes.

    Usage:
        >>> config = Config.load()
        >>> config.vocabulary.cutoff
        3
    """
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def default_results_path() -> Path:
        """Returns the default path for prediction results."""
        return get_xdg_data_home() / "results.tsv"

    @property
    def results_path(self) -> Path:
        """The configured results path, or the XDG default."""
        return self.output.results_path or self.default_results_path()

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the file doesn't exist, returns default configuration.

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

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration to a config file.

        Creates the parent directory if it doesn't exist.

        Returns:
            The path written to.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        return config_path

    def validate(self) -> None:
        """
        Check values that the TOML types alone can't guarantee.

        Raises:
            ConfigError: On the first invalid value.
        """
        # TOML values arrive with whatever type the file gave them
        for name, value, expected in [
            ("dataset.spam_label", self.dataset.spam_label, str),
            ("dataset.ham_label", self.dataset.ham_label, str),
            ("vocabulary.cutoff", self.vocabulary.cutoff, int),
            ("vocabulary.min_token_length", self.vocabulary.min_token_length, int),
            ("vocabulary.drop_stop_words", self.vocabulary.drop_stop_words, bool),
            ("model.prior", self.model.prior, str),
            ("model.positive_class", self.model.positive_class, int),
            ("model.workers", self.model.workers, int),
            ("output.write_results", self.output.write_results, bool),
        ]:
            # bool is an int subclass, but `cutoff = true` is still a mistake
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(
                    f"{name} must be of type {expected.__name__}, got {value!r}"
                )

        if self.model.prior not in PRIOR_PRESETS:
            raise ConfigError(
                f"Unknown prior {self.model.prior!r}, expected one of {', '.join(PRIOR_PRESETS)}"
            )
        if self.vocabulary.cutoff < 0:
            raise ConfigError(f"vocabulary.cutoff must be >= 0, got {self.vocabulary.cutoff}")
        if self.vocabulary.min_token_length < 1:
            raise ConfigError(
                f"vocabulary.min_token_length must be >= 1, got {self.vocabulary.min_token_length}"
            )
        if self.model.workers < 0:
            raise ConfigError(f"model.workers must be >= 0, got {self.model.workers}")
        if self.dataset.spam_label == self.dataset.ham_label:
            raise ConfigError("dataset.spam_label and dataset.ham_label must differ")

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Paths are stored as strings in TOML and converted to Path here.
        """
        config = cls()

        # Dataset settings
        dataset = _section(data, "dataset")
        config.dataset = DatasetConfig(
            train_path=_optional_path(dataset.get("train_path")),
            test_path=_optional_path(dataset.get("test_path")),
            spam_label=dataset.get("spam_label", "spam"),
            ham_label=dataset.get("ham_label", "ham"),
        )

        # Vocabulary settings
        vocabulary = _section(data, "vocabulary")
        config.vocabulary = VocabularyConfig(
            cutoff=vocabulary.get("cutoff", 3),
            min_token_length=vocabulary.get("min_token_length", 2),
            drop_stop_words=vocabulary.get("drop_stop_words", False),
        )

        # Model settings
        model = _section(data, "model")
        config.model = ModelConfig(
            prior=model.get("prior", "uniform"),
            positive_class=model.get("positive_class", 0),
            workers=model.get("workers", 0),
        )

        # Output settings
        output = _section(data, "output")
        config.output = OutputConfig(
            results_path=_optional_path(output.get("results_path")),
            write_results=output.get("write_results", True),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.

        TOML has no null, so unset paths are left out.
        """
        data: dict[str, Any] = {}

        # Dataset settings
        data["dataset"] = {
            "spam_label": self.dataset.spam_label,
            "ham_label": self.dataset.ham_label,
        }
        if self.dataset.train_path:
            data["dataset"]["train_path"] = str(self.dataset.train_path)
        if self.dataset.test_path:
            data["dataset"]["test_path"] = str(self.dataset.test_path)

        # Vocabulary settings
        data["vocabulary"] = {
            "cutoff": self.vocabulary.cutoff,
            "min_token_length": self.vocabulary.min_token_length,
            "drop_stop_words": self.vocabulary.drop_stop_words,
        }

        # Model settings
        data["model"] = {
            "prior": self.model.prior,
            "positive_class": self.model.positive_class,
            "workers": self.model.workers,
        }

        # Output settings
        data["output"] = {
            "write_results": self.output.write_results,
        }
        if self.output.results_path:
            data["output"]["results_path"] = str(self.output.results_path)

        return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def _optional_path(value: Any) -> Path | None:
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"Paths must be strings, got {value!r}")
    return Path(value).expanduser() if value else None


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
    Print all XDG paths for debugging.
    Useful for users wondering where their config/data is stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"Data:    {get_xdg_data_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Results:      {Config.default_results_path()}")
