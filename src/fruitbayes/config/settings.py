"""Core configuration settings for fruitbayes."""

import logging
import math
from pathlib import Path
from typing import Optional, Dict, List
from dataclasses import dataclass, field
from enum import Enum

from fruitbayes.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class DataSettings:
    """Training data and class-table locations."""
    training_path: Optional[Path] = None
    class_ranges_path: Optional[Path] = None
    delimiter: str = ","

    def validate(self) -> None:
        if len(self.delimiter) != 1:
            raise ConfigurationError(
                f"delimiter must be a single character, got {self.delimiter!r}",
                config_field="data.delimiter"
            )

        if self.training_path and not self.training_path.is_file():
            raise ConfigurationError(
                f"Training data file does not exist: {self.training_path}",
                config_field="data.training_path"
            ).add_suggestion("Check the --training path")

        if self.class_ranges_path and not self.class_ranges_path.is_file():
            raise ConfigurationError(
                f"Class ranges file does not exist: {self.class_ranges_path}",
                config_field="data.class_ranges_path"
            ).add_suggestion("Check the --ranges path")

@dataclass
class ScoringSettings:
    """Posterior scoring configuration."""
    class_labels: List[str] = field(default_factory=list)  # empty -> labels found in the corpus
    strict: bool = False
    max_workers: int = 1
    priors: Dict[str, float] = field(default_factory=dict)  # empty -> uniform

    def validate(self) -> None:
        """Validate scoring settings."""
        if self.max_workers <= 0:
            raise ConfigurationError(
                "max_workers must be positive",
                config_field="scoring.max_workers"
            )

        if len(set(self.class_labels)) != len(self.class_labels):
            raise ConfigurationError(
                "class_labels contains duplicates",
                config_field="scoring.class_labels"
            ).add_suggestion("List each class once")

        for label, p in self.priors.items():
            if isinstance(p, bool) or not isinstance(p, (int, float)) \
                    or not (math.isfinite(p) and p >= 0):
                raise ConfigurationError(
                    f"Prior for '{label}' must be a finite non-negative number",
                    config_field="scoring.priors"
                )

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    log_dir: Optional[Path] = None
    console_output: bool = True

    def validate(self) -> None:
        if self.log_dir and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ConfigurationError(
                f"Log path is not a directory: {self.log_dir}",
                config_field="logging.log_dir"
            )

@dataclass
class Settings:
    """Main configuration settings for fruitbayes."""

    data: DataSettings = field(default_factory=DataSettings)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    debug_mode: bool = False

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.data.validate()
            self.scoring.validate()
            self.logging.validate()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'data': {
                'training_path': str(self.data.training_path) if self.data.training_path else None,
                'class_ranges_path': (
                    str(self.data.class_ranges_path) if self.data.class_ranges_path else None
                    ),
                'delimiter': self.data.delimiter,
            },
            'scoring': {
                'class_labels': list(self.scoring.class_labels),
                'strict': self.scoring.strict,
                'max_workers': self.scoring.max_workers,
                'priors': dict(self.scoring.priors),
            },
            'logging': {
                'level': self.logging.level.value,
                'log_dir': str(self.logging.log_dir) if self.logging.log_dir else None,
                'console_output': self.logging.console_output,
            },
            'runtime': {
                'debug_mode': self.debug_mode,
            }
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings instance."""
    if _settings is None:
        raise ConfigurationError(
            "Settings not initialized. Call set_settings() first."
        ).add_suggestion("Initialize settings in your application startup")
    return _settings

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()
    _settings = settings
    logger.info("Configuration loaded and validated successfully")
