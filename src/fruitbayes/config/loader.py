"""Configuration loading from CLI and programmatic sources."""

import logging
from pathlib import Path
from dataclasses import replace
from typing import Dict, Iterable, Optional

from fruitbayes.config.settings import (
    Settings, DataSettings, ScoringSettings, LoggingSettings, LogLevel
)
from fruitbayes.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

def parse_priors(items: Optional[Iterable[str]]) -> Dict[str, float]:
    """Parse ``LABEL=PRIOR`` pairs."""
    priors: Dict[str, float] = {}
    for item in items or ():
        label, sep, raw = item.rpartition("=")
        if not sep or not label:
            raise ConfigurationError(
                f"Invalid prior '{item}'",
                config_field="scoring.priors"
            ).add_suggestion("Use LABEL=PRIOR, e.g. --prior apple=0.25")
        try:
            priors[label] = float(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid prior value in '{item}'",
                config_field="scoring.priors"
            ) from e
    return priors

class ConfigurationLoader:
    """Loads configuration from CLI args and defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            settings = self.load_defaults()

            data_updates = {}
            if getattr(args, 'training', None):
                data_updates['training_path'] = Path(args.training)
            if getattr(args, 'ranges', None):
                data_updates['class_ranges_path'] = Path(args.ranges)
            if getattr(args, 'delimiter', None):
                data_updates['delimiter'] = args.delimiter

            scoring_updates = {}
            if getattr(args, 'classes', None):
                scoring_updates['class_labels'] = list(args.classes)
            if getattr(args, 'strict', False):
                scoring_updates['strict'] = True
            if getattr(args, 'workers', None) is not None:
                scoring_updates['max_workers'] = args.workers
            if getattr(args, 'prior', None):
                scoring_updates['priors'] = parse_priors(args.prior)

            logging_updates = {}
            if getattr(args, 'log_dir', None):
                logging_updates['log_dir'] = Path(args.log_dir)
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG
            if getattr(args, 'quiet', False):
                logging_updates['console_output'] = False

            return replace(
                settings,
                data=replace(settings.data, **data_updates),
                scoring=replace(settings.scoring, **scoring_updates),
                logging=replace(settings.logging, **logging_updates),
                debug_mode=bool(getattr(args, 'debug', False)),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            data=DataSettings(
                training_path=None,
                class_ranges_path=None,
                delimiter=",",
            ),
            scoring=ScoringSettings(
                class_labels=[],
                strict=False,
                max_workers=1,
                priors={},
            ),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                log_dir=None,
                console_output=True,
            ),
            debug_mode=False,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate()
    return settings
