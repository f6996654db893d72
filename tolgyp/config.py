"""
Runtime settings: built-in defaults, the user config file and the environment.
"""

import os
import logging
import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


log = logging.getLogger(__name__)

DEFAULT_SOURCE_LANGUAGE = "pl"
DEFAULT_TARGET_LANGUAGE = "en"
DEFAULT_ERROR_LOG = "error.log"
DEFAULT_CONFIG_FILE = Path.home() / '.tolgyp' / 'config.ini'

# Environment variable -> settings field
ENV_OVERRIDES = {
    'TOLGYP_SOURCE_LANGUAGE': 'source_language',
    'TOLGYP_TARGET_LANGUAGE': 'target_language',
    'TOLGYP_ERROR_LOG': 'error_log',
}


@dataclass
class Settings:
    """Language pair and error log location used by a single run."""
    source_language: str = DEFAULT_SOURCE_LANGUAGE
    target_language: str = DEFAULT_TARGET_LANGUAGE
    error_log: str = DEFAULT_ERROR_LOG

    @classmethod
    def load(cls, config_file: Optional[Path] = None,
             environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Resolve settings from defaults, the config file and the environment.

        Later sources win: the `[defaults]` section of the config file
        overrides the built-in values and `TOLGYP_*` environment variables
        override both. Empty values are ignored.

        Args:
            config_file: Path to an INI file (default: ~/.tolgyp/config.ini)
            environ: Environment mapping (default: os.environ)

        Returns:
            Resolved settings
        """
        settings = cls()
        config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        environ = os.environ if environ is None else environ

        config = configparser.ConfigParser()
        if config_file.exists():
            try:
                config.read(config_file, encoding='utf-8')
            except configparser.Error as e:
                log.warning("Ignoring malformed config file %s: %s", config_file, e)
                config = configparser.ConfigParser()

        if config.has_section('defaults'):
            for field in ('source_language', 'target_language', 'error_log'):
                value = config.get('defaults', field, fallback='').strip()
                if value:
                    setattr(settings, field, value)

        for variable, field in ENV_OVERRIDES.items():
            value = environ.get(variable, '').strip()
            if value:
                setattr(settings, field, value)

        return settings
