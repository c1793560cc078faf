"""YAML config loader with environment variable support"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
ENV_PREFIX = "LEADS_"

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULTS: Dict[str, Any] = {
    "input": "leads.json",
    "output": "filtered_leads_output.json",
    "log_dir": "logs",
    "log_level": "INFO",
    "diff_fields": "all",
}


class ConfigLoader:
    """Load and manage processing configuration"""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from defaults, a YAML file and the environment

        Args:
            config_path: YAML file to read. When omitted, config.yaml is read
                if it exists.

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If an explicitly given config file doesn't exist
        """
        config = dict(DEFAULTS)

        path = Path(config_path or DEFAULT_CONFIG_PATH)
        if path.exists():
            with open(path, 'r') as f:
                config.update(yaml.safe_load(f) or {})
            logger.debug(f"Loaded config from {path}")
        elif config_path:
            raise FileNotFoundError(f"Config not found: {path}")

        # Override with environment variables
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                config_key = key[len(ENV_PREFIX):].lower()
                # Try to parse as appropriate type
                if value.lower() in ('true', 'false'):
                    config[config_key] = value.lower() == 'true'
                elif value.isdigit():
                    config[config_key] = int(value)
                else:
                    try:
                        config[config_key] = float(value)
                    except ValueError:
                        config[config_key] = value

        return config

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> tuple[bool, Optional[str]]:
        """
        Validate configuration structure

        Args:
            config: Configuration dictionary

        Returns:
            Tuple of (is_valid, error_message)
        """
        for field in ('input', 'output'):
            if not isinstance(config.get(field), str) or not config[field]:
                return False, f"Missing required field: {field}"

        if config.get('diff_fields') not in ('all', 'entry_date'):
            return False, "diff_fields must be 'all' or 'entry_date'"

        if not isinstance(config.get('log_level'), str) or \
                config['log_level'].upper() not in LOG_LEVELS:
            return False, f"Unknown log_level: {config.get('log_level')}"

        return True, None
