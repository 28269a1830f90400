"""
Configuration management
"""
import os
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


# ============================================
# CONFIGURATION DEFAULTS
# ============================================

class ConfigDefaults:
    """Default configuration values as constants"""

    # Timezone defaults
    TIMEZONE_LOCAL = "local"  # naive wall-clock time of the host
    TIMEZONE_DEFAULT = TIMEZONE_LOCAL
    TIMEZONE_ENV_VAR = "CHRONO_TIMEZONE"

    # Formatting defaults (strftime patterns)
    DATE_FORMAT_DEFAULT = "%Y-%m-%d"
    DATETIME_FORMAT_DEFAULT = "%Y-%m-%d %H:%M:%S"
    DAY_FORMAT_DEFAULT = "%d/%m/%Y"
    DATE_AS_STRING_FORMAT = "%H:%M %Y-%b-%d"

    # Period defaults
    FILTER_SPAN_MONTHS_DEFAULT = 1

    # Logging defaults
    LOGGING_LEVEL_DEFAULT = "WARNING"

    # Config file defaults
    CONFIG_PATH_ENV_VAR = "CHRONO_CONFIG"
    CONFIG_PATH_DEFAULT = "config/chrono.yaml"


# ============================================
# CONFIGURATION MODELS
# ============================================

class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = ConfigDefaults.LOGGING_LEVEL_DEFAULT
    file: Optional[str] = None


class ChronoConfig(BaseModel):
    """Main configuration"""
    timezone: str = ConfigDefaults.TIMEZONE_DEFAULT  # "local" for naive datetimes, or an IANA name like "Europe/Paris"
    date_format: str = ConfigDefaults.DATE_FORMAT_DEFAULT
    datetime_format: str = ConfigDefaults.DATETIME_FORMAT_DEFAULT
    filter_span_months: int = Field(default=ConfigDefaults.FILTER_SPAN_MONTHS_DEFAULT, ge=0)
    logging: LoggingConfig = LoggingConfig()


def load_config(config_path: str = ConfigDefaults.CONFIG_PATH_DEFAULT) -> ChronoConfig:
    """
    Load configuration from YAML file and environment variables.
    """
    # Load environment variables
    load_dotenv()

    # Read YAML config
    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}

    # Replace environment variable placeholders
    config_dict = _replace_env_vars(config_dict)

    # Create and validate config
    return ChronoConfig(**config_dict)


def get_config() -> ChronoConfig:
    """
    Return the configuration named by CHRONO_CONFIG, or the defaults.

    The file is re-read on every call; nothing is cached at module level.
    """
    config_path = os.getenv(ConfigDefaults.CONFIG_PATH_ENV_VAR)
    if config_path and os.path.exists(config_path):
        return load_config(config_path)
    return ChronoConfig()


def _replace_env_vars(obj: Any) -> Any:
    """
    Recursively replace ${VAR} placeholders with environment variables.
    """
    if isinstance(obj, dict):
        return {k: _replace_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_replace_env_vars(item) for item in obj]
    elif isinstance(obj, str) and obj.startswith("${") and obj.endswith("}"):
        var_name = obj[2:-1]
        env_value = os.getenv(var_name)
        if env_value:
            return env_value
        if var_name == ConfigDefaults.TIMEZONE_ENV_VAR:
            return ConfigDefaults.TIMEZONE_DEFAULT
        return obj
    return obj


def get_timezone(config: Optional[ChronoConfig] = None) -> str:
    """
    Get timezone from environment variable or config.

    Args:
        config: Optional ChronoConfig object

    Returns:
        Timezone string (e.g., "Europe/Paris", "UTC"), or "local" when
        naive host wall-clock time should be used
    """
    # Check environment variable first
    env_tz = os.getenv(ConfigDefaults.TIMEZONE_ENV_VAR)
    if env_tz:
        return env_tz

    # Check config
    if config and config.timezone:
        return config.timezone

    # Default fallback
    return ConfigDefaults.TIMEZONE_DEFAULT
