"""
Configuration Management System for keeplist

This module provides a centralized configuration system that supports a 4-tier
precedence hierarchy: environment → project → user → system defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class LoggingConfig(BaseModel):
    """Logging Configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="INFO", description="File log level")
    console_level: str = Field(default="WARNING", description="Console log level")
    log_dir: str = Field(default="data/logs", description="Directory for rotating log files")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024, description="Rotate after this many bytes")
    backup_count: int = Field(default=5, ge=0, le=50, description="Rotated files kept")


class FilmsConfig(BaseModel):
    """Movies list Configuration"""
    model_config = ConfigDict(extra='forbid')

    seed_file: Optional[str] = Field(default=None, description="YAML list of films replacing the built-in catalogue")
    default_filter: Literal["all", "favorites", "non_favorites"] = Field(default="all", description="Filter applied at startup")


class PersonSeed(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: str
    age: int


class PeopleConfig(BaseModel):
    """People list Configuration"""
    model_config = ConfigDict(extra='forbid')

    identity_provider: Literal["uuid4", "sequential"] = Field(default="uuid4", description="Identity generator for new persons")
    seed: List[PersonSeed] = Field(default_factory=list, description="Persons present at startup")


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    title: str = Field(default="Keeplist", description="Window title")
    theme_mode: Literal["dark", "light", "system"] = Field(default="dark", description="UI theme mode")
    flet_web_mode: bool = Field(default=False, description="Serve the UI over HTTP instead of a desktop window")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    films: FilmsConfig = Field(default_factory=FilmsConfig)
    people: PeopleConfig = Field(default_factory=PeopleConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# Environment variable -> (section, key)
ENV_MAP = {
    'LOG_LEVEL': ('logging', 'level'),
    'KEEPLIST_LOG_DIR': ('logging', 'log_dir'),
    'KEEPLIST_FILMS_SEED': ('films', 'seed_file'),
    'KEEPLIST_DEFAULT_FILTER': ('films', 'default_filter'),
    'KEEPLIST_IDENTITY_PROVIDER': ('people', 'identity_provider'),
    'FLET_WEB_MODE': ('ui', 'flet_web_mode'),
    'FLET_PORT': ('ui', 'flet_port'),
}


class ConfigManager:
    """Centralized configuration manager with 4-tier precedence hierarchy"""

    def __init__(self, project_root: Optional[Path] = None, config_dir: Optional[Path] = None):
        self.project_root = project_root or Path.cwd()
        # Shipped defaults live with the package; user/project files next to the project
        self.defaults_dir = SETTINGS_DIR
        self.config_dir = config_dir or self.project_root / "settings"
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level must be a mapping")
            return {}
        return data

    def _save_yaml_file(self, file_path: Path, data: Dict[str, Any]) -> bool:
        """Save configuration to YAML file"""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.defaults_dir / "defaults.yaml")

            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")

        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        """Load project-specific configuration"""
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")

        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()

        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())

        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Dict[str, Any]] = {}
        for env_key, (section, config_key) in ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue

            # Type conversion
            if config_key == 'flet_port':
                try:
                    converted: Any = int(value)
                except ValueError:
                    logger.warning(f"Ignoring {env_key}={value!r}: not an integer")
                    continue
            elif config_key == 'flet_web_mode':
                converted = value.lower() in ('true', '1', 'yes', 'on')
            elif config_key == 'level':
                converted = value.upper()
            else:
                converted = value

            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}")
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def save_project_config(self, config_updates: Dict[str, Any]) -> bool:
        """Save project-specific configuration updates"""
        project_path = self.config_dir / "project.yaml"

        existing_config = self._load_yaml_file(project_path)
        self._deep_merge(existing_config, config_updates)

        success = self._save_yaml_file(project_path, existing_config)
        if success:
            # Force reload on next read
            self._project_config = None

        return success

    def reload_config(self) -> None:
        """Clear cached configurations and reload from files"""
        self._system_config = None
        self._user_config = None
        self._project_config = None


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(project_root: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or project_root is not None:
        _config_manager = ConfigManager(project_root)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)
