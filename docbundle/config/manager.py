"""
Configuration Manager for docbundle.

This module handles loading, validation, and merging of configuration from multiple sources:
- System defaults
- User configuration (~/.docbundle/config.yaml)
- Project configuration (./.docbundle/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Dict, Any

from .schema import BundleConfig, OutputConfig, LogLevel
from .environment import EnvironmentVariables
from .yaml_parser import ConfigurationYAMLParser, YAMLParsingError
from docbundle.selector import PolicyKind


logger = logging.getLogger(__name__)

_ENV_REFERENCE = re.compile(r'\$\{([^}]+)\}')


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self):
        self.user_config_path = Path.home() / ".docbundle" / "config.yaml"
        self.project_config_path = Path.cwd() / ".docbundle" / "config.yaml"
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> BundleConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.docbundle/config.yaml)
        5. User config (~/.docbundle/config.yaml)
        6. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides; None values are ignored

        Returns:
            BundleConfig: Merged configuration

        Raises:
            ValueError: If configuration files contain invalid YAML or values
        """
        config_dict = self._get_default_config()

        if self.user_config_path.exists():
            logger.debug(f"Loading user configuration: {self.user_config_path}")
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.user_config_path))

        if self.project_config_path.exists():
            logger.debug(f"Loading project configuration: {self.project_config_path}")
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.project_config_path))

        if config_file:
            logger.debug(f"Loading explicit configuration: {config_file}")
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(Path(config_file)))

        # Substitute before env/CLI layers so literal "${...}" from the command line survives
        config_dict = self.substitute_environment_variables(config_dict)

        config_dict = self._merge_configs(config_dict, self._load_environment_variables())

        if cli_overrides:
            config_dict = self._merge_configs(config_dict, self._drop_unset(cli_overrides))

        try:
            config = self._dict_to_config(config_dict)
        except TypeError as e:
            raise ValueError(f"Failed to create configuration object: {e}")

        errors = config.validate()
        if errors:
            raise ValueError("Invalid configuration:\n" + "\n".join(f"  - {error}" for error in errors))

        return config

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ValueError: If a required environment variable is missing
        """
        def replace_var(match):
            var_expr = match.group(1)

            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)

            if var_expr not in os.environ:
                raise ValueError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]

        def substitute_recursive(obj):
            if isinstance(obj, dict):
                return {k: substitute_recursive(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [substitute_recursive(item) for item in obj]
            elif isinstance(obj, str):
                return _ENV_REFERENCE.sub(replace_var, obj)
            return obj

        return substitute_recursive(config_dict)

    def _get_default_config(self) -> Dict[str, Any]:
        """Get system default configuration values."""
        return {
            'delimiter': None,
            'policy': PolicyKind.LAST.value,
            'log_level': LogLevel.WARNING.value,
            'log_file': None,
            'output': {
                'dir': './published',
                'sidecar': False,
                'force': False,
            },
        }

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse YAML configuration file with enhanced error reporting."""
        try:
            config_dict, validation_errors = self.yaml_parser.validate_and_parse_file(file_path)
        except YAMLParsingError as e:
            raise ValueError(str(e)) from e

        if validation_errors:
            raise ValueError(
                f"Configuration validation errors in {file_path}:\n"
                + "\n".join(f"  - {error}" for error in validation_errors)
            )

        return config_dict

    def _load_environment_variables(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}
        env_vars = EnvironmentVariables

        if env_vars.DELIMITER in os.environ:
            env_config['delimiter'] = os.environ[env_vars.DELIMITER]

        if env_vars.POLICY in os.environ:
            env_config['policy'] = os.environ[env_vars.POLICY]

        if env_vars.LOG_LEVEL in os.environ:
            env_config['log_level'] = os.environ[env_vars.LOG_LEVEL]

        if env_vars.OUTPUT_DIR in os.environ:
            env_config.setdefault('output', {})['dir'] = os.environ[env_vars.OUTPUT_DIR]

        return env_config

    def _drop_unset(self, overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Remove None values so unset CLI options do not mask lower layers."""
        result = {}
        for key, value in overrides.items():
            if isinstance(value, dict):
                nested = self._drop_unset(value)
                if nested:
                    result[key] = nested
            elif value is not None:
                result[key] = value
        return result

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> BundleConfig:
        """Convert configuration dictionary to BundleConfig object."""
        return BundleConfig(
            delimiter=config_dict.get('delimiter'),
            policy=config_dict.get('policy', PolicyKind.LAST.value),
            log_level=config_dict.get('log_level', LogLevel.WARNING.value),
            log_file=config_dict.get('log_file'),
            output=OutputConfig(**config_dict.get('output', {})),
        )

