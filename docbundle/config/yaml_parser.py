"""
YAML parser with validation for docbundle configuration files.

This module provides YAML parsing with detailed error reporting, line number
information, and structure validation for configuration files.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple


class YAMLParsingError(Exception):
    """Custom exception for YAML parsing errors with enhanced context."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        error_parts = [message]

        if file_path:
            error_parts.append(f"File: {file_path}")

        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")

        super().__init__(" | ".join(error_parts))


def _error_from_yaml(e: yaml.YAMLError, file_path: Optional[Path]) -> YAMLParsingError:
    line_number = None
    column = None

    mark = getattr(e, 'problem_mark', None)
    if mark is not None:
        # YAML marks are 0-based
        line_number = mark.line + 1
        column = mark.column + 1

    problem = getattr(e, 'problem', None)
    if problem:
        message = f"YAML parsing error: {problem}"
    else:
        message = f"YAML parsing error: {str(e)}"

    return YAMLParsingError(message, file_path, line_number, column)


class ConfigurationYAMLParser:
    """YAML parser for configuration files with validation and error reporting."""

    TOP_LEVEL_KEYS = {'delimiter', 'policy', 'log_level', 'log_file', 'output'}
    OUTPUT_KEYS = {'dir', 'sidecar', 'force'}

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse YAML configuration file with enhanced error reporting.

        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise _error_from_yaml(e, file_path) from e
        except FileNotFoundError:
            raise YAMLParsingError("Configuration file not found", file_path)
        except PermissionError:
            raise YAMLParsingError("Permission denied reading configuration file", file_path)
        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)

        return self._ensure_mapping(content, file_path)

    def parse_string(self, yaml_content: str) -> Dict[str, Any]:
        """
        Parse YAML configuration from string with enhanced error reporting.

        Raises:
            YAMLParsingError: If YAML is invalid
        """
        try:
            content = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise _error_from_yaml(e, None) from e

        return self._ensure_mapping(content, None)

    def _ensure_mapping(self, content: Any, file_path: Optional[Path]) -> Dict[str, Any]:
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError(
                f"Configuration must be a mapping, got {type(content).__name__}",
                file_path,
            )
        return content

    def validate_configuration_structure(self, config_dict: Dict[str, Any]) -> List[str]:
        """
        Validate configuration dictionary structure against expected schema.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        unknown_keys = set(config_dict.keys()) - self.TOP_LEVEL_KEYS
        if unknown_keys:
            errors.append(f"Unknown configuration keys: {', '.join(sorted(unknown_keys))}")

        if 'delimiter' in config_dict and config_dict['delimiter'] is not None:
            if not isinstance(config_dict['delimiter'], str):
                errors.append("delimiter must be a string (quote it in YAML)")

        if 'policy' in config_dict and not isinstance(config_dict['policy'], str):
            errors.append("policy must be a string")

        if 'output' in config_dict:
            errors.extend(self._validate_output_config(config_dict['output']))

        return errors

    def _validate_output_config(self, config: Any) -> List[str]:
        """Validate output configuration section."""
        errors = []

        if not isinstance(config, dict):
            errors.append("output must be a dictionary")
            return errors

        unknown_keys = set(config.keys()) - self.OUTPUT_KEYS
        if unknown_keys:
            errors.append(f"Unknown output keys: {', '.join(sorted(unknown_keys))}")

        for flag in ('sidecar', 'force'):
            if flag in config and not isinstance(config[flag], bool):
                errors.append(f"output.{flag} must be a boolean")

        return errors

    def validate_and_parse_file(self, file_path: Path) -> Tuple[Dict[str, Any], List[str]]:
        """
        Parse and validate YAML configuration file in one step.

        Returns:
            Tuple of (parsed_config, validation_errors)

        Raises:
            YAMLParsingError: If YAML parsing fails
        """
        config_dict = self.parse_file(file_path)
        validation_errors = self.validate_configuration_structure(config_dict)
        return config_dict, validation_errors
