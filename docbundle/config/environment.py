"""
Environment variable integration for docbundle configuration.

This module centralizes environment variable names and provides
validation and documentation for them.
"""

import os
from typing import Dict, List, Tuple

from docbundle.errors import InvalidArgumentError
from docbundle.selector import parse_policy


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    DELIMITER = "DOCBUNDLE_DELIMITER"
    POLICY = "DOCBUNDLE_POLICY"
    OUTPUT_DIR = "DOCBUNDLE_OUTPUT_DIR"
    LOG_LEVEL = "DOCBUNDLE_LOG_LEVEL"

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return [
            cls.DELIMITER,
            cls.POLICY,
            cls.OUTPUT_DIR,
            cls.LOG_LEVEL,
        ]

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.DELIMITER: "Delimiter token separating variants inside a bundle",
            cls.POLICY: "Default selection policy (first, last, index(N))",
            cls.OUTPUT_DIR: "Default output directory for published variants",
            cls.LOG_LEVEL: "Default logging level (debug, info, warning, error)",
        }

    @classmethod
    def validate_environment_setup(cls) -> Tuple[List[str], List[str]]:
        """
        Validate current environment variable setup.

        Returns:
            Tuple of (warnings, errors) - warnings for missing optional vars, errors for invalid values
        """
        warnings = []
        errors = []

        if cls.DELIMITER in os.environ and not os.environ[cls.DELIMITER]:
            errors.append(f"{cls.DELIMITER} is set but empty")
        elif cls.DELIMITER not in os.environ:
            warnings.append(f"{cls.DELIMITER} is not set; a delimiter must be passed explicitly")

        policy = os.environ.get(cls.POLICY)
        if policy:
            try:
                parse_policy(policy)
            except InvalidArgumentError:
                errors.append(f"Invalid {cls.POLICY}: '{policy}'. "
                              f"Valid options: first, last, index(N)")

        log_level = os.environ.get(cls.LOG_LEVEL)
        if log_level:
            if log_level.lower() not in ['debug', 'info', 'warning', 'error']:
                errors.append(f"Invalid {cls.LOG_LEVEL}: '{log_level}'. "
                              f"Valid options: debug, info, warning, error")

        return warnings, errors
