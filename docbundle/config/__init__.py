"""
Configuration package for docbundle.

Layered YAML + environment variable configuration.
"""

from docbundle.config.schema import BundleConfig, OutputConfig, LogLevel
from docbundle.config.manager import ConfigurationManager
from docbundle.config.environment import EnvironmentVariables
from docbundle.config.yaml_parser import ConfigurationYAMLParser, YAMLParsingError

__all__ = [
    "BundleConfig",
    "OutputConfig",
    "LogLevel",
    "ConfigurationManager",
    "EnvironmentVariables",
    "ConfigurationYAMLParser",
    "YAMLParsingError",
]
