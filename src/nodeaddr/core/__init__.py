"""Core layer: configuration, exceptions, and structured logging.

Depends only on ``nodeaddr.models`` and is used by ``nodeaddr.utils`` (for
exceptions and configuration) and by the command line.

Attributes:
    NodeAddrConfig: Pydantic configuration for capacities, resolver flags
        and logging. See [NodeAddrConfig][nodeaddr.core.config.NodeAddrConfig].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][nodeaddr.core.logger.Logger].
    ResolutionError, FormatError: The two failure kinds of the library.
        See [nodeaddr.core.exceptions][].
    YAML: Safe YAML loading with ``yaml.safe_load``.
        See [load_yaml()][nodeaddr.core.yaml.load_yaml].
"""

from .config import CapacityConfig, LoggingConfig, NodeAddrConfig, ResolverConfig
from .exceptions import ConfigurationError, FormatError, NodeAddrError, ResolutionError
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "CapacityConfig",
    "ConfigurationError",
    "FormatError",
    "Logger",
    "LoggingConfig",
    "NodeAddrConfig",
    "NodeAddrError",
    "ResolutionError",
    "ResolverConfig",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
