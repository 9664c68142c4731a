"""Configuration models for nodeaddr.

Pydantic models describing buffer capacities, resolver flags and logging
output. Every field has a default, so an empty YAML file or dictionary
yields a working configuration.

Examples:
    ```python
    from nodeaddr.core.config import NodeAddrConfig

    config = NodeAddrConfig.from_yaml("config/nodeaddr.yaml")
    config.capacity.host     # 1025
    config.resolver.addrconfig  # False
    ```
"""

from __future__ import annotations

from typing import Any, Literal, Self

from pydantic import BaseModel, Field

from nodeaddr.models.constants import ADDR_STRLEN, HOST_CAPACITY, SERVICE_CAPACITY

from .yaml import load_yaml


class CapacityConfig(BaseModel):
    """Buffer sizes used by the text codec.

    Sizes follow C buffer semantics: a capacity of N holds at most N-1
    characters plus the terminator.
    """

    host: int = Field(default=HOST_CAPACITY, ge=1, description="Host buffer size")
    service: int = Field(default=SERVICE_CAPACITY, ge=1, description="Service buffer size")
    address: int = Field(
        default=ADDR_STRLEN,
        ge=1,
        description="Buffer size for rendered addresses and host:port strings",
    )


class ResolverConfig(BaseModel):
    """Flags passed to the system resolver."""

    addrconfig: bool = Field(
        default=False,
        description="Only return families configured on a non-loopback interface",
    )


class LoggingConfig(BaseModel):
    """Log output settings used by the command line."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root log level"
    )
    json_output: bool = Field(default=False, description="Emit JSON instead of key=value")


class NodeAddrConfig(BaseModel):
    """Top-level nodeaddr configuration.

    See Also:
        [resolve_address()][nodeaddr.utils.dns.resolve_address]: Honours
            ``resolver.addrconfig``.
        [nodeaddr.__main__][]: Reads ``capacity`` and ``logging``.
    """

    capacity: CapacityConfig = Field(default_factory=CapacityConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: str) -> Self:
        """Create a configuration from a YAML file.

        Delegates to [load_yaml()][nodeaddr.core.yaml.load_yaml] for safe
        parsing, then to
        [from_dict()][nodeaddr.core.config.NodeAddrConfig.from_dict].
        """
        return cls.from_dict(load_yaml(config_path))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a configuration from a dictionary.

        Raises:
            pydantic.ValidationError: If a field fails validation.
        """
        return cls(**data)
