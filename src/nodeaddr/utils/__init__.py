"""Address resolution and text conversion.

Attributes:
    dns: Resolution of a host to one preferred
        [Address128][nodeaddr.models.address.Address128] through the
        system resolver.
    mapping: IPv4 to IPv4-mapped IPv6 conversion.
    text: Address formatting, ``host[:port]`` splitting and combining.

Note:
    The utils layer imports only ``nodeaddr.models`` plus the exceptions
    and configuration types of ``nodeaddr.core``; it never logs through the structured
    [Logger][nodeaddr.core.logger.Logger], only through plain
    ``logging.getLogger(__name__)``.
"""

from .dns import resolve_address, resolve_all, select_preferred, to_address128
from .mapping import expand_ipv4
from .text import (
    FormattedAddress,
    combine_host_port,
    format_address,
    format_numeric,
    render_address,
    split_host_port,
)


__all__ = [
    "FormattedAddress",
    "combine_host_port",
    "expand_ipv4",
    "format_address",
    "format_numeric",
    "render_address",
    "resolve_address",
    "resolve_all",
    "select_preferred",
    "split_host_port",
    "to_address128",
]
