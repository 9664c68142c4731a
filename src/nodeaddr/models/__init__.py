"""Pure frozen dataclasses with zero I/O for addresses and resolver output.

The models layer is the foundation of the package. It has **no dependencies**
on any other nodeaddr package -- only the Python standard library. Models use
``@dataclass(frozen=True, slots=True)`` and validate in ``__post_init__`` so
invalid instances never escape the constructor.

Attributes:
    Address128: 16-byte address carrying native IPv6 or IPv4-mapped IPv6.
    ResolvedCandidate: One ``getaddrinfo`` result (family, bytes, scope).
    HostPort: Host and service substrings of a ``host[:port]`` string.
    AddressFamily: ``UNSPEC``, ``INET`` and ``INET6``, valued as ``socket.AF_*``.

See Also:
    [nodeaddr.models.address][]: Address and candidate models.
    [nodeaddr.models.constants][]: Shared constants and enumerations.
"""

from .address import Address128, HostPort, ResolvedCandidate
from .constants import (
    ADDR_STRLEN,
    HOST_CAPACITY,
    MAPPED_IPV4_PREFIX,
    MAPPED_IPV4_TEXT_PREFIX,
    NULL_ADDRESS,
    SERVICE_CAPACITY,
    AddressFamily,
)


__all__ = [
    "ADDR_STRLEN",
    "HOST_CAPACITY",
    "MAPPED_IPV4_PREFIX",
    "MAPPED_IPV4_TEXT_PREFIX",
    "NULL_ADDRESS",
    "SERVICE_CAPACITY",
    "Address128",
    "AddressFamily",
    "HostPort",
    "ResolvedCandidate",
]
