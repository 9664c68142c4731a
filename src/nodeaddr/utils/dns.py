"""Host resolution to a single preferred 128-bit address.

Resolves a hostname or address literal through the system resolver
(``socket.getaddrinfo``), picks one preferred candidate and returns it as
an [Address128][nodeaddr.models.address.Address128]. IPv4 results are
carried as IPv4-mapped IPv6 addresses.

When a name resolves to several addresses:

1. the first IPv4 address is used, for a smooth upgrade from IPv4-only
   peers;
2. without any IPv4 address, the first IPv6 address without scope is used.

Link-local (scoped) IPv6 addresses are never selected since they are
meaningless without an interface.

Note:
    Every call is synchronous and one-shot: no caching, no retries. A
    caller needing a timeout must impose it around the call.

See Also:
    [expand_ipv4()][nodeaddr.utils.mapping.expand_ipv4]: IPv4 to
        IPv4-mapped conversion.
    [format_address()][nodeaddr.utils.text.format_address]: Renders the
        result back to text.
"""

from __future__ import annotations

import logging
import socket
from typing import TYPE_CHECKING

from nodeaddr.core.exceptions import ResolutionError
from nodeaddr.models import Address128, AddressFamily, ResolvedCandidate

from .mapping import expand_ipv4


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from nodeaddr.core.config import NodeAddrConfig

logger = logging.getLogger(__name__)


def resolve_all(
    name: str,
    *,
    family: int = socket.AF_UNSPEC,
    socktype: int = socket.SOCK_STREAM,
    protocol: int = socket.IPPROTO_TCP,
    flags: int = 0,
) -> list[ResolvedCandidate]:
    """Return every address the system resolver reports for *name*, in order.

    Entries of families other than IPv4 and IPv6 are skipped.

    Raises:
        OSError: Propagated from ``socket.getaddrinfo`` (``socket.gaierror``
            for unknown hosts and resolver failures).
        UnicodeError: If *name* cannot be IDNA-encoded.
    """
    entries = socket.getaddrinfo(name, None, family, socktype, protocol, flags)
    return [
        ResolvedCandidate.from_addrinfo(entry)
        for entry in entries
        if entry[0] in (socket.AF_INET, socket.AF_INET6)
    ]


def select_preferred(candidates: Iterable[ResolvedCandidate]) -> ResolvedCandidate | None:
    """Pick the preferred candidate, scanning in resolver order.

    Returns the first IPv4 candidate as soon as one is seen. Otherwise
    returns the first IPv6 candidate with ``scope_id == 0``, or ``None``
    when there is no such candidate.
    """
    preferred: ResolvedCandidate | None = None
    for candidate in candidates:
        if candidate.family == AddressFamily.INET:
            return candidate
        if (
            preferred is None
            and candidate.family == AddressFamily.INET6
            and not candidate.is_scoped
        ):
            # Keep scanning for an IPv4 address
            preferred = candidate
    return preferred


def to_address128(candidate: ResolvedCandidate) -> Address128:
    """Convert a candidate to its 128-bit form, expanding IPv4 addresses."""
    if candidate.family == AddressFamily.INET:
        return expand_ipv4(candidate.address)
    return Address128(candidate.address)


def resolve_address(
    host: str,
    *,
    resolver: Callable[..., list[ResolvedCandidate]] = resolve_all,
    config: NodeAddrConfig | None = None,
) -> Address128:
    """Resolve a hostname or address literal to one preferred address.

    Args:
        host: Hostname, IPv4 literal, or unbracketed IPv6 literal.
        resolver: Name resolution function with the signature of
            [resolve_all()][nodeaddr.utils.dns.resolve_all].
        config: Optional configuration; ``resolver.addrconfig`` adds
            ``AI_ADDRCONFIG`` to the resolver flags.

    Returns:
        The preferred address. IPv4 results are IPv4-mapped.

    Raises:
        ResolutionError: If the resolver fails for any reason, or returns
            no IPv4 address and no unscoped IPv6 address.

    Examples:
        ```python
        resolve_address("127.0.0.1").packed.hex()
        # '00000000000000000000ffff7f000001'
        ```
    """
    flags = socket.AI_ADDRCONFIG if config is not None and config.resolver.addrconfig else 0

    try:
        candidates = resolver(
            host,
            family=socket.AF_UNSPEC,
            socktype=socket.SOCK_STREAM,
            protocol=socket.IPPROTO_TCP,
            flags=flags,
        )
    except (OSError, UnicodeError, ValueError) as e:
        # ValueError covers embedded NUL characters in the host string
        logger.debug("resolve_failed host=%r error=%s", host, e)
        raise ResolutionError(f"Could not resolve host: {host!r}") from e

    preferred = select_preferred(candidates)
    if preferred is None:
        logger.debug("resolve_no_usable_address host=%r candidates=%d", host, len(candidates))
        raise ResolutionError(f"No usable address for host: {host!r}")

    logger.debug(
        "resolve_selected host=%r family=%s scope_id=%d",
        host,
        preferred.family.name,
        preferred.scope_id,
    )
    return to_address128(preferred)


__all__ = [
    "resolve_address",
    "resolve_all",
    "select_preferred",
    "to_address128",
]
