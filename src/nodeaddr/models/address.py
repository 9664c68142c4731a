"""
Unified 128-bit address and resolver candidate models.

Every address leaving the resolver is carried as an
[Address128][nodeaddr.models.address.Address128]: either a native IPv6
address or an IPv4 address re-encoded as an IPv4-mapped IPv6 address
(``::ffff:a.b.c.d``). Raw resolver output is represented by
[ResolvedCandidate][nodeaddr.models.address.ResolvedCandidate] before a
single preferred entry is chosen.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass
from ipaddress import IPv6Address
from typing import Any, NamedTuple

from ._validation import validate_instance, validate_non_negative_int, validate_packed
from .constants import IPV4_LENGTH, IPV6_LENGTH, MAPPED_IPV4_PREFIX, AddressFamily


@dataclass(frozen=True, slots=True)
class Address128:
    """Immutable 16-byte address in network byte order.

    Attributes:
        packed: The 16 address bytes. IPv4 addresses are stored with
            bytes 0-9 set to ``0x00``, bytes 10-11 set to ``0xff`` and the
            four octets in bytes 12-15.

    Raises:
        TypeError: If ``packed`` is not ``bytes``.
        ValueError: If ``packed`` is not exactly 16 bytes long.

    Examples:
        ```python
        addr = Address128(b"\\x00" * 10 + b"\\xff\\xff" + bytes([127, 0, 0, 1]))
        addr.is_ipv4_mapped  # True
        addr.ipv4            # b'\\x7f\\x00\\x00\\x01'
        ```
    """

    packed: bytes

    def __post_init__(self) -> None:
        validate_packed(self.packed, IPV6_LENGTH, "packed")

    def __bytes__(self) -> bytes:
        return self.packed

    @property
    def is_ipv4_mapped(self) -> bool:
        """Return True if the address lies in ``::ffff:0:0/96``."""
        return self.packed[:12] == MAPPED_IPV4_PREFIX

    @property
    def ipv4(self) -> bytes | None:
        """Return the embedded IPv4 octets, or ``None`` for a native IPv6 address."""
        if self.is_ipv4_mapped:
            return self.packed[12:]
        return None

    def to_ipaddress(self) -> IPv6Address:
        """Return the address as an ``ipaddress.IPv6Address``."""
        return IPv6Address(self.packed)


@dataclass(frozen=True, slots=True)
class ResolvedCandidate:
    """One address returned by name resolution.

    Attributes:
        family: [AddressFamily.INET][nodeaddr.models.constants.AddressFamily]
            or [AddressFamily.INET6][nodeaddr.models.constants.AddressFamily].
        address: Packed address bytes (4 for IPv4, 16 for IPv6).
        scope_id: IPv6 interface scope. ``0`` means unscoped (globally
            meaningful); always ``0`` for IPv4.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If the family is unsupported, the address length does
            not match the family, or an IPv4 candidate carries a scope.
    """

    family: AddressFamily
    address: bytes
    scope_id: int = 0

    def __post_init__(self) -> None:
        validate_instance(self.family, int, "family")
        try:
            family = AddressFamily(self.family)
        except ValueError:
            raise ValueError(f"Unsupported address family: {self.family}") from None
        if family == AddressFamily.UNSPEC:
            raise ValueError("Candidate family must be INET or INET6")
        validate_non_negative_int(self.scope_id, "scope_id")

        if family == AddressFamily.INET:
            validate_packed(self.address, IPV4_LENGTH, "address")
            if self.scope_id:
                raise ValueError("IPv4 candidates cannot carry a scope_id")
        else:
            validate_packed(self.address, IPV6_LENGTH, "address")

        object.__setattr__(self, "family", family)

    @classmethod
    def from_addrinfo(cls, entry: tuple[Any, ...]) -> ResolvedCandidate:
        """Build a candidate from one ``socket.getaddrinfo`` result tuple.

        Args:
            entry: ``(family, type, proto, canonname, sockaddr)``. For IPv4
                ``sockaddr`` is ``(host, port)``, for IPv6
                ``(host, port, flowinfo, scope_id)``.

        Raises:
            ValueError: If the family is neither IPv4 nor IPv6, or the
                host text is not a numeric address.
        """
        family, _, _, _, sockaddr = entry
        if family == socket.AF_INET:
            return cls(AddressFamily.INET, socket.inet_pton(socket.AF_INET, sockaddr[0]))
        if family == socket.AF_INET6:
            # Link-local hosts come back as "fe80::1%eth0"
            host = sockaddr[0].split("%", 1)[0]
            return cls(
                AddressFamily.INET6,
                socket.inet_pton(socket.AF_INET6, host),
                scope_id=sockaddr[3],
            )
        raise ValueError(f"Unsupported address family: {family}")

    @property
    def is_scoped(self) -> bool:
        """Return True for an IPv6 candidate bound to a specific interface."""
        return self.scope_id != 0


class HostPort(NamedTuple):
    """Host and service substrings split from a ``host[:port]`` string.

    ``host`` is never empty; ``service`` is empty when no port was given.
    """

    host: str
    service: str
