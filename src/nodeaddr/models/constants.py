"""Shared constants for the models layer.

Defines the address family enumeration and the fixed sizes and prefixes
used when carrying IPv4 addresses inside 128-bit storage. Placing them
here avoids circular dependencies between the models and utils layers.

See Also:
    [nodeaddr.models.address][]: Uses
        [MAPPED_IPV4_PREFIX][nodeaddr.models.constants.MAPPED_IPV4_PREFIX]
        to detect IPv4-mapped addresses.
    [nodeaddr.utils.text][]: Uses the capacity defaults and the
        [NULL_ADDRESS][nodeaddr.models.constants.NULL_ADDRESS] sentinel.
"""

from __future__ import annotations

import socket
from enum import IntEnum


class AddressFamily(IntEnum):
    """Address families understood by the resolver and the text codec.

    Values mirror the platform ``socket.AF_*`` constants so members can be
    passed straight to socket calls and compared with ``getaddrinfo`` output.

    Attributes:
        UNSPEC: No particular family. Requests both families from the
            resolver; the text codec renders it as the ``null`` sentinel.
        INET: IPv4, 4-byte addresses.
        INET6: IPv6, 16-byte addresses.
    """

    UNSPEC = socket.AF_UNSPEC
    INET = socket.AF_INET
    INET6 = socket.AF_INET6


#: Length in bytes of a packed IPv4 address.
IPV4_LENGTH: int = 4

#: Length in bytes of a packed IPv6 address.
IPV6_LENGTH: int = 16

#: High-order 96 bits of an IPv4-mapped IPv6 address (``::ffff:0:0/96``).
MAPPED_IPV4_PREFIX: bytes = b"\x00" * 10 + b"\xff\xff"

#: Presentation prefix some platforms emit for IPv4-mapped addresses.
MAPPED_IPV4_TEXT_PREFIX: str = "::ffff:"

#: Text written in place of an address that cannot be rendered.
NULL_ADDRESS: str = "null"

#: Default buffer size for a rendered address or ``host:port`` string.
ADDR_STRLEN: int = 512

#: Default buffer size for the host part of a split address (``NI_MAXHOST``).
HOST_CAPACITY: int = 1025

#: Default buffer size for the service part of a split address (``NI_MAXSERV``).
SERVICE_CAPACITY: int = 32

#: Largest value of a 16-bit port number.
PORT_MAX: int = 65535
