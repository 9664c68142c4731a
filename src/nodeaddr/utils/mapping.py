"""IPv4 to IPv4-mapped IPv6 conversion.

IPv4 mapped to IPv6 is ``::ffff:a.b.c.d``, expanded as full hex
``0000:0000:0000:0000:0000:ffff:AABB:CCDD``.
"""

from __future__ import annotations

from nodeaddr.models import Address128
from nodeaddr.models._validation import validate_packed
from nodeaddr.models.constants import IPV4_LENGTH, MAPPED_IPV4_PREFIX


def expand_ipv4(ipv4: bytes) -> Address128:
    """Return the IPv4-mapped IPv6 form of a packed IPv4 address.

    Raises:
        ValueError: If *ipv4* is not exactly 4 bytes.

    Examples:
        ```python
        expand_ipv4(bytes([127, 0, 0, 1])).packed.hex()
        # '00000000000000000000ffff7f000001'
        ```
    """
    validate_packed(ipv4, IPV4_LENGTH, "ipv4")
    return Address128(MAPPED_IPV4_PREFIX + ipv4)
