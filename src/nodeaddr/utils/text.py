"""Text codec for addresses and ``host[:port]`` strings.

Three operations, all bounded by caller-supplied buffer capacities with C
semantics (a capacity of N holds at most N-1 characters):

* [format_address()][nodeaddr.utils.text.format_address] renders a packed
  address numerically. It never raises for unrenderable input; it returns
  the ``null`` sentinel instead, so display-only callers need no error
  branch. [render_address()][nodeaddr.utils.text.render_address] returns
  the same text together with a flag telling the two outcomes apart.
* [split_host_port()][nodeaddr.utils.text.split_host_port] splits
  ``host:port``, ``[ipv6]:port``, ``[ipv6]`` or a bare host. It only checks
  for ``[...]:`` and a single ``:``; anything else is taken as a host
  without port. A bare IPv6 literal is therefore accepted as a host but is
  never split, since its colons cannot be told apart from a port separator.
* [combine_host_port()][nodeaddr.utils.text.combine_host_port] is the
  inverse: ``host:port``, ``[ipv6]:port`` or ``*:port``.

Examples:
    ```python
    split_host_port("[::1]:1186")   # HostPort(host='::1', service='1186')
    split_host_port("mgmd:1186")    # HostPort(host='mgmd', service='1186')
    combine_host_port("::1", 1186)  # '[::1]:1186'
    format_address(AddressFamily.INET6, expand_ipv4(bytes([10, 0, 0, 1])))
    # '10.0.0.1'
    ```
"""

from __future__ import annotations

import logging
import socket
from typing import NamedTuple

from nodeaddr.core.exceptions import FormatError
from nodeaddr.models import Address128, AddressFamily, HostPort
from nodeaddr.models._validation import (
    validate_capacity,
    validate_instance,
    validate_non_negative_int,
)
from nodeaddr.models.constants import (
    ADDR_STRLEN,
    HOST_CAPACITY,
    MAPPED_IPV4_TEXT_PREFIX,
    NULL_ADDRESS,
    PORT_MAX,
    SERVICE_CAPACITY,
)


logger = logging.getLogger(__name__)


class FormattedAddress(NamedTuple):
    """Outcome of [render_address()][nodeaddr.utils.text.render_address].

    Attributes:
        text: The rendered address, or the (possibly truncated) ``null``
            sentinel.
        is_null: True when ``text`` is the sentinel.
    """

    text: str
    is_null: bool


def format_numeric(family: int, address: bytes) -> str:
    """Render a packed address in numeric presentation form (no reverse DNS).

    Raises:
        OSError: If the platform formatter rejects the address.
        ValueError: If the address length does not match the family.
    """
    return socket.inet_ntop(family, address)


def render_address(
    family: int,
    address: bytes | Address128,
    capacity: int = ADDR_STRLEN,
) -> FormattedAddress:
    """Render *address* as text, falling back to the ``null`` sentinel.

    IPv6 text starting with ``::ffff:`` is stripped to the bare
    dotted-decimal tail. The full rendered text must fit in *capacity*,
    otherwise the rendering counts as failed.

    Args:
        family: ``AF_INET``, ``AF_INET6``, or anything else (renders as the
            sentinel).
        address: Packed address bytes, or an
            [Address128][nodeaddr.models.address.Address128].
        capacity: Destination buffer size, at least 1.

    Raises:
        ValueError: If *capacity* is below 1.
    """
    validate_capacity(capacity, "capacity")
    if isinstance(address, Address128):
        address = address.packed

    if family in (AddressFamily.INET, AddressFamily.INET6):
        try:
            text = format_numeric(family, address)
        except (OSError, ValueError, TypeError) as e:
            logger.debug("format_failed family=%s error=%s", family, e)
        else:
            if len(text) < capacity:
                if family == AddressFamily.INET6 and text.startswith(MAPPED_IPV4_TEXT_PREFIX):
                    text = text[len(MAPPED_IPV4_TEXT_PREFIX) :]
                return FormattedAddress(text, is_null=False)
            logger.debug("format_overflow length=%d capacity=%d", len(text), capacity)

    return FormattedAddress(NULL_ADDRESS[: capacity - 1], is_null=True)


def format_address(
    family: int,
    address: bytes | Address128,
    capacity: int = ADDR_STRLEN,
) -> str:
    """Render *address* as text; unrenderable input yields ``"null"``.

    See [render_address()][nodeaddr.utils.text.render_address] for the rules.
    """
    return render_address(family, address, capacity).text


def _check_fits(value: str, capacity: int, name: str) -> None:
    if len(value) >= capacity:
        raise FormatError(f"{name} does not fit in {capacity} bytes: {value!r}")


def split_host_port(
    text: str,
    host_capacity: int = HOST_CAPACITY,
    service_capacity: int = SERVICE_CAPACITY,
) -> HostPort:
    """Split a ``host[:port]`` string into host and service.

    Rules, in order:

    1. ``[host]`` or ``[host]:service``: the bracketed host must contain a
       colon (an IPv6 literal), and only ``:`` or the end of input may
       follow the closing bracket.
    2. Exactly one colon: ``host:service``.
    3. Otherwise the whole input is the host and the service is empty.

    Args:
        text: Input string.
        host_capacity: Host buffer size, at least 1.
        service_capacity: Service buffer size, at least 1.

    Returns:
        [HostPort][nodeaddr.models.address.HostPort] with a non-empty host.

    Raises:
        FormatError: If the input is malformed, the host is empty, or a
            part does not fit its buffer.
        ValueError: If a capacity is below 1.
    """
    validate_instance(text, str, "text")
    validate_capacity(host_capacity, "host_capacity")
    validate_capacity(service_capacity, "service_capacity")

    if text.startswith("["):
        closing = text.find("]")
        if closing < 0:
            raise FormatError(f"Missing closing bracket: {text!r}")
        rest = text[closing + 1 :]
        if rest and not rest.startswith(":"):
            raise FormatError(f"Unexpected text after closing bracket: {text!r}")
        host = text[1:closing]
        service = rest[1:]
        if ":" not in host:
            raise FormatError(f"Bracketed host is not an IPv6 address: {text!r}")
    else:
        head, sep, tail = text.partition(":")
        if sep and ":" not in tail:
            host, service = head, tail
        else:
            host, service = text, ""

    if not host:
        raise FormatError(f"Empty host: {text!r}")
    _check_fits(host, host_capacity, "host")
    _check_fits(service, service_capacity, "service")
    return HostPort(host, service)


def combine_host_port(host: str | None, port: int, capacity: int | None = None) -> str:
    """Combine a host and port into ``host:port`` or ``[host]:port``.

    A missing host renders as the wildcard ``*:port``; a host containing a
    colon is bracketed.

    Args:
        host: Hostname or address literal, or ``None``.
        port: Port number, 0-65535.
        capacity: Destination buffer size. The result is truncated to
            ``capacity - 1`` characters; ``None`` means unbounded.

    Raises:
        ValueError: If the port is out of range or *capacity* is below 1.
    """
    validate_non_negative_int(port, "port")
    if port > PORT_MAX:
        raise ValueError(f"port must be at most {PORT_MAX}, got {port}")

    if host is None:
        combined = f"*:{port}"
    elif ":" not in host:
        combined = f"{host}:{port}"
    else:
        combined = f"[{host}]:{port}"

    if capacity is not None:
        validate_capacity(capacity, "capacity")
        combined = combined[: capacity - 1]
    return combined


__all__ = [
    "FormattedAddress",
    "combine_host_port",
    "format_address",
    "format_numeric",
    "render_address",
    "split_host_port",
]
