"""
Pytest configuration and shared fixtures for nodeaddr tests.

Provides:
- Packed address constants for IPv4, global IPv6 and link-local IPv6
- Candidate fixtures for preference selection tests
- ``addrinfo()`` helper building ``socket.getaddrinfo`` result tuples
"""

import socket
from typing import Any

import pytest

from nodeaddr.models import AddressFamily, ResolvedCandidate


LOOPBACK_V4 = bytes([127, 0, 0, 1])
PRIVATE_V4 = bytes([10, 0, 0, 7])
GLOBAL_V6 = socket.inet_pton(socket.AF_INET6, "2001:db8::10")
OTHER_GLOBAL_V6 = socket.inet_pton(socket.AF_INET6, "2001:db8::20")
LINK_LOCAL_V6 = socket.inet_pton(socket.AF_INET6, "fe80::200:f8ff:fe21:67cf")


def addrinfo(host: str, *, scope_id: int = 0) -> tuple[Any, ...]:
    """Build one ``getaddrinfo`` result tuple for a numeric host."""
    if ":" in host:
        sockaddr: tuple[Any, ...] = (host, 0, 0, scope_id)
        return (socket.AF_INET6, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", sockaddr)
    return (socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", (host, 0))


# ============================================================================
# Candidate Fixtures
# ============================================================================


@pytest.fixture
def ipv4_candidate() -> ResolvedCandidate:
    return ResolvedCandidate(AddressFamily.INET, LOOPBACK_V4)


@pytest.fixture
def second_ipv4_candidate() -> ResolvedCandidate:
    return ResolvedCandidate(AddressFamily.INET, PRIVATE_V4)


@pytest.fixture
def ipv6_candidate() -> ResolvedCandidate:
    return ResolvedCandidate(AddressFamily.INET6, GLOBAL_V6)


@pytest.fixture
def second_ipv6_candidate() -> ResolvedCandidate:
    return ResolvedCandidate(AddressFamily.INET6, OTHER_GLOBAL_V6)


@pytest.fixture
def scoped_ipv6_candidate() -> ResolvedCandidate:
    return ResolvedCandidate(AddressFamily.INET6, LINK_LOCAL_V6, scope_id=2)
