"""
Unit tests for utils.dns module.

Tests:
- select_preferred() precedence rules
- resolve_all() conversion of getaddrinfo output
- resolve_address() success paths, failure collapsing and resolver flags
"""

import logging
import socket
from unittest.mock import MagicMock, patch

import pytest

from nodeaddr.core.config import NodeAddrConfig
from nodeaddr.core.exceptions import ResolutionError
from nodeaddr.models import Address128, AddressFamily, ResolvedCandidate
from nodeaddr.utils.dns import resolve_address, resolve_all, select_preferred, to_address128
from nodeaddr.utils.mapping import expand_ipv4
from tests.conftest import GLOBAL_V6, LINK_LOCAL_V6, LOOPBACK_V4, addrinfo


# =============================================================================
# select_preferred() Tests
# =============================================================================


class TestSelectPreferredIpv4:
    """The first IPv4 candidate wins wherever it appears."""

    def test_single_ipv4(self, ipv4_candidate: ResolvedCandidate) -> None:
        assert select_preferred([ipv4_candidate]) is ipv4_candidate

    def test_ipv4_after_ipv6(
        self, ipv6_candidate: ResolvedCandidate, ipv4_candidate: ResolvedCandidate
    ) -> None:
        assert select_preferred([ipv6_candidate, ipv4_candidate]) is ipv4_candidate

    def test_ipv4_before_ipv6(
        self, ipv4_candidate: ResolvedCandidate, ipv6_candidate: ResolvedCandidate
    ) -> None:
        assert select_preferred([ipv4_candidate, ipv6_candidate]) is ipv4_candidate

    def test_ipv4_after_scoped_ipv6(
        self, scoped_ipv6_candidate: ResolvedCandidate, ipv4_candidate: ResolvedCandidate
    ) -> None:
        assert select_preferred([scoped_ipv6_candidate, ipv4_candidate]) is ipv4_candidate

    def test_first_of_several_ipv4(
        self,
        ipv6_candidate: ResolvedCandidate,
        ipv4_candidate: ResolvedCandidate,
        second_ipv4_candidate: ResolvedCandidate,
    ) -> None:
        candidates = [ipv6_candidate, ipv4_candidate, second_ipv4_candidate]
        assert select_preferred(candidates) is ipv4_candidate

    def test_stops_at_first_ipv4(self, ipv4_candidate: ResolvedCandidate) -> None:
        def candidates():
            yield ipv4_candidate
            pytest.fail("scan continued past the first IPv4 candidate")

        assert select_preferred(candidates()) is ipv4_candidate


class TestSelectPreferredIpv6:
    """Without IPv4, the first unscoped IPv6 candidate wins."""

    def test_single_ipv6(self, ipv6_candidate: ResolvedCandidate) -> None:
        assert select_preferred([ipv6_candidate]) is ipv6_candidate

    def test_first_of_several_ipv6(
        self, ipv6_candidate: ResolvedCandidate, second_ipv6_candidate: ResolvedCandidate
    ) -> None:
        assert select_preferred([ipv6_candidate, second_ipv6_candidate]) is ipv6_candidate

    def test_skips_scoped(
        self, scoped_ipv6_candidate: ResolvedCandidate, ipv6_candidate: ResolvedCandidate
    ) -> None:
        assert select_preferred([scoped_ipv6_candidate, ipv6_candidate]) is ipv6_candidate


class TestSelectPreferredNone:
    def test_empty(self) -> None:
        assert select_preferred([]) is None

    def test_only_scoped(self, scoped_ipv6_candidate: ResolvedCandidate) -> None:
        other = ResolvedCandidate(AddressFamily.INET6, LINK_LOCAL_V6, scope_id=5)
        assert select_preferred([scoped_ipv6_candidate, other]) is None


class TestToAddress128:
    def test_ipv4_is_expanded(self, ipv4_candidate: ResolvedCandidate) -> None:
        assert to_address128(ipv4_candidate) == expand_ipv4(LOOPBACK_V4)

    def test_ipv6_is_copied(self, ipv6_candidate: ResolvedCandidate) -> None:
        assert to_address128(ipv6_candidate) == Address128(GLOBAL_V6)


# =============================================================================
# resolve_all() Tests
# =============================================================================


class TestResolveAll:
    """resolve_all() wraps socket.getaddrinfo."""

    def test_preserves_order(self) -> None:
        entries = [addrinfo("2001:db8::10"), addrinfo("127.0.0.1")]
        with patch("socket.getaddrinfo", return_value=entries):
            result = resolve_all("node1")

        assert [c.family for c in result] == [AddressFamily.INET6, AddressFamily.INET]

    def test_passes_hints(self) -> None:
        with patch("socket.getaddrinfo", return_value=[]) as mock_gai:
            resolve_all("node1", flags=socket.AI_ADDRCONFIG)

        mock_gai.assert_called_once_with(
            "node1",
            None,
            socket.AF_UNSPEC,
            socket.SOCK_STREAM,
            socket.IPPROTO_TCP,
            socket.AI_ADDRCONFIG,
        )

    def test_skips_other_families(self) -> None:
        entries = [
            (socket.AF_UNIX, socket.SOCK_STREAM, 0, "", "/tmp/sock"),
            addrinfo("127.0.0.1"),
        ]
        with patch("socket.getaddrinfo", return_value=entries):
            result = resolve_all("node1")

        assert result == [ResolvedCandidate(AddressFamily.INET, LOOPBACK_V4)]

    def test_error_propagates(self) -> None:
        with (
            patch("socket.getaddrinfo", side_effect=socket.gaierror("Name or service not known")),
            pytest.raises(socket.gaierror),
        ):
            resolve_all("unknown_?host")


# =============================================================================
# resolve_address() Tests
# =============================================================================


class TestResolveAddressLiterals:
    """Numeric literals go through the real system resolver."""

    def test_ipv4_loopback(self) -> None:
        assert resolve_address("127.0.0.1") == expand_ipv4(bytes([127, 0, 0, 1]))

    def test_ipv4_literal(self) -> None:
        assert resolve_address("192.168.1.10").ipv4 == bytes([192, 168, 1, 10])

    @pytest.mark.parametrize(
        "literal",
        [
            "::1",
            "3ffe:1900:4545:3:200:f8ff:fe21:67cf",
            "fe80:0:0:0:200:f8ff:fe21:67cf",
            "fe80::200:f8ff:fe21:67cf",
        ],
    )
    def test_ipv6_literal(self, literal: str) -> None:
        result = resolve_address(literal)
        assert result == Address128(socket.inet_pton(socket.AF_INET6, literal))

    def test_overlong_label_fails_without_lookup(self) -> None:
        with pytest.raises(ResolutionError):
            resolve_address("y" * 255)


class TestResolveAddressSelection:
    """resolve_address() with a stubbed resolver."""

    def test_prefers_ipv4(self) -> None:
        entries = [addrinfo("2001:db8::10"), addrinfo("127.0.0.1")]
        with patch("socket.getaddrinfo", return_value=entries):
            result = resolve_address("dualstack")

        assert result == expand_ipv4(LOOPBACK_V4)

    def test_ipv6_only(self) -> None:
        entries = [
            addrinfo("fe80::200:f8ff:fe21:67cf%eth0", scope_id=2),
            addrinfo("2001:db8::10"),
        ]
        with patch("socket.getaddrinfo", return_value=entries):
            result = resolve_address("v6host")

        assert result == Address128(GLOBAL_V6)
        assert result.is_ipv4_mapped is False

    def test_custom_resolver(self, ipv6_candidate: ResolvedCandidate) -> None:
        resolver = MagicMock(return_value=[ipv6_candidate])
        result = resolve_address("node1", resolver=resolver)

        assert result == Address128(GLOBAL_V6)
        resolver.assert_called_once_with(
            "node1",
            family=socket.AF_UNSPEC,
            socktype=socket.SOCK_STREAM,
            protocol=socket.IPPROTO_TCP,
            flags=0,
        )

    def test_addrconfig_from_config(self, ipv4_candidate: ResolvedCandidate) -> None:
        resolver = MagicMock(return_value=[ipv4_candidate])
        config = NodeAddrConfig.from_dict({"resolver": {"addrconfig": True}})
        resolve_address("node1", resolver=resolver, config=config)

        assert resolver.call_args.kwargs["flags"] == socket.AI_ADDRCONFIG

    def test_logs_selection(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            caplog.at_level(logging.DEBUG, logger="nodeaddr.utils.dns"),
            patch("socket.getaddrinfo", return_value=[addrinfo("127.0.0.1")]),
        ):
            resolve_address("node1")

        assert "resolve_selected" in caplog.text
        assert "family=INET" in caplog.text


class TestResolveAddressFailure:
    """Every failure collapses into ResolutionError."""

    @pytest.mark.parametrize(
        "error",
        [
            socket.gaierror(socket.EAI_NONAME, "Name or service not known"),
            socket.gaierror(socket.EAI_AGAIN, "Temporary failure in name resolution"),
            OSError("resolver unavailable"),
            UnicodeError("label too long"),
            ValueError("embedded null character"),
        ],
    )
    def test_resolver_errors(self, error: Exception) -> None:
        with (
            patch("socket.getaddrinfo", side_effect=error),
            pytest.raises(ResolutionError) as exc_info,
        ):
            resolve_address("unknown_?host")

        assert exc_info.value.__cause__ is error

    def test_empty_result(self) -> None:
        with (
            patch("socket.getaddrinfo", return_value=[]),
            pytest.raises(ResolutionError, match="No usable address"),
        ):
            resolve_address("node1")

    def test_only_scoped_ipv6(self) -> None:
        entries = [addrinfo("fe80::200:f8ff:fe21:67cf%eth0", scope_id=2)]
        with (
            patch("socket.getaddrinfo", return_value=entries),
            pytest.raises(ResolutionError, match="No usable address"),
        ):
            resolve_address("fe80::200:f8ff:fe21:67cf%eth0")

    def test_unexpected_exception_propagates(self) -> None:
        with (
            patch("socket.getaddrinfo", side_effect=RuntimeError("unexpected")),
            pytest.raises(RuntimeError, match="unexpected"),
        ):
            resolve_address("node1")

    def test_logs_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            caplog.at_level(logging.DEBUG, logger="nodeaddr.utils.dns"),
            patch("socket.getaddrinfo", side_effect=socket.gaierror("lookup failed")),
            pytest.raises(ResolutionError),
        ):
            resolve_address("node1")

        assert "resolve_failed" in caplog.text
