"""nodeaddr exception hierarchy.

Provides typed exceptions for the failure categories of the resolver and
the text codec, so callers catch exactly what they can handle.

Exception hierarchy:

```text
NodeAddrError (base -- never raised directly)
├── ConfigurationError   -- bad YAML, config validation failure
├── ResolutionError      -- resolver failed or returned nothing usable
└── FormatError          -- host[:port] grammar violation or truncation
```

Note:
    Rendering an address as text never raises one of these: unrenderable
    input produces the ``null`` sentinel instead. Precondition violations
    (wrong byte lengths, capacities below 1) raise ``ValueError`` or
    ``TypeError`` like the models layer.

See Also:
    [resolve_address()][nodeaddr.utils.dns.resolve_address]: Raises
        [ResolutionError][nodeaddr.core.exceptions.ResolutionError].
    [split_host_port()][nodeaddr.utils.text.split_host_port]: Raises
        [FormatError][nodeaddr.core.exceptions.FormatError].
"""

from __future__ import annotations


class NodeAddrError(Exception):
    """Base exception for all nodeaddr errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(NodeAddrError):
    """Invalid or missing configuration (YAML syntax, schema validation).

    See Also:
        [NodeAddrConfig][nodeaddr.core.config.NodeAddrConfig]: The validated
            configuration model.
    """


class ResolutionError(NodeAddrError):
    """A host could not be resolved to a usable address.

    Raised both when the system resolver fails (unknown host, no data,
    transient failure) and when it succeeds without returning an IPv4
    address or an unscoped IPv6 address. Carries no structured detail;
    the underlying resolver error, if any, is chained as ``__cause__``.
    """


class FormatError(NodeAddrError):
    """A ``host[:port]`` string is malformed or does not fit its buffer.

    Truncation is always treated as failure, never silently accepted.
    """
