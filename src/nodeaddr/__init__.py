r"""nodeaddr -- host address resolution and canonical text forms for node links.

Resolves hostnames and address literals to one preferred 128-bit address,
renders addresses back to canonical text, and splits or combines
``host:port`` strings, including bracketed IPv6 literals.

Packages depend strictly downward:

```text
          utils            Resolver, IPv4 mapping, text codec
            |
          core             Configuration, exceptions, logging
            |
         models            Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from nodeaddr import resolve_address``) use lazy
    loading and resolve on first access.

Examples:
    ```python
    from nodeaddr import AddressFamily, format_address, resolve_address

    addr = resolve_address("127.0.0.1")
    format_address(AddressFamily.INET6, addr)  # '127.0.0.1'
    ```
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nodeaddr")

__all__ = [
    "Address128",
    "AddressFamily",
    "FormatError",
    "FormattedAddress",
    "HostPort",
    "NodeAddrConfig",
    "NodeAddrError",
    "ResolutionError",
    "ResolvedCandidate",
    "combine_host_port",
    "expand_ipv4",
    "format_address",
    "render_address",
    "resolve_address",
    "resolve_all",
    "select_preferred",
    "split_host_port",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Address128": ("nodeaddr.models", "Address128"),
    "AddressFamily": ("nodeaddr.models", "AddressFamily"),
    "HostPort": ("nodeaddr.models", "HostPort"),
    "ResolvedCandidate": ("nodeaddr.models", "ResolvedCandidate"),
    "FormatError": ("nodeaddr.core", "FormatError"),
    "NodeAddrConfig": ("nodeaddr.core", "NodeAddrConfig"),
    "NodeAddrError": ("nodeaddr.core", "NodeAddrError"),
    "ResolutionError": ("nodeaddr.core", "ResolutionError"),
    "FormattedAddress": ("nodeaddr.utils", "FormattedAddress"),
    "combine_host_port": ("nodeaddr.utils", "combine_host_port"),
    "expand_ipv4": ("nodeaddr.utils", "expand_ipv4"),
    "format_address": ("nodeaddr.utils", "format_address"),
    "render_address": ("nodeaddr.utils", "render_address"),
    "resolve_address": ("nodeaddr.utils", "resolve_address"),
    "resolve_all": ("nodeaddr.utils", "resolve_all"),
    "select_preferred": ("nodeaddr.utils", "select_preferred"),
    "split_host_port": ("nodeaddr.utils", "split_host_port"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'nodeaddr' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
