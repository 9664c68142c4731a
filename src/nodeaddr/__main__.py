"""CLI entry point for nodeaddr.

Exposes the library operations on the command line for checking how a
node address string will be interpreted.

Examples:
    ```bash
    python -m nodeaddr resolve localhost
    python -m nodeaddr split "[fe80::1]:1186"
    python -m nodeaddr combine ::1 --port 1186
    python -m nodeaddr format 00000000000000000000ffff7f000001
    python -m nodeaddr --config config/nodeaddr.yaml --log-level DEBUG resolve mgmd
    ```
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from nodeaddr.core.config import LoggingConfig, NodeAddrConfig
from nodeaddr.core.exceptions import ConfigurationError, FormatError, ResolutionError
from nodeaddr.core.logger import Logger, StructuredFormatter, format_kv_pairs
from nodeaddr.core.yaml import load_yaml
from nodeaddr.models import AddressFamily
from nodeaddr.models.constants import IPV4_LENGTH, IPV6_LENGTH, PORT_MAX
from nodeaddr.utils import (
    combine_host_port,
    format_address,
    resolve_address,
    split_host_port,
)


CONFIG_PATH = Path("config") / "nodeaddr.yaml"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2

logger = Logger("cli")


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= port <= PORT_MAX:
        raise argparse.ArgumentTypeError(f"port out of range 0-{PORT_MAX}: {port}")
    return port


def _hex_address(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex address: {value!r}") from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="nodeaddr",
        description="Node address resolution and formatting",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_PATH,
        help=f"Config path (default: {CONFIG_PATH})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from config, INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Resolve a host to its preferred address")
    resolve.add_argument("host", help="Hostname or address literal")

    split = commands.add_parser("split", help="Split host[:port] into host and service")
    split.add_argument("text", help="host, host:port, [ipv6] or [ipv6]:port")

    combine = commands.add_parser("combine", help="Combine a host and port")
    combine.add_argument("host", nargs="?", default=None, help="Host (omit for wildcard)")
    combine.add_argument("--port", type=_port, required=True, help="Port number")

    fmt = commands.add_parser("format", help="Format a packed address given in hex")
    fmt.add_argument("address", type=_hex_address, help="4 or 16 bytes as hex")

    return parser.parse_args(argv)


def setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger with structured formatting.

    Installs a ``StructuredFormatter`` on the root handler so that output
    from both ``Logger`` and the plain module loggers of the utils layer is
    unified as ``level name message key=value ...``.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, config.level))


def load_config(path: Path) -> NodeAddrConfig:
    """Load the configuration, falling back to defaults if the file is missing.

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation.
    """
    if not path.exists():
        return NodeAddrConfig()
    try:
        return NodeAddrConfig.from_dict(load_yaml(str(path)))
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigurationError(f"Invalid config {path}: {e}") from e


def run_command(args: argparse.Namespace, config: NodeAddrConfig, log: Logger) -> int:
    """Run the selected subcommand and print its result.

    Returns:
        Exit code: 0 for success, 1 for a resolution or format failure.
    """
    capacity = config.capacity

    if args.command == "resolve":
        try:
            address = resolve_address(args.host, config=config)
        except ResolutionError as e:
            log.error("resolve_failed", host=args.host, error=str(e))
            return EXIT_FAILURE
        print(format_address(AddressFamily.INET6, address, capacity.address))

    elif args.command == "split":
        try:
            host_port = split_host_port(args.text, capacity.host, capacity.service)
        except FormatError as e:
            log.error("split_failed", text=args.text, error=str(e))
            return EXIT_FAILURE
        print(format_kv_pairs(host_port._asdict(), prefix=""))

    elif args.command == "combine":
        print(combine_host_port(args.host, args.port, capacity.address))

    elif args.command == "format":
        length = len(args.address)
        if length == IPV4_LENGTH:
            family = AddressFamily.INET
        elif length == IPV6_LENGTH:
            family = AddressFamily.INET6
        else:
            family = AddressFamily.UNSPEC
        print(format_address(family, args.address, capacity.address))

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, load config, run the subcommand."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        logger.error("config_invalid", path=str(args.config), error=str(e))
        return EXIT_CONFIG

    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    log = Logger("cli", json_output=True) if config.logging.json_output else logger
    log.debug("command_started", command=args.command)
    return run_command(args, config, log)


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
