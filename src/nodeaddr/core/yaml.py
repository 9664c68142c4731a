"""YAML configuration loading for nodeaddr.

Provides safe YAML file loading using ``yaml.safe_load`` to prevent
arbitrary code execution from untrusted YAML content. Used by
[NodeAddrConfig.from_yaml()][nodeaddr.core.config.NodeAddrConfig.from_yaml].

Examples:
    ```python
    from nodeaddr.core.yaml import load_yaml

    config = load_yaml("config/nodeaddr.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary. Returns an empty dict
        if the file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.

    Warning:
        This function does not validate the structure of the returned
        dictionary. Pass it to
        [NodeAddrConfig.from_dict()][nodeaddr.core.config.NodeAddrConfig.from_dict]
        for schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
