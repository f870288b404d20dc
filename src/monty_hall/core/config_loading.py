"""Load simulation config files.

JSON is always supported. YAML is supported when PyYAML is installed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")


def load_config_mapping(path: str | Path) -> dict[str, Any]:
    """Load one JSON/YAML config file whose root is a mapping.

    Parameters
    ----------
    path : str | pathlib.Path
        Config file path. Supported suffixes are `.json`, `.yaml`, and `.yml`.

    Returns
    -------
    dict[str, Any]
        Parsed config mapping. An empty YAML document yields ``{}``.

    Raises
    ------
    ValueError
        If the suffix is unsupported or the root is not a mapping.
    ImportError
        If a YAML file is given without PyYAML installed.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in SUPPORTED_CONFIG_SUFFIXES:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise ValueError(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    text = config_path.read_text(encoding="utf-8")
    if suffix == ".json":
        raw = json.loads(text)
    else:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - exercised only without pyyaml
            raise ImportError(
                "YAML config loading requires PyYAML. Install with `pip install monty-hall[yaml]`."
            ) from exc
        raw = yaml.safe_load(text)
        if raw is None:
            raw = {}

    if not isinstance(raw, dict):
        raise ValueError("config root must be a JSON/YAML object")
    return raw


__all__ = ["SUPPORTED_CONFIG_SUFFIXES", "load_config_mapping"]
