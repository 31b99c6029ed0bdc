"""YAML output utilities."""
from __future__ import annotations

from typing import Any

import yaml


# Custom representer for multiline strings - use literal block style (|)
def _str_representer(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    """Represent multiline strings with literal block style."""
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


yaml.add_representer(str, _str_representer, Dumper=yaml.SafeDumper)


def dump_yaml_string(data: Any, sort_keys: bool = True) -> str:
    """Dump data to YAML string."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=sort_keys,
        allow_unicode=True,
    )


__all__ = [
    "dump_yaml_string",
]
