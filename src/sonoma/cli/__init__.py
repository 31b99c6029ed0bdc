"""
Sonoma CLI package.

Commands are discovered from domain subfolders (config/, ...). Each command
module exposes ``SUMMARY``, ``register_args(parser)`` and
``main(args, store) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._output import OutputFormatter, format_value
from ._args import add_json_flag, add_yes_flag

__all__ = [
    "OutputFormatter",
    "format_value",
    "add_json_flag",
    "add_yes_flag",
]
