"""Interactive CLI helpers."""
from __future__ import annotations

import os
from typing import Mapping, Optional

ASSUME_YES_ENV = "SONOMA_ASSUME_YES"


def confirm(
    message: str,
    default: bool = False,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Prompt the user for a yes/no answer.

    ``SONOMA_ASSUME_YES`` (any non-empty value) answers yes without prompting.
    End of input and unrecognized answers fall back to ``default``.
    """
    env = os.environ if environ is None else environ
    prompt_suffix = "[Y/n]" if default else "[y/N]"
    prompt = f"{message} {prompt_suffix} "

    if env.get(ASSUME_YES_ENV):
        print(message)
        return True

    try:
        resp = input(prompt).strip().lower()
    except EOFError:
        resp = ""

    if resp in ("y", "yes"):
        return True
    if resp in ("n", "no"):
        return False
    return bool(default)


__all__ = ["ASSUME_YES_ENV", "confirm"]
