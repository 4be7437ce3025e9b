# topmark:header:start
#
#   project      : MakeHelp
#   file         : color.py
#   file_relpath : src/makehelp/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for the MakeHelp CLI.

The renderers take a plain ``use_color`` boolean; this module decides it from
the ``--color`` flag, the configuration file, the environment and the output
stream. It does not depend on Click.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from makehelp.config.logging import get_logger

if TYPE_CHECKING:
    from makehelp.config.logging import MakehelpLogger

logger: MakehelpLogger = get_logger(__name__)

# Formats whose consumers are programs, never terminals
MACHINE_FORMATS: frozenset[str] = frozenset({"json"})


class ColorMode(str, Enum):
    """User intent for colorized output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    config_color: bool | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: ``json`` never uses color.
        2. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        3. **Config file**: ``color = true|false`` when set.
        4. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        5. **Auto**: whether stdout is a TTY.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value;
            None means "not provided".
        output_format (str | None): Canonical output format name.
        config_color (bool | None): ``color`` from the configuration file.
        stdout_isatty (bool | None): Optional override for TTY detection (pass
            False when writing to a file). When None, ``sys.stdout.isatty()``
            is consulted.

    Returns:
        bool: True if color should be enabled.
    """
    if output_format and output_format.lower() in MACHINE_FORMATS:
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    if config_color is not None:
        return config_color

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: stdout_isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
