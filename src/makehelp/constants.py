# topmark:header:start
#
#   project      : MakeHelp
#   file         : constants.py
#   file_relpath : src/makehelp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    MAKEHELP_VERSION: str = get_version("makehelp")
except PackageNotFoundError:  # running from a source checkout
    MAKEHELP_VERSION = "0.0.0"

USAGE_LINE: str = "make [<target>...] [<ENV_VAR>=<value>...]"

NO_DOCUMENTATION_NOTICE: str = "No documentation available."

HELP_TITLE: str = "Makefile Help"

# Config file names, in lookup order:
CONFIG_FILE_NAME: str = "makehelp.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: tuple[str, ...] = ("tool", "makehelp")

LOG_LEVEL_ENV_VAR: str = "MAKEHELP_LOG_LEVEL"
