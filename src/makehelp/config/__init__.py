# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for MakeHelp: logging setup and TOML config file loading.

Submodules are imported explicitly (``makehelp.config.logging``,
``makehelp.config.io``) so that importing the logging helpers never pulls in the
renderers.
"""

from __future__ import annotations
