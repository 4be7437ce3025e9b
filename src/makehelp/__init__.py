# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp package.

MakeHelp renders the documentation extracted from Makefiles (targets, aliases,
variables and file comments) into five output formats: an includable Makefile
fragment, terminal text, HTML, Markdown and JSON. All formats are produced from
one immutable documentation model.
"""

from __future__ import annotations
