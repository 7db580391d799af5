# topmark:header:start
#
#   project      : Nest
#   file         : __init__.py
#   file_relpath : src/nest/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nest command-line interface (Click)."""
