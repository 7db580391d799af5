# topmark:header:start
#
#   project      : Nest
#   file         : __init__.py
#   file_relpath : src/nest/repository/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repository domain types."""

from __future__ import annotations

from nest.repository.model import Mirror, Repository

__all__: list[str] = [
    "Mirror",
    "Repository",
]
