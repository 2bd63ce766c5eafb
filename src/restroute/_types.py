"""Core protocol and type aliases for restroute.

RouteNode is the structural contract every route satisfies: something with a
base path and a full path. The RESTful helpers and PathJoiner-backed
operations only ever rely on these two attributes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Anything that renders to a single path segment. Integers render in decimal,
# booleans as true/false, None as the empty string ("no segment"), anything
# else through str().
type Identifier = object


@runtime_checkable
class RouteNode(Protocol):
    """Anything that has a base path and a full path.

    ``base_path`` is the path before any appended sub-path or identifier.
    ``path`` is ``base_path`` optionally followed by ``/`` and one more
    non-empty segment.
    """

    @property
    def base_path(self) -> str: ...

    @property
    def path(self) -> str: ...
