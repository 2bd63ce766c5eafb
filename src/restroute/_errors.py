"""Error types raised by restroute."""

from __future__ import annotations


class RouteError(Exception):
    """Base class for errors raised by restroute."""


class UnimplementedDerivationError(RouteError, NotImplementedError):
    """A route type was asked to derive itself without overriding the hook.

    Concrete route types must override ``derive_with_segment`` to rebuild an
    instance of their own type. This is a programming error in the route
    declaration, not a data error, so it is never caught internally.
    """

    def __init__(self, route_type: type) -> None:
        self.route_type = route_type
        name = route_type.__qualname__
        super().__init__(
            f"{name} must override derive_with_segment(sub_path) "
            f"to return a new {name} carrying the given sub-path"
        )
