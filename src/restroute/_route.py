"""Route nodes: root routes, child routes, and type-preserving derivation.

Every route is a frozen dataclass. "Changing" a route means deriving a new
instance through ``derive_with_segment``, which each concrete route type
overrides to rebuild its own type. That is how ``UserRoute(...)(1)`` stays a
``UserRoute`` and keeps its resource-specific endpoints::

    class UserRoute(RootRoute, RestfulMixin):
        def __init__(self, sub_path: str = "") -> None:
            super().__init__("users", sub_path)

        @cached_property
        def posts(self) -> PostsRoute:
            return PostsRoute(self)

        def derive_with_segment(self, sub_path: str) -> UserRoute:
            return UserRoute(sub_path)

    UserRoute()(1).posts(2).path  # "users/1/posts/2"
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self, final

from restroute._errors import UnimplementedDerivationError
from restroute._join import encode_query, join_segments, render_segment
from restroute._types import RouteNode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from restroute._types import Identifier

logger = logging.getLogger("restroute")


class BaseRoute(ABC):
    """The RouteNode capability: ``join`` and ``with_query_params``.

    Subclasses provide ``base_path`` and ``path``.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def base_path(self) -> str: ...

    @property
    @abstractmethod
    def path(self) -> str: ...

    def join(self, segment: str) -> str:
        """Append one ad hoc segment and return the rendered string.

        The result is a plain string, not a route: use it for leaf endpoints
        such as ``featured`` or ``login/token``.
        """
        if not segment:
            return self.path
        return join_segments(self.path, segment)

    def with_query_params(self, params: Mapping[str, Any]) -> str:
        """Return ``path`` followed by an encoded query string.

        An empty mapping returns ``path`` unchanged (no dangling ``?``).
        """
        if not params:
            return self.path
        return f"{self.path}?{encode_query(params)}"

    def __str__(self) -> str:
        return self.path


class _DerivingRoute(BaseRoute):
    """Identifier handling shared by root and child routes.

    Subclasses hold a ``sub_path`` field and implement ``_render`` (the path
    this route would have with a given sub-path).
    """

    __slots__ = ()

    sub_path: str

    @abstractmethod
    def _render(self, sub_path: str) -> str: ...

    @property
    def path(self) -> str:
        return self._render(self.sub_path)

    def derive_with_segment(self, sub_path: str) -> Self:
        """Return a new route of this exact type with ``sub_path`` replaced.

        Concrete route types must override this; the base implementation
        fails fast because it cannot know which constructor to call.

        Raises:
            UnimplementedDerivationError: If the concrete type does not
                override this method.
        """
        logger.debug("%s has no derive_with_segment override", type(self).__qualname__)
        raise UnimplementedDerivationError(type(self))

    def with_id(self, identifier: Identifier) -> Self:
        """Return a new route of this type carrying ``identifier``.

        An identifier that renders empty returns this route unchanged.
        """
        segment = render_segment(identifier)
        if not segment:
            logger.debug("empty identifier on %r, keeping path %r", self, self.path)
            return self
        return self.derive_with_segment(segment)

    def id(self, identifier: Identifier) -> str:
        """Shorthand for ``with_id(identifier).path``.

        Renders directly without building a new route, so it also works on
        route types that do not override ``derive_with_segment``.
        """
        segment = render_segment(identifier)
        if not segment:
            logger.debug("empty identifier on %r, keeping path %r", self, self.path)
            return self.path
        return self._render(segment)

    def __call__(self, identifier: Identifier) -> Self:
        return self.with_id(identifier)


@dataclass(frozen=True, slots=True)
class RootRoute(_DerivingRoute):
    """A route rooted at a fixed name, e.g. ``users`` or ``users/123``.

    ``base_path`` is always ``route_name``; ``path`` adds ``sub_path`` when set.
    """

    route_name: str
    sub_path: str = ""

    @property
    def base_path(self) -> str:
        return self.route_name

    def _render(self, sub_path: str) -> str:
        if not sub_path:
            return self.route_name
        return f"{self.route_name}/{sub_path}"


@dataclass(frozen=True, slots=True)
class ChildRoute[P: RouteNode](_DerivingRoute):
    """A route nested under a parent, e.g. ``users/1/posts``.

    The parent is shared, not copied, and its path is read every time
    ``base_path`` is computed. Derivations keep the same parent and
    ``route_name``; only ``sub_path`` changes.
    """

    parent: P
    route_name: str
    sub_path: str = ""

    @property
    def base_path(self) -> str:
        return join_segments(self.parent.path, self.route_name)

    def _render(self, sub_path: str) -> str:
        base = self.base_path
        if not sub_path:
            return base
        return join_segments(base, sub_path)


@final
@dataclass(frozen=True, slots=True)
class SimpleRoute(RootRoute):
    """A root route with no resource-specific endpoints.

    >>> search = SimpleRoute("search")
    >>> search(7).path
    'search/7'
    """

    def derive_with_segment(self, sub_path: str) -> SimpleRoute:
        return SimpleRoute(self.route_name, sub_path)


@final
@dataclass(frozen=True, slots=True)
class SimpleChildRoute[P: RouteNode](ChildRoute[P]):
    """A child route with no resource-specific endpoints.

    Handy for one-off nested segments::

        settings = SimpleChildRoute(users(1), "settings")
        settings("profile").path  # "users/1/settings/profile"
    """

    def derive_with_segment(self, sub_path: str) -> SimpleChildRoute[P]:
        return SimpleChildRoute(self.parent, self.route_name, sub_path)
