"""RESTful capability: list/create/get/update/delete paths for any route.

The free functions work on anything satisfying the RouteNode protocol.
RestfulMixin exposes the same operations as attributes for dotted call
sites (``ApiRoutes.users.get(5)``). Neither ever builds a new route; they
only render strings. Use ``join``/``with_id`` to keep descending.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from restroute._join import join_segments, render_segment

if TYPE_CHECKING:
    from restroute._types import Identifier, RouteNode

logger = logging.getLogger("restroute")


def collection_path(node: RouteNode) -> str:
    """Path of the collection: the node's base path."""
    return node.base_path


def item_path(node: RouteNode, identifier: Identifier) -> str:
    """Path of one item: ``identifier`` appended to the node's full path.

    Unlike ``with_id`` this always appends, even when the node already
    carries a sub-path. An identifier that renders empty returns ``path``.
    """
    segment = render_segment(identifier)
    if not segment:
        logger.debug("empty identifier for item path, keeping %r", node.path)
        return node.path
    return join_segments(node.path, segment)


class RestfulMixin:
    """Adds conventional REST endpoint paths to a route type.

    ``list`` and ``create`` share a value; they differ only in the HTTP verb
    the caller pairs them with. Same for ``get``, ``update`` and ``delete``.
    """

    __slots__ = ()

    base_path: str
    path: str

    @property
    def list(self) -> str:
        return collection_path(self)

    @property
    def create(self) -> str:
        return collection_path(self)

    def get(self, identifier: Identifier) -> str:
        return item_path(self, identifier)

    def update(self, identifier: Identifier) -> str:
        return item_path(self, identifier)

    def delete(self, identifier: Identifier) -> str:
        return item_path(self, identifier)


RestfulCapability = RestfulMixin
