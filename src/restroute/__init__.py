"""restroute: typed REST path builder.

All public types are exported from this module for flat imports:

    from restroute import RootRoute, ChildRoute, RestfulMixin
"""

__version__ = "0.1.0"

# Errors
from restroute._errors import RouteError, UnimplementedDerivationError

# PathJoiner
from restroute._join import encode_component, encode_query, join_segments, render_segment

# RESTful capability
from restroute._restful import RestfulCapability, RestfulMixin, collection_path, item_path

# Route nodes
from restroute._route import BaseRoute, ChildRoute, RootRoute, SimpleChildRoute, SimpleRoute
from restroute._types import Identifier, RouteNode

__all__ = [
    # Protocols
    "RouteNode",
    "Identifier",
    # PathJoiner
    "join_segments",
    "encode_query",
    "encode_component",
    "render_segment",
    # Routes
    "BaseRoute",
    "RootRoute",
    "ChildRoute",
    "SimpleRoute",
    "SimpleChildRoute",
    # RESTful capability
    "RestfulMixin",
    "RestfulCapability",
    "collection_path",
    "item_path",
    # Errors
    "RouteError",
    "UnimplementedDerivationError",
]
