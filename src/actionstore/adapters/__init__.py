"""Adapters for external services used as effect performers.

Usage:
    from actionstore.adapters import GraphQLPerformer, graphql_performer
"""

from actionstore.adapters.graphql import COUNT_DOCUMENTS, GraphQLPerformer, graphql_performer
from actionstore.adapters.models import (
    GraphQLErrorItem,
    GraphQLResponse,
    RemoteCallError,
    RemoteTransportError,
)

__all__ = [
    "COUNT_DOCUMENTS",
    "GraphQLErrorItem",
    "GraphQLPerformer",
    "GraphQLResponse",
    "RemoteCallError",
    "RemoteTransportError",
    "graphql_performer",
]
