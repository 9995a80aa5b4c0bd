"""Wire models for the GraphQL adapter."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class GraphQLErrorItem(BaseModel):
    """One entry of a GraphQL ``errors`` array."""

    model_config = ConfigDict(extra="allow")

    message: str
    path: list[str | int] | None = None


class GraphQLResponse(BaseModel):
    """Top-level GraphQL response body."""

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorItem] | None = None


class RemoteCallError(Exception):
    """A remote call did not produce a usable result.

    Raised inside the performer; the effect middleware turns it into a
    failure completion, so it never reaches the dispatching caller.
    """


class RemoteTransportError(RemoteCallError):
    """The request did not get a successful HTTP answer. Worth retrying."""
