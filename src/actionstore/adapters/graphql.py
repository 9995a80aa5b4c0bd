"""GraphQL adapter implementing the EffectPerformer protocol with httpx.

Each ``remote`` effect request names an operation; the adapter posts the
matching GraphQL document and returns ``data[operation]``.

Usage:
    from actionstore.adapters.graphql import GraphQLPerformer
    from actionstore.config import RemoteSettings

    performer = GraphQLPerformer(RemoteSettings(url="http://localhost:4000/"))
    store = create_store(performer=RoutingPerformer({"remote": performer}))
    store.dispatch(FetchCount())
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from actionstore.adapters.models import GraphQLResponse, RemoteCallError, RemoteTransportError
from actionstore.config import RemoteSettings
from actionstore.count.actions import GET_COUNT, INC_COUNT
from actionstore.effects.models import EffectRequest
from actionstore.effects.performers import RetryingPerformer
from actionstore.effects.protocol import EffectPerformer

logger = logging.getLogger(__name__)

COUNT_DOCUMENTS: dict[str, str] = {
    GET_COUNT: "query GetCount { getCount { id count } }",
    INC_COUNT: "mutation IncCount { incCount { id count } }",
}


class GraphQLPerformer:
    """Performs ``remote`` effect requests against a GraphQL endpoint.

    Attributes:
        settings: Endpoint and timeout configuration.

    Args:
        settings: Remote configuration. Defaults to RemoteSettings() (env).
        documents: Operation name -> GraphQL document.
        transport: Optional httpx transport (httpx.MockTransport in tests).
    """

    def __init__(
        self,
        settings: RemoteSettings | None = None,
        documents: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or RemoteSettings()
        self._documents = dict(documents if documents is not None else COUNT_DOCUMENTS)
        self._transport = transport

    async def perform(self, request: EffectRequest) -> Any:
        operation = request.get("operation")
        document = self._documents.get(operation)
        if document is None:
            raise RemoteCallError(f"No GraphQL document for operation {operation!r}")

        payload: dict[str, Any] = {"query": document}
        variables = request.get("variables")
        if variables:
            payload["variables"] = variables

        logger.debug("POST %s (%s)", self.settings.url, operation)
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.settings.url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RemoteTransportError(f"{operation}: {exc}") from exc

        try:
            body = GraphQLResponse.model_validate(response.json())
        except ValueError as exc:
            raise RemoteCallError(f"{operation}: malformed response ({exc})") from exc

        if body.errors:
            raise RemoteCallError(f"{operation}: " + "; ".join(e.message for e in body.errors))
        if body.data is None or operation not in body.data:
            raise RemoteCallError(f"{operation}: response carries no data for the operation")
        return body.data[operation]


def graphql_performer(
    settings: RemoteSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> EffectPerformer:
    """GraphQLPerformer, wrapped for retries on transport errors when configured."""
    settings = settings or RemoteSettings()
    performer = GraphQLPerformer(settings, transport=transport)
    if settings.max_attempts <= 1:
        return performer
    return RetryingPerformer(
        performer, settings.retry_policy(), retry_on=(RemoteTransportError,)
    )
