"""Tests for the GraphQL performer using httpx.MockTransport."""

import json

import httpx
import pytest

from actionstore.adapters import (
    GraphQLPerformer,
    RemoteCallError,
    RemoteTransportError,
    graphql_performer,
)
from actionstore.config import RemoteSettings
from actionstore.effects import EffectRequest, RetryingPerformer

URL = "http://counter.test/graphql"


def settings(**overrides):
    return RemoteSettings(url=URL, **overrides)


def request(operation):
    return EffectRequest("remote", {"operation": operation})


class CounterServer:
    """Minimal stand-in for the counter GraphQL server."""

    def __init__(self, count=0):
        self.count = count
        self.bodies = []

    def __call__(self, http_request: httpx.Request) -> httpx.Response:
        body = json.loads(http_request.content)
        self.bodies.append(body)
        if "incCount" in body["query"]:
            self.count += 1
            return httpx.Response(200, json={"data": {"incCount": {"id": "c1", "count": self.count}}})
        return httpx.Response(200, json={"data": {"getCount": {"id": "c1", "count": self.count}}})


@pytest.mark.asyncio
async def test_get_and_increment():
    server = CounterServer(count=7)
    performer = GraphQLPerformer(settings(), transport=httpx.MockTransport(server))

    assert await performer.perform(request("getCount")) == {"id": "c1", "count": 7}
    assert await performer.perform(request("incCount")) == {"id": "c1", "count": 8}
    assert server.bodies[1]["query"].startswith("mutation")


@pytest.mark.asyncio
async def test_graphql_errors_raise():
    transport = httpx.MockTransport(
        lambda r: httpx.Response(200, json={"errors": [{"message": "no counter"}]})
    )
    performer = GraphQLPerformer(settings(), transport=transport)

    with pytest.raises(RemoteCallError, match="no counter"):
        await performer.perform(request("getCount"))


@pytest.mark.asyncio
async def test_http_error_is_transport_error():
    transport = httpx.MockTransport(lambda r: httpx.Response(503))
    performer = GraphQLPerformer(settings(), transport=transport)

    with pytest.raises(RemoteTransportError):
        await performer.perform(request("getCount"))


@pytest.mark.asyncio
async def test_malformed_body_raises():
    transport = httpx.MockTransport(lambda r: httpx.Response(200, content=b"not json"))
    performer = GraphQLPerformer(settings(), transport=transport)

    with pytest.raises(RemoteCallError, match="malformed"):
        await performer.perform(request("getCount"))


@pytest.mark.asyncio
async def test_missing_data_raises():
    transport = httpx.MockTransport(lambda r: httpx.Response(200, json={"data": {}}))
    performer = GraphQLPerformer(settings(), transport=transport)

    with pytest.raises(RemoteCallError, match="no data"):
        await performer.perform(request("getCount"))


@pytest.mark.asyncio
async def test_unknown_operation_raises_before_sending():
    server = CounterServer()
    performer = GraphQLPerformer(settings(), transport=httpx.MockTransport(server))

    with pytest.raises(RemoteCallError):
        await performer.perform(request("dropCount"))
    assert server.bodies == []


def test_factory_wraps_only_when_retries_configured():
    assert isinstance(graphql_performer(settings()), GraphQLPerformer)
    assert isinstance(graphql_performer(settings(max_attempts=3)), RetryingPerformer)


@pytest.mark.asyncio
async def test_factory_retries_transport_errors():
    statuses = iter([503, 200])
    server = CounterServer(count=1)

    def flaky(http_request):
        status = next(statuses)
        if status != 200:
            return httpx.Response(status)
        return server(http_request)

    performer = graphql_performer(settings(max_attempts=2), transport=httpx.MockTransport(flaky))

    assert await performer.perform(request("getCount")) == {"id": "c1", "count": 1}
