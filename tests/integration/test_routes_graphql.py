"""Route tests for the POST /api/graphql pass-through."""

from __future__ import annotations

import json

import httpx
import pytest
from respx import MockRouter

from seatproxy.config.settings import get_settings

GRAPHQL_URL = "https://api.github.com/graphql"
QUERY = {"query": "query { viewer { login } }"}


@pytest.mark.integration
class TestGraphqlProxy:
    @pytest.mark.asyncio
    async def test_forwards_body_and_authorization(self, client, respx_mock: MockRouter) -> None:
        route = respx_mock.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(200, json={"data": {"viewer": {"login": "octocat"}}})
        )
        resp = await client.post(
            "/api/graphql", json=QUERY, headers={"Authorization": "Bearer abc"}
        )
        assert resp.status_code == 200
        assert resp.json() == {"data": {"viewer": {"login": "octocat"}}}
        request = route.calls[0].request
        assert request.headers["Authorization"] == "Bearer abc"
        assert json.loads(request.content) == QUERY

    @pytest.mark.asyncio
    async def test_missing_authorization_is_401(self, client, respx_mock: MockRouter) -> None:
        resp = await client.post("/api/graphql", json=QUERY)
        assert resp.status_code == 401
        assert respx_mock.calls.call_count == 0

    @pytest.mark.asyncio
    async def test_server_token_fallback(
        self, app, client, settings, respx_mock: MockRouter
    ) -> None:
        app.dependency_overrides[get_settings] = lambda: settings.model_copy(
            update={"github_token": "ghp_server"}
        )
        route = respx_mock.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(200, json={"data": {}})
        )
        resp = await client.post("/api/graphql", json=QUERY)
        assert resp.status_code == 200
        assert route.calls[0].request.headers["Authorization"] == "token ghp_server"

    @pytest.mark.asyncio
    async def test_upstream_status_passed_through(self, client, respx_mock: MockRouter) -> None:
        respx_mock.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(401, json={"message": "Bad credentials"})
        )
        resp = await client.post(
            "/api/graphql", json=QUERY, headers={"Authorization": "Bearer bad"}
        )
        assert resp.status_code == 401
        assert resp.json() == {"message": "Bad credentials"}

    @pytest.mark.asyncio
    async def test_transport_error_is_500(self, client, respx_mock: MockRouter) -> None:
        respx_mock.post(GRAPHQL_URL).mock(side_effect=httpx.ConnectError("down"))
        resp = await client.post(
            "/api/graphql", json=QUERY, headers={"Authorization": "Bearer abc"}
        )
        assert resp.status_code == 500
        assert "Error proxying GraphQL request" in resp.text

    @pytest.mark.asyncio
    async def test_non_json_error_keeps_upstream_status(
        self, client, respx_mock: MockRouter
    ) -> None:
        respx_mock.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
        )
        resp = await client.post(
            "/api/graphql", json=QUERY, headers={"Authorization": "Bearer abc"}
        )
        assert resp.status_code == 502
        assert resp.text.startswith("Error proxying GraphQL request")

    @pytest.mark.asyncio
    async def test_non_json_success_is_500(self, client, respx_mock: MockRouter) -> None:
        respx_mock.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, text="not json"))
        resp = await client.post(
            "/api/graphql", json=QUERY, headers={"Authorization": "Bearer abc"}
        )
        assert resp.status_code == 500
