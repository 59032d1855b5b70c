"""Tests for login and spec download against a fake Directus."""

import httpx
import pytest

from directus_typegen.client import (
    AuthenticationError,
    authenticate,
    build_url,
    fetch_spec,
)

HOST = "http://directus.test"


class TestBuildUrl:

    def test_plain_host(self):
        assert build_url("http://d.test", "/auth/login") == "http://d.test/auth/login"

    def test_trailing_slash(self):
        assert build_url("http://d.test/", "/server/specs/oas") == "http://d.test/server/specs/oas"


class TestAuthenticate:
    """Test the login exchange."""

    async def test_static_token_skips_login(self, directus):
        async with httpx.AsyncClient(transport=directus.transport) as client:
            token = await authenticate(client, directus.url, "a@b.c", "static-token", True)
        assert token == "static-token"
        assert directus.requests == []

    async def test_login_exchange(self, directus):
        async with httpx.AsyncClient(transport=directus.transport) as client:
            token = await authenticate(client, directus.url, "admin@example.com", "secret")
        assert token == directus.token
        assert directus.paths() == ["/auth/login"]
        assert directus.login_payload() == {
            "email": "admin@example.com",
            "password": "secret",
            "mode": "json",
        }
        assert directus.requests[0].headers["content-type"] == "application/json"

    async def test_login_rejected(self, sample_spec, make_directus):
        fake = make_directus(
            sample_spec,
            login_body={"errors": [{"message": "Invalid user credentials."}]},
        )
        async with httpx.AsyncClient(transport=fake.transport) as client:
            with pytest.raises(AuthenticationError, match="Invalid user credentials"):
                await authenticate(client, fake.url, "admin@example.com", "wrong")

    async def test_transport_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(httpx.ConnectError):
                await authenticate(client, HOST, "admin@example.com", "secret")


class TestFetchSpec:
    """Test downloading the OpenAPI document."""

    async def test_bearer_header(self, directus, sample_spec):
        async with httpx.AsyncClient(transport=directus.transport) as client:
            spec = await fetch_spec(client, directus.url, "tok")
        assert spec == sample_spec
        request = directus.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/server/specs/oas"
        assert request.headers["authorization"] == "Bearer tok"

    async def test_error_document_returned(self, make_directus):
        errors = {"errors": [{"message": "You don't have permission to access this."}]}
        fake = make_directus(errors, spec_status=403)
        async with httpx.AsyncClient(transport=fake.transport) as client:
            spec = await fetch_spec(client, fake.url, "tok")
        assert spec == errors

    async def test_unparseable_body(self):
        def handler(request):
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ValueError):
                await fetch_spec(client, HOST, "tok")

    async def test_non_object_body(self):
        def handler(request):
            return httpx.Response(200, json=["not", "a", "spec"])

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ValueError, match="Expected a JSON object"):
                await fetch_spec(client, HOST, "tok")
