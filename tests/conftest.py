"""Shared fixtures: a small Directus spec and a fake Directus API.

The fake API is an httpx.MockTransport, so no network access is needed.
"""

from __future__ import annotations

import copy
import json
from typing import Any

import httpx
import pytest

DIRECTUS_URL = "http://directus.test"
ACCESS_TOKEN = "login-token"

SAMPLE_SPEC: dict[str, Any] = {
    "openapi": "3.0.1",
    "info": {"title": "Dynamic API Specification", "version": "10.10.4"},
    "paths": {},
    "components": {
        "schemas": {
            "Users": {
                "type": "object",
                "properties": {
                    "id": {"type": "string", "format": "uuid"},
                    "email": {"type": "string", "nullable": True},
                },
                "x-collection": "directus_users",
            },
            "ItemsArticle": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "title": {"type": "string", "description": "Headline"},
                    "author": {
                        "nullable": True,
                        "oneOf": [
                            {"type": "string"},
                            {"$ref": "#/components/schemas/Users"},
                        ],
                    },
                },
                "x-collection": "article",
            },
            "x-metadata": {"type": "object"},
        }
    },
}


@pytest.fixture
def sample_spec() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_SPEC)


class FakeDirectus:
    """Answers /auth/login and /server/specs/oas, recording every request."""

    url = DIRECTUS_URL
    token = ACCESS_TOKEN

    def __init__(
        self,
        spec: dict[str, Any],
        login_body: dict[str, Any] | None = None,
        spec_status: int = 200,
    ) -> None:
        self.spec = spec
        self.login_body = login_body if login_body is not None else {
            "data": {"access_token": ACCESS_TOKEN, "expires": 900000, "refresh_token": "r"},
        }
        self.spec_status = spec_status
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST" and request.url.path == "/auth/login":
            return httpx.Response(200, json=self.login_body)
        if request.method == "GET" and request.url.path == "/server/specs/oas":
            return httpx.Response(self.spec_status, json=self.spec)
        return httpx.Response(404, json={"errors": [{"message": "Route doesn't exist."}]})

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def login_payload(self) -> dict[str, Any]:
        login = next(r for r in self.requests if r.url.path == "/auth/login")
        return json.loads(login.content)


@pytest.fixture
def directus(sample_spec) -> FakeDirectus:
    return FakeDirectus(sample_spec)


@pytest.fixture
def make_directus():
    return FakeDirectus
