# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for WebFilterChainMiddleware: ordering, short-circuit, buffering."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, StreamingResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from flycors.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from flycors.web.ports.filter import CORS_FILTER_ORDER, DEFAULT_FILTER_ORDER


class TraceFilter:
    """Appends its name to X-Trace on the way out."""

    def __init__(self, name: str, order: int = DEFAULT_FILTER_ORDER) -> None:
        self.name = name
        self.order = order

    async def do_filter(self, request, call_next):
        response = await call_next(request)
        trace = response.headers.get("X-Trace")
        response.headers["X-Trace"] = f"{trace},{self.name}" if trace else self.name
        return response


class UnorderedFilter:
    """No ``order`` attribute at all."""

    async def do_filter(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Unordered"] = "yes"
        return response


class DenyOriginFilter:
    """Rejects one origin without calling the application."""

    order = CORS_FILTER_ORDER

    def __init__(self) -> None:
        self.calls = 0

    async def do_filter(self, request, call_next):
        self.calls += 1
        if request.headers.get("origin") == "https://blocked.example":
            return PlainTextResponse("origin blocked", status_code=403)
        return await call_next(request)


async def _ok(request: Request) -> PlainTextResponse:
    return PlainTextResponse("OK", headers={"Vary": "Accept-Encoding"})


async def _stream(request: Request) -> StreamingResponse:
    async def chunks():
        yield b"first,"
        yield b"second"

    return StreamingResponse(chunks(), media_type="text/plain")


def _make_app(*filters) -> Starlette:
    return Starlette(
        routes=[Route("/items", _ok), Route("/stream", _stream)],
        middleware=[Middleware(WebFilterChainMiddleware, filters=list(filters))],
    )


class TestFilterChainOrdering:
    def test_lower_order_runs_outermost(self):
        client = TestClient(_make_app(TraceFilter("inner", order=10), TraceFilter("outer", order=-10)))
        assert client.get("/items").headers["X-Trace"] == "inner,outer"

    def test_equal_order_keeps_registration_order(self):
        client = TestClient(_make_app(TraceFilter("first"), TraceFilter("second")))
        assert client.get("/items").headers["X-Trace"] == "second,first"

    def test_missing_order_uses_default(self):
        middleware = WebFilterChainMiddleware(
            _ok, filters=[TraceFilter("late", order=5), UnorderedFilter(), TraceFilter("early", order=-5)]
        )
        assert [type(f).__name__ for f in middleware.filters] == ["TraceFilter", "UnorderedFilter", "TraceFilter"]
        assert middleware.filters[0].name == "early"
        assert middleware.filters[2].name == "late"

    def test_cors_order_precedes_default(self):
        assert CORS_FILTER_ORDER < DEFAULT_FILTER_ORDER


class TestFilterChainShortCircuit:
    def test_filter_answers_without_calling_app(self):
        deny = DenyOriginFilter()
        trace = TraceFilter("app-side")
        client = TestClient(_make_app(trace, deny))

        resp = client.get("/items", headers={"Origin": "https://blocked.example"})

        assert resp.status_code == 403
        assert resp.text == "origin blocked"
        assert "X-Trace" not in resp.headers
        assert deny.calls == 1

    def test_allowed_request_reaches_app(self):
        client = TestClient(_make_app(DenyOriginFilter(), UnorderedFilter()))
        resp = client.get("/items", headers={"Origin": "https://app.example"})
        assert resp.status_code == 200
        assert resp.headers["X-Unordered"] == "yes"


class TestFilterChainBuffering:
    def test_downstream_headers_survive(self):
        resp = TestClient(_make_app(TraceFilter("only"))).get("/items")
        assert resp.headers["vary"] == "Accept-Encoding"
        assert resp.headers["content-type"].startswith("text/plain")

    def test_streamed_body_is_collected(self):
        resp = TestClient(_make_app(TraceFilter("only"))).get("/stream")
        assert resp.status_code == 200
        assert resp.text == "first,second"
        assert resp.headers["X-Trace"] == "only"


class TestFilterChainEmpty:
    def test_no_filters_passes_through(self):
        resp = TestClient(_make_app()).get("/items")
        assert resp.status_code == 200
        assert resp.text == "OK"
