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
"""Pure-ASGI middleware that runs WebFilters around the downstream application."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import Any

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from flycors.web.ports.filter import DEFAULT_FILTER_ORDER, CallNext, WebFilter


async def _buffer(app: ASGIApp, scope: Scope, receive: Receive) -> Response:
    """Run *app* to completion and return what it sent as one ``Response``."""
    start: Message = {"status": 200, "headers": []}
    body = bytearray()

    async def capture(message: Message) -> None:
        nonlocal start
        if message["type"] == "http.response.start":
            start = message
        elif message["type"] == "http.response.body":
            body.extend(message.get("body", b""))

    await app(scope, receive, capture)

    response = Response(content=bytes(body), status_code=start["status"])
    response.raw_headers[:] = list(start.get("headers", []))
    return response


class WebFilterChainMiddleware:
    """Runs *filters* in ascending ``order``, then the wrapped app.

    Filters see a complete :class:`Response`, so the downstream body is
    buffered in memory before it is sent; streaming responses lose their
    streaming here. Filters with equal order keep their registration order.
    """

    def __init__(self, app: ASGIApp, filters: Sequence[WebFilter] = ()) -> None:
        self.app = app
        self.filters = sorted(filters, key=lambda f: getattr(f, "order", DEFAULT_FILTER_ORDER))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def call_app(_: Any) -> Response:
            return await _buffer(self.app, scope, receive)

        chain: CallNext = call_app
        for web_filter in reversed(self.filters):
            chain = functools.partial(web_filter.do_filter, call_next=chain)

        response: Response = await chain(Request(scope, receive, send))
        await response(scope, receive, send)
