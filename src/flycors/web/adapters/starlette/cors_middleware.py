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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from flycors.cors.headers import PREFLIGHT_STATUS_CODE
from flycors.cors.negotiator import CORSDecision, CORSNegotiator
from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest


def apply_decision(headers: MutableHeaders, decision: CORSDecision) -> None:
    """Write a negotiated decision onto response headers.

    CORS headers overwrite existing values. ``Vary`` is merged with whatever
    the application or other middleware already put there.
    """
    for name, value in decision.headers.items():
        headers[name] = value
    if decision.vary:
        headers.add_vary_header(decision.vary)


def preflight_response(decision: CORSDecision) -> Response:
    """Empty 204 response carrying the preflight headers."""
    response = Response(status_code=PREFLIGHT_STATUS_CODE)
    apply_decision(response.headers, decision)
    return response


class CORSMiddleware:
    """Answers CORS preflight requests and decorates all other responses.

    The wrapped ``app`` is the next stage. It is called exactly once for every
    request that is not a preflight and never for a preflight, which is
    answered here with ``204 No Content``.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses pass through untouched.
    """

    def __init__(self, app: ASGIApp, policy: CORSPolicy) -> None:
        self.app = app
        self._negotiator = CORSNegotiator(policy)

    @property
    def policy(self) -> CORSPolicy:
        return self._negotiator.policy

    def replace_policy(self, policy: CORSPolicy) -> None:
        """Serve new requests with *policy*.

        Requests already in flight keep the negotiator they started with.
        """
        self._negotiator = CORSNegotiator(policy)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        negotiator = self._negotiator
        request = CORSRequest.from_headers(scope["method"], Headers(scope=scope))
        decision = negotiator.negotiate(request)

        if decision.preflight:
            await preflight_response(decision)(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                apply_decision(MutableHeaders(scope=message), decision)
            await send(message)

        await self.app(scope, receive, send_with_cors)
