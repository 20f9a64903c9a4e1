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
"""FlyCors application factory built on Starlette."""

from __future__ import annotations

from collections.abc import Sequence

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import BaseRoute

from flycors.cors.policy import CORSPolicy
from flycors.web.adapters.starlette.cors_middleware import CORSMiddleware
from flycors.web.adapters.starlette.filter_chain import WebFilterChainMiddleware
from flycors.web.adapters.starlette.filters import CORSFilter
from flycors.web.ports.filter import WebFilter
from flycors.web.properties import CORSProperties


def create_app(
    routes: Sequence[BaseRoute] | None = None,
    cors: CORSPolicy | CORSProperties | None = None,
    filters: Sequence[WebFilter] = (),
    cors_as_filter: bool = False,
    debug: bool = False,
    lifespan: object | None = None,
) -> Starlette:
    """Create a Starlette application with CORS negotiation in front of *routes*.

    By default CORS runs as the outermost ASGI middleware, so preflights are
    answered before any other middleware or filter sees them. That mode only
    edits the ``http.response.start`` message and passes body chunks through
    untouched, so streaming and server-sent-event responses keep streaming.

    With ``cors_as_filter=True`` it runs as a :class:`CORSFilter` inside the
    WebFilter chain instead, ordered against the user *filters*. The chain
    hands filters a complete response, so the whole downstream body is
    buffered in memory before the first byte is sent. Any non-empty *filters*
    have the same effect, with or without CORS.
    """
    policy = cors.to_policy() if isinstance(cors, CORSProperties) else cors
    chain: list[WebFilter] = list(filters)
    middleware: list[Middleware] = []

    if policy is not None:
        if cors_as_filter:
            chain.append(CORSFilter(policy))
        else:
            middleware.append(Middleware(CORSMiddleware, policy=policy))

    if chain:
        middleware.append(Middleware(WebFilterChainMiddleware, filters=chain))

    return Starlette(
        debug=debug,
        routes=list(routes or []),
        middleware=middleware,
        lifespan=lifespan,  # type: ignore[arg-type]
    )
