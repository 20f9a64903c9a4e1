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
"""WebFilter contract for request/response filters run by the filter chain.

Request and response are typed ``Any`` so the contract stays free of any web
framework; the Starlette adapter passes its own ``Request`` and ``Response``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

# Continues with the next filter, or the application once the chain is exhausted.
CallNext = Callable[[Any], Awaitable[Any]]

# Filters without an ``order`` attribute run at this position.
DEFAULT_FILTER_ORDER = 0

# CORS runs ahead of user filters so a preflight never reaches them.
CORS_FILTER_ORDER = -1000


@runtime_checkable
class WebFilter(Protocol):
    """A step in the filter chain.

    Filters run in ascending ``order``. Returning without awaiting
    ``call_next`` answers the request and ends the chain there.
    """

    order: int

    async def do_filter(self, request: Any, call_next: CallNext) -> Any: ...
