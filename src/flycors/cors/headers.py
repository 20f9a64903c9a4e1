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
"""Header names and constants of the Fetch standard CORS protocol.

See https://fetch.spec.whatwg.org/#http-cors-protocol
"""

from __future__ import annotations

# =============================================================================
# Request headers
# =============================================================================

# Where a fetch originates from (RFC 6454 section 7, Fetch section 3.1).
HEADER_ORIGIN = "Origin"

# Method a future CORS request to the same resource might use (Fetch 3.2.2).
HEADER_REQUEST_METHOD = "Access-Control-Request-Method"

# Headers a future CORS request to the same resource might use (Fetch 3.2.2).
HEADER_REQUEST_HEADERS = "Access-Control-Request-Headers"

# =============================================================================
# Response headers
# =============================================================================

# Tells caches the response depends on a request header (RFC 7231 section 7.1.4).
HEADER_VARY = "Vary"

# Whether the response can be shared when the credentials mode is "include".
HEADER_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"

# The literal request Origin (which can be "null") or "*".
HEADER_ALLOW_ORIGIN = "Access-Control-Allow-Origin"

# Headers supported by the response's URL for the purposes of CORS.
HEADER_ALLOW_HEADERS = "Access-Control-Allow-Headers"

# Methods supported by the response's URL for the purposes of CORS.
HEADER_ALLOW_METHODS = "Access-Control-Allow-Methods"

# Response headers the client is allowed to read.
HEADER_EXPOSE_HEADERS = "Access-Control-Expose-Headers"

# Seconds the preflight result can be cached.
HEADER_MAX_AGE = "Access-Control-Max-Age"

# =============================================================================
# Values
# =============================================================================

# Allows any origin, method, or header. Treated as a literal by clients whose
# credentials mode is "include" (Fetch 3.2.4 and 3.2.5).
WILDCARD = "*"

METHOD_OPTIONS = "OPTIONS"

# Default preflight cache lifetime, in seconds.
DEFAULT_MAX_AGE = 5

# Status of an answered preflight request.
PREFLIGHT_STATUS_CODE = 204
