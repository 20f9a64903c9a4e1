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
"""Tests for CORSRequest and preflight classification."""

from __future__ import annotations

import dataclasses

import pytest

from flycors.cors.request import CORSRequest, is_preflight

ORIGIN = "https://example.com"


def _preflight(**overrides: str) -> CORSRequest:
    fields = {
        "method": "OPTIONS",
        "origin": ORIGIN,
        "request_method": "GET",
        "request_headers": "Content-Type",
    }
    fields.update(overrides)
    return CORSRequest(**fields)


class TestIsPreflight:
    def test_all_four_conditions_is_preflight(self):
        assert is_preflight(_preflight()) is True

    def test_non_options_method_is_not_preflight(self):
        assert is_preflight(_preflight(method="GET")) is False

    def test_missing_origin_is_not_preflight(self):
        assert is_preflight(_preflight(origin="")) is False

    def test_missing_request_method_is_not_preflight(self):
        assert is_preflight(_preflight(request_method="")) is False

    def test_missing_request_headers_is_not_preflight(self):
        assert is_preflight(_preflight(request_headers="")) is False

    def test_plain_options_with_origin_only_is_not_preflight(self):
        request = CORSRequest(method="OPTIONS", origin=ORIGIN)
        assert is_preflight(request) is False

    def test_method_comparison_is_exact(self):
        assert is_preflight(_preflight(method="options")) is False


class TestFromHeaders:
    def test_reads_cors_headers(self):
        request = CORSRequest.from_headers(
            "OPTIONS",
            {
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert request == CORSRequest("OPTIONS", ORIGIN, "POST", "Content-Type")
        assert is_preflight(request)

    def test_header_names_are_case_insensitive(self):
        request = CORSRequest.from_headers(
            "GET",
            {"origin": ORIGIN, "ACCESS-CONTROL-REQUEST-METHOD": "PUT"},
        )
        assert request.origin == ORIGIN
        assert request.request_method == "PUT"

    def test_absent_headers_are_empty_strings(self):
        request = CORSRequest.from_headers("GET", {"Accept": "text/html"})
        assert request.origin == ""
        assert request.request_method == ""
        assert request.request_headers == ""

    def test_view_is_frozen(self):
        request = CORSRequest("GET", ORIGIN)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.origin = "https://evil.com"  # type: ignore[misc]
