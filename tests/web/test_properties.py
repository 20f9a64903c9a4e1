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
"""Tests for CORSProperties binding and conversion to CORSPolicy."""

from __future__ import annotations

import pydantic
import pytest

from flycors.core.config import Config
from flycors.cors.policy import CORSPolicy
from flycors.kernel.exceptions import ConfigurationException
from flycors.web.properties import CORSProperties


class TestCORSPropertiesDefaults:
    def test_defaults(self):
        props = CORSProperties()

        assert props.allow_credentials is False
        assert props.allow_headers == []
        assert props.allow_methods == ["HEAD", "GET", "POST"]
        assert props.allow_origins == ["*"]
        assert props.expose_headers == []
        assert props.max_age == 5

    def test_bind_empty_section_uses_defaults(self):
        assert Config({}).bind(CORSProperties) == CORSProperties()

    def test_frozen(self):
        props = CORSProperties()
        with pytest.raises(pydantic.ValidationError):
            props.max_age = 10  # type: ignore[misc]


class TestCORSPropertiesBinding:
    def test_camel_case_keys(self):
        config = Config(
            {
                "flycors": {
                    "cors": {
                        "allowCredentials": True,
                        "allowOrigins": ["https://example.com"],
                        "allowMethods": ["GET"],
                        "allowHeaders": ["Content-Type"],
                        "exposeHeaders": ["X-Total"],
                        "maxAge": -1,
                    }
                }
            }
        )
        props = config.bind(CORSProperties)

        assert props.allow_credentials is True
        assert props.allow_origins == ["https://example.com"]
        assert props.allow_methods == ["GET"]
        assert props.allow_headers == ["Content-Type"]
        assert props.expose_headers == ["X-Total"]
        assert props.max_age == -1

    def test_snake_case_keys(self):
        config = Config({"flycors": {"cors": {"allow_origins": ["https://a.example"], "max_age": 60}}})
        props = config.bind(CORSProperties)

        assert props.allow_origins == ["https://a.example"]
        assert props.max_age == 60
        assert props.allow_methods == ["HEAD", "GET", "POST"]

    def test_invalid_type_fails_at_bind(self):
        config = Config({"flycors": {"cors": {"maxAge": "forever"}}})
        with pytest.raises(ConfigurationException) as exc_info:
            config.bind(CORSProperties)
        assert exc_info.value.code == "CONFIG_INVALID"
        assert exc_info.value.context == {"prefix": "flycors.cors"}

    def test_unknown_key_fails_at_bind(self):
        config = Config({"flycors": {"cors": {"allowOrigin": ["https://a.example"]}}})
        with pytest.raises(ConfigurationException):
            config.bind(CORSProperties)


class TestToPolicy:
    def test_builds_equivalent_policy(self):
        props = CORSProperties(
            allow_origins=["https://example.com"],
            allow_methods=["GET", "POST"],
            allow_headers=["Authorization"],
            max_age=120,
        )
        policy = props.to_policy()

        assert policy == CORSPolicy(
            allow_origins=("https://example.com",),
            allow_methods=("GET", "POST"),
            allow_headers=("Authorization",),
            max_age=120,
        )
        assert policy.resolve_allow_methods() == "GET, POST"
        assert policy.resolve_max_age() == "120"

    def test_default_properties_share_with_everyone(self):
        policy = CORSProperties().to_policy()
        assert policy.allow_origins == ("*",)
        assert policy.resolve_allow_methods() == "HEAD, GET, POST"
