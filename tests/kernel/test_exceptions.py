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
"""Tests for the FlyCors exception hierarchy."""

from flycors.kernel.exceptions import ConfigurationException, FlyCorsException


class TestFlyCorsException:
    def test_basic_creation(self):
        exc = FlyCorsException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = FlyCorsException("bad config", code="CONFIG_INVALID", context={"prefix": "flycors.cors"})
        assert exc.code == "CONFIG_INVALID"
        assert exc.context["prefix"] == "flycors.cors"

    def test_context_not_shared_between_instances(self):
        exc = FlyCorsException("test")
        exc.context["key"] = "value"
        assert FlyCorsException("test2").context == {}


class TestExceptionHierarchy:
    def test_configuration_is_flycors(self):
        assert issubclass(ConfigurationException, FlyCorsException)

    def test_is_exception(self):
        assert isinstance(ConfigurationException("x"), Exception)
