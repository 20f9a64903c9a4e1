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
"""Configuration files, environment overrides, and binding to properties models."""

from __future__ import annotations

import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_origin

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from flycors.kernel.exceptions import ConfigurationException

M = TypeVar("M", bound=BaseModel)

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_PREFIX_ATTR = "__flycors_config_prefix__"
_MAX_PLACEHOLDER_DEPTH = 10
_MISSING = object()


def config_properties(prefix: str) -> Callable[[type[M]], type[M]]:
    """Attach the configuration section *prefix* to a pydantic properties model."""

    def decorator(cls: type[M]) -> type[M]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def env_key(key: str) -> str:
    """Environment variable that overrides a dotted key.

    ``flycors.cors.max_age`` -> ``FLYCORS_CORS_MAX_AGE``.
    """
    return "FLYCORS_" + key.removeprefix("flycors.").upper().replace(".", "_").replace("-", "_")


class Config:
    """Merged configuration tree.

    Values are looked up by dotted key. ``${NAME}``, ``${dotted.key}`` and
    ``${NAME:default}`` placeholders are expanded on read, including inside
    lists and nested sections, and ``FLYCORS_*`` environment variables win
    over file values both for ``get()`` and for ``bind()``.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Files merged into this configuration, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load a YAML or TOML file on top of the packaged defaults.

        Profile overlays named ``{stem}-{profile}{suffix}`` next to *path* are
        merged after it, in the order given. A missing *path* leaves only the
        defaults.
        """
        path = Path(path)
        layers: list[tuple[str, dict[str, Any]]] = []

        if load_defaults:
            layers.append(("flycors-defaults.yaml (defaults)", cls._read_defaults()))

        if path.exists():
            layers.append((str(path), cls._read(path)))
            for profile in active_profiles or []:
                overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
                if overlay.exists():
                    layers.append((f"{overlay} (profile: {profile})", cls._read(overlay)))

        data: dict[str, Any] = {}
        for _, layer in layers:
            data = _merge(data, layer)

        instance = cls(data)
        instance._loaded_sources = [source for source, _ in layers]
        return instance

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            if path.suffix == ".toml":
                return tomllib.loads(path.read_text()) or {}
            return yaml.safe_load(path.read_text()) or {}
        except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationException(
                f"Cannot parse configuration file '{path}': {exc}",
                code="CONFIG_PARSE",
                context={"path": str(path)},
            ) from exc

    @staticmethod
    def _read_defaults() -> dict[str, Any]:
        text = importlib.resources.files("flycors.resources").joinpath("flycors-defaults.yaml").read_text()
        return yaml.safe_load(text) or {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """Value at dotted *key*, with env override and placeholders expanded."""
        override = os.environ.get(env_key(key))
        if override is not None:
            return override
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return default
        return self.resolve(value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Section at *prefix* with every placeholder in it expanded."""
        section = self._lookup(prefix)
        if not isinstance(section, dict):
            return {}
        return self.resolve(section)

    def resolve(self, value: Any) -> Any:
        """Expand placeholders in strings, recursing into lists and dicts."""
        if isinstance(value, str):
            return self._expand(value, 0)
        if isinstance(value, list):
            return [self.resolve(item) for item in value]
        if isinstance(value, dict):
            return {k: self.resolve(v) for k, v in value.items()}
        return value

    def _expand(self, text: str, depth: int) -> str:
        if "${" not in text:
            return text
        if depth > _MAX_PLACEHOLDER_DEPTH:
            raise ConfigurationException(
                f"Placeholders in '{text}' nest too deeply; check for circular references.",
                code="CONFIG_PLACEHOLDER",
            )

        def substitute(match: re.Match[str]) -> str:
            name, sep, fallback = match.group(1).partition(":")
            from_env = os.environ.get(name)
            if from_env is not None:
                return from_env
            referenced = self._lookup(name)
            if referenced is not _MISSING and referenced is not None:
                return self._expand(str(referenced), depth + 1)
            if sep:
                return fallback
            raise ConfigurationException(
                f"Cannot resolve placeholder '${{{match.group(1)}}}': not found in environment or config",
                code="CONFIG_PLACEHOLDER",
                context={"placeholder": match.group(1)},
            )

        return _PLACEHOLDER_RE.sub(substitute, text)

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(self, model_cls: type[M]) -> M:
        """Validate the model's section into an instance of *model_cls*.

        For every field, ``FLYCORS_<SECTION>_<FIELD>`` replaces the file
        value; list fields take a comma-separated string.
        """
        prefix = getattr(model_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise ConfigurationException(
                f"{model_cls.__name__} is not decorated with @config_properties",
                code="CONFIG_BIND",
            )

        section = self.get_section(prefix)
        for name, info in model_cls.model_fields.items():
            override = os.environ.get(env_key(f"{prefix}.{name}"))
            if override is None:
                continue
            if info.alias:
                section.pop(info.alias, None)
            if get_origin(info.annotation) is list:
                section[name] = [item.strip() for item in override.split(",") if item.strip()]
            else:
                section[name] = override

        try:
            return model_cls.model_validate(section)
        except ValidationError as exc:
            raise ConfigurationException(
                f"Configuration validation failed for '{model_cls.__name__}' (prefix='{prefix}'):\n{exc}",
                code="CONFIG_INVALID",
                context={"prefix": prefix},
            ) from exc


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
