# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings controlling diff context, stringify limits and colour output."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

ENV_PREFIX: Final[str] = "PYIKO_"
_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})
_ENV_FIELDS: Final[Mapping[str, str]] = {
    "COLOR": "color",
    "DIFF_CONTEXT": "diff_context",
    "MAX_DEPTH": "stringify_max_depth",
    "MAX_LENGTH": "stringify_max_length",
}


class PyikoSettings(BaseModel):
    """Presentation settings passed explicitly to differs and renderers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: bool | None = None
    diff_context: int = Field(default=5, ge=0)
    stringify_max_depth: int = Field(default=10, ge=1)
    stringify_max_length: int = Field(default=10_000, ge=1)


def _parse_flag(raw: str) -> bool | None:
    """Return a tri-state flag parsed from an environment value.

    Args:
        raw: Raw environment value.

    Returns:
        bool | None: Parsed flag; ``None`` for ``auto`` or empty values.

    Raises:
        ConfigurationError: If ``raw`` is not a recognised flag spelling.
    """

    value = raw.strip().lower()
    if value in {"", "auto"}:
        return None
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"invalid {ENV_PREFIX}COLOR value: {raw!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> PyikoSettings:
    """Build :class:`PyikoSettings` from ``PYIKO_*`` environment variables.

    ``NO_COLOR`` disables colour unless ``PYIKO_COLOR`` is set explicitly.

    Args:
        environ: Mapping to read instead of :data:`os.environ`.

    Returns:
        PyikoSettings: Validated settings.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """

    env = os.environ if environ is None else environ
    payload: dict[str, object] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        raw = env.get(f"{ENV_PREFIX}{suffix}")
        if raw is None:
            continue
        payload[field_name] = _parse_flag(raw) if field_name == "color" else raw.strip()
    if "color" not in payload and env.get("NO_COLOR"):
        payload["color"] = False
    try:
        return PyikoSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid pyiko settings: {exc}") from exc


__all__ = ["ENV_PREFIX", "PyikoSettings", "load_settings"]
