# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base model for Helix and EventSub wire objects.

Unknown fields are ignored by default so that fields added by Twitch do not
break deserialization. Validating with ``context={"deny_unknown_fields": True}``
turns unknown fields into validation errors at every nesting level.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

DENY_UNKNOWN_FIELDS = "deny_unknown_fields"


class HelixModel(BaseModel):
    """Frozen pydantic model for JSON objects returned by Twitch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def reject_unknown_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context and info.context.get(DENY_UNKNOWN_FIELDS)):
            return data
        if not isinstance(data, dict):
            return data
        known: set[str] = set()
        for name, field in cls.model_fields.items():
            known.add(name)
            if field.alias:
                known.add(field.alias)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown field(s) for {cls.__name__}: {unknown}")
        return data


__all__ = ["DENY_UNKNOWN_FIELDS", "HelixModel"]
