"""Base model and enum for inbound telemetry and outbound world models.

Every simworld model inherits from :class:`SimWorldBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase keys from the transport map
  automatically to snake_case fields (snake_case is accepted as well).
* A ``model_validator(mode="before")`` that strips ``None``, empty
  strings and NaN so the field default is used.  Absent numeric fields
  therefore read as ``0.0``.

Closed enumerations inherit from :class:`SimWorldEnum` which resolves
unmapped values to ``UNKNOWN`` (or the first member) instead of raising.
"""

from __future__ import annotations

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# Values transports use for "not available".
_SENTINELS = frozenset({"", "--", "NaN", "nan"})


class SimWorldEnum(enum.IntEnum):
    """Base for upstream enumerations.

    Values without a mapped member resolve to ``UNKNOWN`` when the
    subclass defines one, otherwise to the first member.  Member names
    are also accepted, so ``"TURN_RIGHT"`` and ``2`` parse alike.
    """

    @classmethod
    def _missing_(cls, value: object) -> SimWorldEnum:
        if isinstance(value, str):
            text = value.strip()
            member = cls.__members__.get(text.upper())
            if member is not None:
                return member
            try:
                return cls(int(text))
            except ValueError:
                pass
        elif isinstance(value, float) and value.is_integer():
            return cls(int(value))
        if hasattr(cls, "UNKNOWN"):
            unknown: SimWorldEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class SimWorldBaseModel(BaseModel):
    """Base for inbound message models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _drop_missing_values(cls, values: Any) -> Any:
        """Strip sentinel values so field defaults apply."""
        if not isinstance(values, dict):
            return values
        return SimWorldBaseModel._clean_dict(values)


class SimWorldStateModel(BaseModel):
    """Base for the mutable world snapshot models.

    Unlike inbound messages these are owned and mutated in place by the
    service, so they are not frozen.  Serialization uses camelCase keys.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
