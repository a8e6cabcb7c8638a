"""Service configuration for simworld."""

from __future__ import annotations

import dataclasses
import math
import os
from typing import Any

from simworld._constants import (
    DEFAULT_VEHICLE_HEIGHT,
    DEFAULT_VEHICLE_LENGTH,
    DEFAULT_VEHICLE_MODEL,
    DEFAULT_VEHICLE_WIDTH,
    DOWNSAMPLE_STRIDE,
    MAX_MONITOR_ITEMS,
)
from simworld.exceptions import SimWorldConfigError


@dataclasses.dataclass(frozen=True)
class VehicleConfig:
    """Physical parameters of the ego vehicle.

    Parameters
    ----------
    model : str
        Vehicle model key used for the parameter lookup.
    length : float
        Overall length in metres.
    width : float
        Overall width in metres.
    height : float
        Overall height in metres.
    """

    model: str = DEFAULT_VEHICLE_MODEL
    length: float = DEFAULT_VEHICLE_LENGTH
    width: float = DEFAULT_VEHICLE_WIDTH
    height: float = DEFAULT_VEHICLE_HEIGHT

    @classmethod
    def for_model(cls, model: str) -> VehicleConfig:
        """Look up the known parameters for *model*.

        Raises :class:`SimWorldConfigError` for models without parameters.
        """
        params = VEHICLE_PARAMS.get(model.strip().upper())
        if params is None:
            raise SimWorldConfigError(f"no vehicle parameters for model {model!r}")
        return params

    @classmethod
    def from_env(cls, **overrides: Any) -> VehicleConfig:
        """Create vehicle parameters from ``SIMWORLD_VEHICLE_*`` variables.

        ``SIMWORLD_VEHICLE_MODEL`` selects the base parameters; the
        dimension variables and explicit keyword arguments override them.
        """
        env = os.environ

        model = overrides.pop("model", None) or env.get("SIMWORLD_VEHICLE_MODEL")
        base = cls.for_model(model) if model else cls()

        _ENV_DIMENSION_MAP = {
            "SIMWORLD_VEHICLE_LENGTH": "length",
            "SIMWORLD_VEHICLE_WIDTH": "width",
            "SIMWORLD_VEHICLE_HEIGHT": "height",
        }
        kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_DIMENSION_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                kwargs[field_name] = _parse_float(env_key, val)

        kwargs.update(overrides)
        return dataclasses.replace(base, **kwargs)

    def validate(self) -> None:
        """Raise :class:`SimWorldConfigError` unless every dimension is a positive finite number."""
        for name in ("length", "width", "height"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise SimWorldConfigError(f"vehicle {name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise SimWorldConfigError(f"vehicle {name} must be a positive finite number, got {value!r}")


VEHICLE_PARAMS: dict[str, VehicleConfig] = {
    "MKZ": VehicleConfig(model="MKZ", length=4.933, width=2.11, height=1.48),
    "LINCOLN_MKZ": VehicleConfig(model="LINCOLN_MKZ", length=4.933, width=2.11, height=1.48),
}


@dataclasses.dataclass(frozen=True)
class WorldConfig:
    """Simulation world configuration.

    Parameters
    ----------
    max_monitor_items : int
        Capacity of the newest-first monitor log.
    downsample_stride : int
        Every Nth planning point is kept for display.
    vehicle : VehicleConfig
        Ego vehicle parameters.
    """

    max_monitor_items: int = MAX_MONITOR_ITEMS
    downsample_stride: int = DOWNSAMPLE_STRIDE
    vehicle: VehicleConfig = dataclasses.field(default_factory=VehicleConfig)

    @classmethod
    def from_env(cls, **overrides: Any) -> WorldConfig:
        """Create configuration from environment variables.

        Reads ``SIMWORLD_MAX_MONITOR_ITEMS``, ``SIMWORLD_DOWNSAMPLE_STRIDE``
        and the ``SIMWORLD_VEHICLE_*`` variables. Explicit keyword
        arguments override environment values.
        """
        env = os.environ

        vehicle_overrides = overrides.pop("vehicle", None)
        if isinstance(vehicle_overrides, VehicleConfig):
            vehicle = vehicle_overrides
        elif isinstance(vehicle_overrides, dict):
            vehicle = VehicleConfig.from_env(**vehicle_overrides)
        else:
            vehicle = VehicleConfig.from_env()

        config_kwargs: dict[str, Any] = {"vehicle": vehicle}

        items_env = env.get("SIMWORLD_MAX_MONITOR_ITEMS")
        if items_env is not None and "max_monitor_items" not in overrides:
            config_kwargs["max_monitor_items"] = _parse_int("SIMWORLD_MAX_MONITOR_ITEMS", items_env)

        stride_env = env.get("SIMWORLD_DOWNSAMPLE_STRIDE")
        if stride_env is not None and "downsample_stride" not in overrides:
            config_kwargs["downsample_stride"] = _parse_int("SIMWORLD_DOWNSAMPLE_STRIDE", stride_env)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)

    def validate(self) -> None:
        """Raise :class:`SimWorldConfigError` for unusable settings."""
        if self.max_monitor_items < 1:
            raise SimWorldConfigError(f"max_monitor_items must be >= 1, got {self.max_monitor_items}")
        if self.downsample_stride < 1:
            raise SimWorldConfigError(f"downsample_stride must be >= 1, got {self.downsample_stride}")
        self.vehicle.validate()


def _parse_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise SimWorldConfigError(f"{env_key} must be a number, got {value!r}") from exc


def _parse_int(env_key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise SimWorldConfigError(f"{env_key} must be an integer, got {value!r}") from exc
