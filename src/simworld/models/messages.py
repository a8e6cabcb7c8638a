"""Inbound telemetry message models.

These mirror the five upstream message kinds the simulation world folds
into its snapshot: chassis, localization, planning trajectory, perception
obstacles and monitor log batches.  Every numeric field defaults to
``0.0`` so partially-populated messages are accepted as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from simworld.models._base import SimWorldBaseModel, SimWorldEnum

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class TurnSignal(SimWorldEnum):
    """Chassis turn signal lever state."""

    UNKNOWN = -1
    TURN_NONE = 0
    TURN_LEFT = 1
    TURN_RIGHT = 2


class DrivingMode(SimWorldEnum):
    """Chassis driving mode."""

    UNKNOWN = -1
    COMPLETE_MANUAL = 0
    COMPLETE_AUTO_DRIVE = 1
    AUTO_STEER_ONLY = 2
    AUTO_SPEED_ONLY = 3
    EMERGENCY_MODE = 4


class ObstacleType(SimWorldEnum):
    """Perception obstacle classification."""

    UNKNOWN = 0
    UNKNOWN_MOVABLE = 1
    UNKNOWN_UNMOVABLE = 2
    PEDESTRIAN = 3
    BICYCLE = 4
    VEHICLE = 5


class LogLevel(SimWorldEnum):
    """Severity of a monitor log item."""

    INFO = 0
    WARN = 1
    ERROR = 2
    FATAL = 3


# ------------------------------------------------------------------
# Shared pieces
# ------------------------------------------------------------------


class Header(SimWorldBaseModel):
    """Common message header."""

    timestamp_sec: float = 0.0
    module_name: str = ""
    sequence_num: int = 0


class Point(SimWorldBaseModel):
    """A point in the map frame (metres)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Quaternion(SimWorldBaseModel):
    qw: float = 0.0
    qx: float = 0.0
    qy: float = 0.0
    qz: float = 0.0


# ------------------------------------------------------------------
# Chassis
# ------------------------------------------------------------------


class VehicleSignal(SimWorldBaseModel):
    turn_signal: TurnSignal = TurnSignal.TURN_NONE
    emergency_light: bool = False

    @field_validator("turn_signal", mode="before")
    @classmethod
    def _coerce_turn_signal(cls, value: Any) -> TurnSignal:
        return TurnSignal(value)


class Chassis(SimWorldBaseModel):
    """Chassis (CAN bus) state report."""

    header: Header = Field(default_factory=Header)
    speed_mps: float = 0.0
    throttle_percentage: float = 0.0
    brake_percentage: float = 0.0
    steering_percentage: float = 0.0
    driving_mode: DrivingMode = DrivingMode.COMPLETE_MANUAL
    signal: VehicleSignal = Field(default_factory=VehicleSignal)

    @field_validator("driving_mode", mode="before")
    @classmethod
    def _coerce_driving_mode(cls, value: Any) -> DrivingMode:
        return DrivingMode(value)


# ------------------------------------------------------------------
# Localization
# ------------------------------------------------------------------


class Pose(SimWorldBaseModel):
    position: Point = Field(default_factory=Point)
    orientation: Quaternion = Field(default_factory=Quaternion)
    heading: float = 0.0
    """Upstream heading, if any. Not used: the display heading is always derived from ``orientation``."""


class LocalizationEstimate(SimWorldBaseModel):
    """Localization pose estimate."""

    header: Header = Field(default_factory=Header)
    pose: Pose = Field(default_factory=Pose)


# ------------------------------------------------------------------
# Planning
# ------------------------------------------------------------------


class PathPoint(SimWorldBaseModel):
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    s: float = 0.0


class PlannedPoint(SimWorldBaseModel):
    """A single point of the planned trajectory."""

    path_point: PathPoint = Field(default_factory=PathPoint)
    relative_time: float = 0.0
    v: float = 0.0


class ADCTrajectory(SimWorldBaseModel):
    """Planning output: a dense, time-parameterized path."""

    header: Header = Field(default_factory=Header)
    trajectory_point: list[PlannedPoint] = Field(default_factory=list)


# ------------------------------------------------------------------
# Perception
# ------------------------------------------------------------------


class PerceptionObstacle(SimWorldBaseModel):
    """A single tracked obstacle.

    Carries either ``polygon_point`` geometry or a box pose
    (``position``, ``theta``, ``length``, ``width``, ``height``).
    """

    id: int = 0
    position: Point = Field(default_factory=Point)
    theta: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    polygon_point: list[Point] = Field(default_factory=list)
    timestamp: float = 0.0
    type: ObstacleType = ObstacleType.UNKNOWN

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> ObstacleType:
        return ObstacleType(value)


class PerceptionObstacles(SimWorldBaseModel):
    """Perception output for one frame."""

    header: Header = Field(default_factory=Header)
    perception_obstacle: list[PerceptionObstacle] = Field(default_factory=list)


# ------------------------------------------------------------------
# Monitor
# ------------------------------------------------------------------


class MonitorItem(SimWorldBaseModel):
    source: str = ""
    msg: str = ""
    log_level: LogLevel = LogLevel.INFO

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, value: Any) -> LogLevel:
        return LogLevel(value)


class MonitorMessage(SimWorldBaseModel):
    """A batch of operator-facing monitor messages, in arrival order."""

    header: Header = Field(default_factory=Header)
    item: list[MonitorItem] = Field(default_factory=list)
