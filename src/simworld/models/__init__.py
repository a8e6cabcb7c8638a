"""Data models for inbound telemetry and the outbound world snapshot."""

from simworld.models._base import SimWorldBaseModel, SimWorldEnum, SimWorldStateModel
from simworld.models.messages import (
    ADCTrajectory,
    Chassis,
    DrivingMode,
    Header,
    LocalizationEstimate,
    LogLevel,
    MonitorItem,
    MonitorMessage,
    ObstacleType,
    PathPoint,
    PerceptionObstacle,
    PerceptionObstacles,
    PlannedPoint,
    Point,
    Pose,
    Quaternion,
    TurnSignal,
    VehicleSignal,
)
from simworld.models.world import (
    BoxGeometry,
    DisplayObject,
    LogItem,
    LogSeverity,
    ObjectType,
    Point2D,
    PolygonGeometry,
    SignalState,
    TrajectoryPoint,
    VehicleObject,
    WorldSnapshot,
)

__all__ = [
    "ADCTrajectory",
    "BoxGeometry",
    "Chassis",
    "DisplayObject",
    "DrivingMode",
    "Header",
    "LocalizationEstimate",
    "LogItem",
    "LogLevel",
    "LogSeverity",
    "MonitorItem",
    "MonitorMessage",
    "ObjectType",
    "ObstacleType",
    "PathPoint",
    "PerceptionObstacle",
    "PerceptionObstacles",
    "PlannedPoint",
    "Point",
    "Point2D",
    "PolygonGeometry",
    "Pose",
    "Quaternion",
    "SignalState",
    "SimWorldBaseModel",
    "SimWorldEnum",
    "SimWorldStateModel",
    "TrajectoryPoint",
    "TurnSignal",
    "VehicleObject",
    "VehicleSignal",
    "WorldSnapshot",
]
