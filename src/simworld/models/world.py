"""Simulation world snapshot models.

The :class:`WorldSnapshot` is the display-oriented aggregate streamed to
front-end renderers.  It is owned and mutated exclusively by
:class:`simworld.service.SimulationWorldService`; callers only ever see
deep copies.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, computed_field

from simworld._constants import AUTO_DRIVING_CAR_TYPE
from simworld.models._base import SimWorldStateModel

# ------------------------------------------------------------------
# Display enums
# ------------------------------------------------------------------


class SignalState(StrEnum):
    """Turn signal state as shown on the ego vehicle."""

    NONE = "NONE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    EMERGENCY = "EMERGENCY"


class ObjectType(StrEnum):
    """Display classification of a perceived object."""

    UNKNOWN = "UNKNOWN"
    UNKNOWN_MOVABLE = "UNKNOWN_MOVABLE"
    UNKNOWN_UNMOVABLE = "UNKNOWN_UNMOVABLE"
    PEDESTRIAN = "PEDESTRIAN"
    BICYCLE = "BICYCLE"
    VEHICLE = "VEHICLE"


class LogSeverity(StrEnum):
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"


# ------------------------------------------------------------------
# Geometry
# ------------------------------------------------------------------


class Point2D(SimWorldStateModel):
    x: float = 0.0
    y: float = 0.0


class PolygonGeometry(SimWorldStateModel):
    """Explicit boundary polygon, in the order received."""

    kind: Literal["polygon"] = "polygon"
    points: list[Point2D] = Field(default_factory=list)


class BoxGeometry(SimWorldStateModel):
    """Oriented box centred on ``position``."""

    kind: Literal["box"] = "box"
    position_x: float = 0.0
    position_y: float = 0.0
    heading: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0


Geometry = Annotated[PolygonGeometry | BoxGeometry, Field(discriminator="kind")]


# ------------------------------------------------------------------
# Snapshot entities
# ------------------------------------------------------------------


class VehicleObject(SimWorldStateModel):
    """The ego vehicle.

    Dimensions are set once from the vehicle configuration.  Chassis
    updates own the dynamics fields, localization updates own the pose.
    """

    id: str = ""
    type: str = AUTO_DRIVING_CAR_TYPE
    timestamp_sec: float = 0.0

    length: float = 0.0
    width: float = 0.0
    height: float = 0.0

    speed: float = 0.0
    throttle_percentage: float = 0.0
    brake_percentage: float = 0.0
    steering_angle: float = 0.0
    current_signal: SignalState = SignalState.NONE
    driving_mode: str = ""

    position_x: float = 0.0
    position_y: float = 0.0
    heading: float = 0.0


class DisplayObject(SimWorldStateModel):
    """One perceived obstacle.

    Exactly one geometry shape is carried.  The flat accessors mirror the
    renderer's record layout and read zero/empty for the absent shape.
    """

    id: str
    timestamp_sec: float = 0.0
    type: ObjectType = ObjectType.UNKNOWN
    geometry: Geometry = Field(default_factory=BoxGeometry)

    @property
    def polygon(self) -> list[Point2D]:
        if isinstance(self.geometry, PolygonGeometry):
            return self.geometry.points
        return []

    @computed_field(alias="polygonPointSize")  # type: ignore[prop-decorator]
    @property
    def polygon_point_size(self) -> int:
        return len(self.polygon)

    def _box_value(self, name: str) -> float:
        if isinstance(self.geometry, BoxGeometry):
            value: float = getattr(self.geometry, name)
            return value
        return 0.0

    @property
    def position_x(self) -> float:
        return self._box_value("position_x")

    @property
    def position_y(self) -> float:
        return self._box_value("position_y")

    @property
    def heading(self) -> float:
        return self._box_value("heading")

    @property
    def length(self) -> float:
        return self._box_value("length")

    @property
    def width(self) -> float:
        return self._box_value("width")

    @property
    def height(self) -> float:
        return self._box_value("height")


class TrajectoryPoint(SimWorldStateModel):
    """A downsampled planning point with its vehicle footprint."""

    position_x: float = 0.0
    position_y: float = 0.0
    heading: float = 0.0
    polygon: list[Point2D] = Field(default_factory=list)

    @computed_field(alias="polygonPointSize")  # type: ignore[prop-decorator]
    @property
    def polygon_point_size(self) -> int:
        return len(self.polygon)


class LogItem(SimWorldStateModel):
    """A monitor log line. Never mutated once created."""

    msg: str = ""
    level: LogSeverity = LogSeverity.INFO
    source: str = ""


class WorldSnapshot(SimWorldStateModel):
    """Root aggregate of the simulation world."""

    timestamp_sec: float = 0.0
    sequence_num: int = 0
    autonomous_vehicle: VehicleObject = Field(default_factory=VehicleObject)
    objects: list[DisplayObject] = Field(default_factory=list)
    planning_trajectory: list[TrajectoryPoint] = Field(default_factory=list)
    monitor_log: list[LogItem] = Field(default_factory=list)
    monitor_timestamp_sec: float = 0.0
