"""simworld - Simulation world state aggregation for AV visualization."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("simworld")
except PackageNotFoundError:
    __version__ = "0+local"
from simworld.config import VehicleConfig, WorldConfig
from simworld.exceptions import (
    SimWorldConfigError,
    SimWorldError,
    SimWorldMessageError,
    SimWorldUnsupportedMessageError,
)
from simworld.fusion import (
    downsample_trajectory,
    map_obstacles,
    merge_monitor_items,
    quaternion_to_heading,
)
from simworld.models import (
    ADCTrajectory,
    Chassis,
    DisplayObject,
    LocalizationEstimate,
    LogItem,
    MonitorMessage,
    ObjectType,
    PerceptionObstacles,
    SignalState,
    TrajectoryPoint,
    VehicleObject,
    WorldSnapshot,
)
from simworld.service import MessageKind, SimulationWorldService

__all__ = [
    "__version__",
    "ADCTrajectory",
    "Chassis",
    "DisplayObject",
    "LocalizationEstimate",
    "LogItem",
    "MessageKind",
    "MonitorMessage",
    "ObjectType",
    "PerceptionObstacles",
    "SignalState",
    "SimWorldConfigError",
    "SimWorldError",
    "SimWorldMessageError",
    "SimWorldUnsupportedMessageError",
    "SimulationWorldService",
    "TrajectoryPoint",
    "VehicleConfig",
    "VehicleObject",
    "WorldConfig",
    "WorldSnapshot",
    "downsample_trajectory",
    "map_obstacles",
    "merge_monitor_items",
    "quaternion_to_heading",
]
