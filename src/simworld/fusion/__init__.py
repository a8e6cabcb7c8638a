"""Fusion layer.

One handler per inbound message kind.  Each is a bounded, side-effect
free transformation (or an in-place update of the one snapshot field
group it owns) and never depends on another handler having run.
"""

from simworld.fusion.geometry import footprint_polygon, normalize_angle, quaternion_to_heading
from simworld.fusion.monitor import merge_monitor_items
from simworld.fusion.obstacles import map_obstacles
from simworld.fusion.trajectory import downsample_trajectory, sample_indices
from simworld.fusion.vehicle import apply_chassis, apply_localization

__all__ = [
    "apply_chassis",
    "apply_localization",
    "downsample_trajectory",
    "footprint_polygon",
    "map_obstacles",
    "merge_monitor_items",
    "normalize_angle",
    "quaternion_to_heading",
    "sample_indices",
]
