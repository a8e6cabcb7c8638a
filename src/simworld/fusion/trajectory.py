"""Planning trajectory downsampling for display.

A planning path carries tens to hundreds of points; the renderer only
needs a handful.  Points are picked at a fixed stride:

- index 0 and every ``stride``-th index after it, below ``N - 1``;
- index ``N - 2``, so the far end of the path is always represented.

The raw last point has no successor and is never picked, so a
single-point path yields nothing.  With the default stride of 10, a
30-point path yields indices 0, 10, 20 and 28.

Each picked point faces the next picked point.  The final one keeps the
bearing of the segment leading into it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from simworld._constants import DOWNSAMPLE_STRIDE
from simworld.config import VehicleConfig
from simworld.fusion.geometry import bearing, footprint_polygon
from simworld.models.messages import PathPoint, PlannedPoint
from simworld.models.world import TrajectoryPoint

_logger = logging.getLogger(__name__)


def sample_indices(count: int, stride: int = DOWNSAMPLE_STRIDE) -> list[int]:
    """Return the indices kept from a path of *count* points."""
    if count < 2:
        return []
    indices = list(range(0, count - 1, stride))
    if indices[-1] != count - 2:
        indices.append(count - 2)
    return indices


def _headings(kept: list[PathPoint], successor: PathPoint) -> list[float]:
    if len(kept) == 1:
        only = kept[0]
        return [bearing(only.x, only.y, successor.x, successor.y)]

    headings = [bearing(a.x, a.y, b.x, b.y) for a, b in zip(kept, kept[1:], strict=False)]
    headings.append(headings[-1])
    return headings


def downsample_trajectory(
    points: Sequence[PlannedPoint],
    vehicle: VehicleConfig,
    *,
    stride: int = DOWNSAMPLE_STRIDE,
    header_time: float = 0.0,
    cutoff_time: float = 0.0,
) -> list[TrajectoryPoint]:
    """Reduce a dense planning path to display points with footprints.

    Parameters
    ----------
    points
        Planned points in path order.
    vehicle
        Supplies the footprint dimensions.
    stride
        Keep every Nth point.
    header_time
        Planning header timestamp.  When set, points whose absolute time
        (``header_time + relative_time``) lies before *cutoff_time* are
        dropped first.
    cutoff_time
        Typically the ego vehicle's last localization timestamp.
    """
    path = [point.path_point for point in points if not _is_stale(point, header_time, cutoff_time)]
    if len(path) < len(points):
        _logger.debug("Dropped %d planning points older than cutoff=%s", len(points) - len(path), cutoff_time)

    indices = sample_indices(len(path), stride)
    if not indices:
        return []

    kept = [path[i] for i in indices]
    # The last kept index is N - 2, so a raw successor always exists.
    successor = path[indices[-1] + 1]
    headings = _headings(kept, successor)

    return [
        TrajectoryPoint(
            position_x=point.x,
            position_y=point.y,
            heading=heading,
            polygon=footprint_polygon(point.x, point.y, heading, vehicle.length, vehicle.width),
        )
        for point, heading in zip(kept, headings, strict=True)
    ]


def _is_stale(point: PlannedPoint, header_time: float, cutoff_time: float) -> bool:
    if header_time <= 0.0:
        return False
    return header_time + point.relative_time < cutoff_time
