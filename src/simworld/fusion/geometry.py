"""Planar geometry helpers shared by the fusion handlers."""

from __future__ import annotations

import math

from simworld.models.world import Point2D


def normalize_angle(angle: float) -> float:
    """Wrap *angle* (radians) into ``[-pi, pi)``."""
    wrapped = math.fmod(angle + math.pi, 2.0 * math.pi)
    if wrapped < 0.0:
        wrapped += 2.0 * math.pi
    return wrapped - math.pi


def quaternion_to_heading(qw: float, qx: float, qy: float, qz: float) -> float:
    """Convert an orientation quaternion to a map heading.

    The yaw of the ZXY Euler decomposition is zero when the vehicle points
    north; headings are zero when it points east, hence the ``pi / 2``
    rotation.  Degenerate input (all zeros) is well defined and yields
    the normalized ``pi / 2``.
    """
    yaw = math.atan2(2.0 * (qw * qz - qx * qy), qw * qw - qx * qx + qy * qy - qz * qz)
    return normalize_angle(yaw + math.pi / 2.0)


def bearing(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    return math.atan2(to_y - from_y, to_x - from_x)


def footprint_polygon(x: float, y: float, heading: float, length: float, width: float) -> list[Point2D]:
    """Return the 4 corners of a ``length`` x ``width`` box centred on (x, y).

    Corners run counter-clockwise starting front-left, with the box
    rotated so its length axis points along *heading*.
    """
    cos_h = math.cos(heading)
    sin_h = math.sin(heading)
    half_length = length / 2.0
    half_width = width / 2.0

    corners: list[Point2D] = []
    for dx, dy in (
        (half_length, half_width),
        (-half_length, half_width),
        (-half_length, -half_width),
        (half_length, -half_width),
    ):
        corners.append(Point2D(x=x + dx * cos_h - dy * sin_h, y=y + dx * sin_h + dy * cos_h))
    return corners
