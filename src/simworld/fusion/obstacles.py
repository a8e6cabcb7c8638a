"""Perception obstacle to display object mapping."""

from __future__ import annotations

from collections.abc import Sequence

from simworld.models.messages import ObstacleType, PerceptionObstacle
from simworld.models.world import BoxGeometry, DisplayObject, ObjectType, Point2D, PolygonGeometry

_OBJECT_TYPES: dict[ObstacleType, ObjectType] = {
    ObstacleType.UNKNOWN: ObjectType.UNKNOWN,
    ObstacleType.UNKNOWN_MOVABLE: ObjectType.UNKNOWN_MOVABLE,
    ObstacleType.UNKNOWN_UNMOVABLE: ObjectType.UNKNOWN_UNMOVABLE,
    ObstacleType.PEDESTRIAN: ObjectType.PEDESTRIAN,
    ObstacleType.BICYCLE: ObjectType.BICYCLE,
    ObstacleType.VEHICLE: ObjectType.VEHICLE,
}


def to_display_object(obstacle: PerceptionObstacle) -> DisplayObject:
    """Map one obstacle; polygon geometry wins over the box pose when present."""
    geometry: PolygonGeometry | BoxGeometry
    if obstacle.polygon_point:
        geometry = PolygonGeometry(points=[Point2D(x=p.x, y=p.y) for p in obstacle.polygon_point])
    else:
        geometry = BoxGeometry(
            position_x=obstacle.position.x,
            position_y=obstacle.position.y,
            heading=obstacle.theta,
            length=obstacle.length,
            width=obstacle.width,
            height=obstacle.height,
        )
    return DisplayObject(
        id=str(obstacle.id),
        timestamp_sec=obstacle.timestamp,
        type=_OBJECT_TYPES[obstacle.type],
        geometry=geometry,
    )


def map_obstacles(obstacles: Sequence[PerceptionObstacle]) -> list[DisplayObject]:
    """One display object per obstacle, in input order."""
    return [to_display_object(obstacle) for obstacle in obstacles]
