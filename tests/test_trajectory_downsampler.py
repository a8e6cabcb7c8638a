from __future__ import annotations

import math

import pytest

from simworld.config import VehicleConfig
from simworld.fusion.trajectory import downsample_trajectory, sample_indices
from simworld.models.messages import ADCTrajectory, PathPoint, PlannedPoint


def _path(count: int) -> list[PlannedPoint]:
    return [PlannedPoint(path_point=PathPoint(x=i * 10, y=i * 10 + 10)) for i in range(count)]


def test_thirty_points_downsample_to_four() -> None:
    points = downsample_trajectory(_path(30), VehicleConfig())

    assert len(points) == 4

    first = points[0]
    assert first.position_x == 0.0
    assert first.position_y == 10.0
    assert first.heading == pytest.approx(math.atan2(100.0, 100.0))
    assert first.polygon_point_size == 4

    last = points[3]
    assert last.position_x == 280.0
    assert last.position_y == 290.0
    assert last.heading == pytest.approx(math.atan2(100.0, 100.0))
    assert last.polygon_point_size == 4


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, []),
        (1, []),
        (2, [0]),
        (3, [0, 1]),
        (11, [0, 9]),
        (12, [0, 10]),
        (30, [0, 10, 20, 28]),
        (31, [0, 10, 20, 29]),
    ],
)
def test_sample_indices(count: int, expected: list[int]) -> None:
    assert sample_indices(count) == expected


def test_sample_indices_custom_stride() -> None:
    assert sample_indices(7, stride=2) == [0, 2, 4, 5]


def test_empty_path_yields_empty_output() -> None:
    assert downsample_trajectory([], VehicleConfig()) == []


def test_heading_faces_next_kept_point_and_last_carries_forward() -> None:
    raw = [(0.0, 0.0), (5.0, 0.0), (5.0, 5.0), (9.0, 9.0)]
    path = [PlannedPoint(path_point=PathPoint(x=x, y=y)) for x, y in raw]

    points = downsample_trajectory(path, VehicleConfig(), stride=1)

    assert [(p.position_x, p.position_y) for p in points] == [(0.0, 0.0), (5.0, 0.0), (5.0, 5.0)]
    assert points[0].heading == pytest.approx(0.0)
    assert points[1].heading == pytest.approx(math.pi / 2)
    assert points[2].heading == pytest.approx(math.pi / 2)


def test_single_kept_point_faces_raw_successor() -> None:
    path = [PlannedPoint(path_point=PathPoint(x=0.0, y=0.0)), PlannedPoint(path_point=PathPoint(x=0.0, y=-3.0))]

    points = downsample_trajectory(path, VehicleConfig())

    assert len(points) == 1
    assert points[0].heading == pytest.approx(-math.pi / 2)


def test_single_point_path_yields_empty_output() -> None:
    points = downsample_trajectory([PlannedPoint(path_point=PathPoint(x=1.0, y=2.0))], VehicleConfig())

    assert points == []


def test_footprint_uses_vehicle_dimensions() -> None:
    vehicle = VehicleConfig(length=4.0, width=2.0, height=1.5)
    path = [PlannedPoint(path_point=PathPoint(x=10.0 * i, y=0.0)) for i in range(3)]

    point = downsample_trajectory(path, vehicle)[0]

    xs = sorted(p.x for p in point.polygon)
    ys = sorted(p.y for p in point.polygon)
    assert xs[0] == pytest.approx(-2.0)
    assert xs[-1] == pytest.approx(2.0)
    assert ys[0] == pytest.approx(-1.0)
    assert ys[-1] == pytest.approx(1.0)


def test_points_before_cutoff_are_dropped() -> None:
    trajectory = ADCTrajectory.model_validate(
        {
            "header": {"timestampSec": 100.0},
            "trajectoryPoint": [
                {"pathPoint": {"x": float(i), "y": 0.0}, "relativeTime": 0.1 * i} for i in range(20)
            ],
        }
    )

    points = downsample_trajectory(
        trajectory.trajectory_point,
        VehicleConfig(),
        header_time=trajectory.header.timestamp_sec,
        cutoff_time=100.55,
    )

    # Points 0..5 are stale; 14 remain (x = 6..19) -> indices 0, 10, 12.
    assert [p.position_x for p in points] == [6.0, 16.0, 18.0]


def test_cutoff_ignored_without_header_time() -> None:
    points = downsample_trajectory(_path(30), VehicleConfig(), cutoff_time=1_000.0)

    assert len(points) == 4
