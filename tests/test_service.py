from __future__ import annotations

import json
import math
import threading

import pytest

from simworld.config import VehicleConfig, WorldConfig
from simworld.exceptions import SimWorldConfigError, SimWorldMessageError, SimWorldUnsupportedMessageError
from simworld.fusion.geometry import quaternion_to_heading
from simworld.models.messages import (
    ADCTrajectory,
    Chassis,
    Header,
    LocalizationEstimate,
    MonitorItem,
    MonitorMessage,
    PathPoint,
    PerceptionObstacle,
    PerceptionObstacles,
    PlannedPoint,
    Point,
    TurnSignal,
    VehicleSignal,
)
from simworld.models.world import LogItem
from simworld.service import MessageKind, SimulationWorldService


@pytest.fixture
def service() -> SimulationWorldService:
    return SimulationWorldService(WorldConfig())


def test_update_monitor_success(service: SimulationWorldService) -> None:
    service._world.monitor_log.append(LogItem(msg="I am the previous message."))  # noqa: SLF001
    service._world.monitor_timestamp_sec = 1990  # noqa: SLF001

    service.update(
        MonitorMessage(header=Header(timestamp_sec=2000), item=[MonitorItem(msg="I am the latest message.")])
    )

    world = service.snapshot()
    assert [item.msg for item in world.monitor_log] == ["I am the latest message.", "I am the previous message."]
    assert world.monitor_timestamp_sec == 2000


def test_monitor_capacity_follows_config() -> None:
    service = SimulationWorldService(WorldConfig(max_monitor_items=3))

    for i in range(5):
        service.update_monitor(MonitorMessage(item=[MonitorItem(msg=f"I am message {i}")]))

    assert [item.msg for item in service.snapshot().monitor_log] == [
        "I am message 4",
        "I am message 3",
        "I am message 2",
    ]


def test_update_chassis_info(service: SimulationWorldService) -> None:
    service.update_chassis(
        Chassis(
            speed_mps=25,
            throttle_percentage=50,
            brake_percentage=10,
            steering_percentage=25,
            signal=VehicleSignal(turn_signal=TurnSignal.TURN_RIGHT),
        )
    )

    car = service.snapshot().autonomous_vehicle
    assert car.length == 4.933
    assert car.width == 2.11
    assert car.height == 1.48
    assert car.speed == 25.0
    assert car.throttle_percentage == 50.0
    assert car.brake_percentage == 10.0
    assert car.steering_angle == 25.0
    assert car.current_signal == "RIGHT"


def test_update_localization(service: SimulationWorldService) -> None:
    service.update_from_dict(
        "localization",
        {"pose": {"position": {"x": 1.0, "y": 1.5}, "orientation": {"qx": 0.0, "qy": 0.0, "qz": 0.0, "qw": 0.0}}},
    )

    car = service.snapshot().autonomous_vehicle
    assert car.position_x == 1.0
    assert car.position_y == 1.5
    assert car.heading == quaternion_to_heading(0.0, 0.0, 0.0, 0.0)


def test_update_planning_trajectory(service: SimulationWorldService) -> None:
    trajectory = ADCTrajectory(
        trajectory_point=[PlannedPoint(path_point=PathPoint(x=i * 10, y=i * 10 + 10)) for i in range(30)]
    )

    service.update_planning(trajectory)

    points = service.snapshot().planning_trajectory
    assert len(points) == 4
    assert (points[0].position_x, points[0].position_y) == (0.0, 10.0)
    assert (points[3].position_x, points[3].position_y) == (280.0, 290.0)
    assert points[0].heading == pytest.approx(math.atan2(100.0, 100.0))
    assert points[3].heading == pytest.approx(math.atan2(100.0, 100.0))
    assert all(point.polygon_point_size == 4 for point in points)


def test_planning_cutoff_uses_vehicle_timestamp(service: SimulationWorldService) -> None:
    service.update(LocalizationEstimate(header=Header(timestamp_sec=10.0)))

    service.update(
        ADCTrajectory(
            header=Header(timestamp_sec=9.0),
            trajectory_point=[
                PlannedPoint(path_point=PathPoint(x=float(i)), relative_time=float(i)) for i in range(5)
            ],
        )
    )

    # The point at 9.0 s predates the last pose; x = 1..4 remain, indices 0 and 2 are kept.
    assert [p.position_x for p in service.snapshot().planning_trajectory] == [1.0, 3.0]


def test_update_perception_replaces_objects(service: SimulationWorldService) -> None:
    service.update(PerceptionObstacles(perception_obstacle=[PerceptionObstacle(id=1), PerceptionObstacle(id=2)]))
    service.update(
        PerceptionObstacles(
            perception_obstacle=[PerceptionObstacle(id=3, polygon_point=[Point(x=1.0, y=1.0)])],
        )
    )

    objects = service.snapshot().objects
    assert [o.id for o in objects] == ["3"]
    assert objects[0].polygon_point_size == 1


def test_updates_touch_only_their_own_fields(service: SimulationWorldService) -> None:
    service.update(Chassis(speed_mps=3.0))
    service.update(MonitorMessage(item=[MonitorItem(msg="hello")]))
    service.update(PerceptionObstacles(perception_obstacle=[PerceptionObstacle(id=1)]))

    service.update(LocalizationEstimate.model_validate({"pose": {"position": {"x": 5.0}}}))

    world = service.snapshot()
    assert world.autonomous_vehicle.speed == 3.0
    assert world.autonomous_vehicle.position_x == 5.0
    assert [item.msg for item in world.monitor_log] == ["hello"]
    assert [o.id for o in world.objects] == ["1"]
    assert world.planning_trajectory == []


def test_sequence_and_timestamp_tracking(service: SimulationWorldService) -> None:
    service.update(Chassis(header=Header(timestamp_sec=5.0)))
    service.update(MonitorMessage(header=Header(timestamp_sec=3.0)))

    world = service.snapshot()
    assert world.sequence_num == 2
    assert world.timestamp_sec == 5.0


def test_snapshot_is_a_copy(service: SimulationWorldService) -> None:
    world = service.snapshot()
    world.autonomous_vehicle.speed = 99.0
    world.monitor_log.append(LogItem(msg="mine"))

    fresh = service.snapshot()
    assert fresh.autonomous_vehicle.speed == 0.0
    assert fresh.monitor_log == []


def test_unsupported_message_rejected(service: SimulationWorldService) -> None:
    with pytest.raises(SimWorldUnsupportedMessageError):
        service.update(Header())  # type: ignore[arg-type]


def test_update_from_dict_unknown_kind(service: SimulationWorldService) -> None:
    with pytest.raises(SimWorldMessageError):
        service.update_from_dict("routing", {})


def test_update_from_dict_invalid_payload(service: SimulationWorldService) -> None:
    with pytest.raises(SimWorldMessageError) as excinfo:
        service.update_from_dict(MessageKind.CHASSIS, {"speedMps": "fast"})

    assert excinfo.value.kind == MessageKind.CHASSIS


def test_to_dict_uses_camel_case_keys(service: SimulationWorldService) -> None:
    service.update(PerceptionObstacles(perception_obstacle=[PerceptionObstacle(id=4, length=2.0)]))

    data = service.to_dict()

    assert data["autonomousVehicle"]["currentSignal"] == "NONE"
    assert data["objects"][0]["geometry"]["kind"] == "box"
    assert data["objects"][0]["polygonPointSize"] == 0
    assert json.loads(service.to_json()) == data


def test_invalid_vehicle_config_fails_at_construction() -> None:
    with pytest.raises(SimWorldConfigError):
        SimulationWorldService(WorldConfig(vehicle=VehicleConfig(length=0.0)))


def test_concurrent_monitor_updates_keep_cap() -> None:
    service = SimulationWorldService(WorldConfig())

    def _writer(prefix: str) -> None:
        for i in range(50):
            service.update(MonitorMessage(item=[MonitorItem(msg=f"{prefix}{i}")]))

    threads = [threading.Thread(target=_writer, args=(name,)) for name in ("a", "b", "c")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    world = service.snapshot()
    assert world.sequence_num == 150
    assert len(world.monitor_log) == 30
