"""Simulation world service.

This is the only component allowed to mutate the world snapshot.  Each
inbound message is routed to exactly one fusion handler, which updates
only the snapshot fields it owns.  Writers and readers are serialized by
a single lock, and readers always receive a deep copy.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from simworld._logsafe import summarize_for_log
from simworld.config import WorldConfig
from simworld.exceptions import SimWorldMessageError, SimWorldUnsupportedMessageError
from simworld.fusion.monitor import merge_monitor_items, to_log_items
from simworld.fusion.obstacles import map_obstacles
from simworld.fusion.trajectory import downsample_trajectory
from simworld.fusion.vehicle import apply_chassis, apply_localization, create_vehicle
from simworld.models.messages import (
    ADCTrajectory,
    Chassis,
    Header,
    LocalizationEstimate,
    MonitorMessage,
    PerceptionObstacles,
)
from simworld.models.world import WorldSnapshot

_logger = logging.getLogger(__name__)


class MessageKind(StrEnum):
    CHASSIS = "chassis"
    LOCALIZATION = "localization"
    PLANNING = "planning"
    PERCEPTION = "perception"
    MONITOR = "monitor"


_MESSAGE_MODELS: dict[MessageKind, type[BaseModel]] = {
    MessageKind.CHASSIS: Chassis,
    MessageKind.LOCALIZATION: LocalizationEstimate,
    MessageKind.PLANNING: ADCTrajectory,
    MessageKind.PERCEPTION: PerceptionObstacles,
    MessageKind.MONITOR: MonitorMessage,
}


class SimulationWorldService:
    """Owner of the simulation world snapshot.

    Updates are applied synchronously and run to completion under the
    lock; no update blocks, performs I/O or can be cancelled.  There is
    no cross-kind atomicity: a reader may see a fresh trajectory next to
    an older vehicle pose.
    """

    def __init__(self, config: WorldConfig | None = None) -> None:
        self._config = config if config is not None else WorldConfig.from_env()
        # Raises SimWorldConfigError before any update can be applied.
        self._config.validate()
        self._lock = threading.RLock()
        self._world = WorldSnapshot(autonomous_vehicle=create_vehicle(self._config.vehicle))
        self._handlers: dict[type[BaseModel], Callable[[Any], None]] = {
            Chassis: self._update_chassis,
            LocalizationEstimate: self._update_localization,
            ADCTrajectory: self._update_planning,
            PerceptionObstacles: self._update_perception,
            MonitorMessage: self._update_monitor,
        }

    @property
    def config(self) -> WorldConfig:
        return self._config

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def update(self, message: BaseModel) -> None:
        """Apply one inbound message to the snapshot."""
        handler = self._handlers.get(type(message))
        if handler is None:
            raise SimWorldUnsupportedMessageError(f"no handler for message type {type(message).__name__}")

        with self._lock:
            handler(message)
            header: Header = message.header  # type: ignore[attr-defined]
            self._world.sequence_num += 1
            self._world.timestamp_sec = max(self._world.timestamp_sec, header.timestamp_sec)
            sequence_num = self._world.sequence_num

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "Applied %s seq=%d payload=%s",
                type(message).__name__,
                sequence_num,
                summarize_for_log(message.model_dump()),
            )

    def update_from_dict(self, kind: MessageKind | str, payload: dict[str, Any]) -> None:
        """Parse a raw payload of the given kind and apply it.

        Raises :class:`SimWorldMessageError` for unknown kinds or payloads
        that do not fit the message model.
        """
        try:
            message_kind = MessageKind(kind)
        except ValueError as exc:
            raise SimWorldMessageError(f"unknown message kind {kind!r}", kind=str(kind)) from exc

        model = _MESSAGE_MODELS[message_kind]
        try:
            message = model.model_validate(payload)
        except ValidationError as exc:
            raise SimWorldMessageError(f"invalid {message_kind} payload: {exc}", kind=message_kind) from exc
        self.update(message)

    def update_chassis(self, chassis: Chassis) -> None:
        self.update(chassis)

    def update_localization(self, localization: LocalizationEstimate) -> None:
        self.update(localization)

    def update_planning(self, trajectory: ADCTrajectory) -> None:
        self.update(trajectory)

    def update_perception(self, obstacles: PerceptionObstacles) -> None:
        self.update(obstacles)

    def update_monitor(self, monitor: MonitorMessage) -> None:
        self.update(monitor)

    # ------------------------------------------------------------------
    # Handlers (called with the lock held)
    # ------------------------------------------------------------------

    def _update_chassis(self, chassis: Chassis) -> None:
        apply_chassis(self._world.autonomous_vehicle, chassis)

    def _update_localization(self, localization: LocalizationEstimate) -> None:
        apply_localization(self._world.autonomous_vehicle, localization)

    def _update_planning(self, trajectory: ADCTrajectory) -> None:
        self._world.planning_trajectory = downsample_trajectory(
            trajectory.trajectory_point,
            self._config.vehicle,
            stride=self._config.downsample_stride,
            header_time=trajectory.header.timestamp_sec,
            cutoff_time=self._world.autonomous_vehicle.timestamp_sec,
        )

    def _update_perception(self, obstacles: PerceptionObstacles) -> None:
        self._world.objects = map_obstacles(obstacles.perception_obstacle)

    def _update_monitor(self, monitor: MonitorMessage) -> None:
        self._world.monitor_log = merge_monitor_items(
            self._world.monitor_log,
            to_log_items(monitor.item),
            capacity=self._config.max_monitor_items,
        )
        self._world.monitor_timestamp_sec = monitor.header.timestamp_sec

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def snapshot(self) -> WorldSnapshot:
        """Return a deep copy of the world, consistent with the last completed update."""
        with self._lock:
            return self._world.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the world for the broadcaster (camelCase keys)."""
        return self.snapshot().model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
