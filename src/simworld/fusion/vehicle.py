"""Ego vehicle updates from chassis and localization messages.

The two entry points own disjoint field groups of
:class:`simworld.models.world.VehicleObject`; neither touches the
dimensions, which are set once from the vehicle configuration.
"""

from __future__ import annotations

from simworld.config import VehicleConfig
from simworld.fusion.geometry import quaternion_to_heading
from simworld.models.messages import Chassis, LocalizationEstimate, TurnSignal
from simworld.models.world import SignalState, VehicleObject

_TURN_SIGNALS: dict[TurnSignal, SignalState] = {
    TurnSignal.UNKNOWN: SignalState.NONE,
    TurnSignal.TURN_NONE: SignalState.NONE,
    TurnSignal.TURN_LEFT: SignalState.LEFT,
    TurnSignal.TURN_RIGHT: SignalState.RIGHT,
}


def create_vehicle(vehicle: VehicleConfig) -> VehicleObject:
    return VehicleObject(length=vehicle.length, width=vehicle.width, height=vehicle.height)


def signal_state(chassis: Chassis) -> SignalState:
    # Hazard lights override the lever position.
    if chassis.signal.emergency_light:
        return SignalState.EMERGENCY
    return _TURN_SIGNALS[chassis.signal.turn_signal]


def apply_chassis(car: VehicleObject, chassis: Chassis) -> None:
    """Copy chassis dynamics onto *car*, without any unit scaling."""
    car.speed = chassis.speed_mps
    car.throttle_percentage = chassis.throttle_percentage
    car.brake_percentage = chassis.brake_percentage
    car.steering_angle = chassis.steering_percentage
    car.current_signal = signal_state(chassis)
    car.driving_mode = chassis.driving_mode.name


def apply_localization(car: VehicleObject, localization: LocalizationEstimate) -> None:
    """Copy the pose onto *car*; heading is derived from the orientation quaternion."""
    pose = localization.pose
    car.position_x = pose.position.x
    car.position_y = pose.position.y
    orientation = pose.orientation
    car.heading = quaternion_to_heading(orientation.qw, orientation.qx, orientation.qy, orientation.qz)
    car.timestamp_sec = localization.header.timestamp_sec
