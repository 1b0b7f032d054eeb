"""
Collision capsule sizing for mobiles.

Heights come from the billboard. Flying mobiles keep only their lower half
(frame 0 has the wings raised) and nothing ends up shorter than
MIN_CONTROLLER_HEIGHT, so small creatures cannot be walked on. Both
adjustments keep the bottom of the capsule where it was.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import pygame

from settings import GROUND_PROBE_DISTANCE, MIN_CONTROLLER_HEIGHT
from systems.mobiles.types import MobileBehaviour
from world.entities import CharacterController

# (x, z) -> ground height directly below, or None when nothing is hit
GroundProbe = Callable[[float, float], Optional[float]]


class ControllerJustification(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass
class CollisionBounds:
    height: float
    center: pygame.Vector3 = field(default_factory=pygame.Vector3)


def adjust_controller_height(
    controller: CollisionBounds | CharacterController,
    new_height: float,
    justification: ControllerJustification,
) -> None:
    """Resize a capsule, keeping its top, center or bottom in place."""
    new_center = pygame.Vector3(controller.center)
    if justification == ControllerJustification.TOP:
        new_center.y -= (new_height - controller.height) / 2
    elif justification == ControllerJustification.BOTTOM:
        new_center.y += (new_height - controller.height) / 2
    controller.height = new_height
    controller.center = new_center


def derive_collision_bounds(
    visual_height: float,
    behaviour: MobileBehaviour,
    center: Optional[pygame.Vector3] = None,
) -> CollisionBounds:
    """Compute capsule height and center for a billboard height and behaviour."""
    bounds = CollisionBounds(
        height=float(visual_height),
        center=pygame.Vector3(center) if center is not None else pygame.Vector3(),
    )

    if behaviour == MobileBehaviour.FLYING:
        adjust_controller_height(bounds, bounds.height / 2, ControllerJustification.BOTTOM)

    if bounds.height < MIN_CONTROLLER_HEIGHT:
        adjust_controller_height(bounds, MIN_CONTROLLER_HEIGHT, ControllerJustification.BOTTOM)

    return bounds


def apply_collision_bounds(controller: CharacterController, bounds: CollisionBounds) -> None:
    controller.height = bounds.height
    controller.center = pygame.Vector3(bounds.center)


def align_controller_to_ground(
    position: pygame.Vector3,
    controller: CharacterController,
    ground_probe: GroundProbe,
    max_distance: float = GROUND_PROBE_DISTANCE,
) -> pygame.Vector3:
    """
    Return a position whose capsule base rests on the ground below.

    The probe is asked for the ground height at (x, z). Ground further than
    max_distance below the capsule base, or no ground at all, leaves the
    position unchanged.
    """
    ground_y = ground_probe(position.x, position.z)
    if ground_y is None:
        return pygame.Vector3(position)

    base_y = position.y + controller.bottom
    if base_y - ground_y > max_distance:
        return pygame.Vector3(position)

    return pygame.Vector3(position.x, position.y + (ground_y - base_y), position.z)
