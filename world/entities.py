# world/entities.py

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import pygame

from systems.mobiles.types import MobileReactions, MobileTemplate


class LightShadows(Enum):
    NONE = "none"
    SOFT = "soft"


@dataclass
class MobileRenderer:
    """Material and shadow state of a mobile billboard."""
    shader_name: str = "Daggerfall/Billboard"
    cutoff: float = 0.5
    cast_shadows: bool = True
    receive_shadows: bool = True


@dataclass
class LightAura:
    """Light-emitting child attached to a glowing mobile."""
    local_position: pygame.Vector3 = field(default_factory=pygame.Vector3)
    color: pygame.Color = field(default_factory=lambda: pygame.Color(255, 255, 255))
    shadows: LightShadows = LightShadows.NONE


@dataclass
class MobileUnit:
    """
    Visual unit (billboard) of a mobile.

    - is_setup:   False until the unit has its animation frames loaded
    - renderer:   material/shadow state; None for units that draw themselves
    - children:   attached child objects (light auras)
    - behaviours: names of extra behaviour markers attached to the unit
    - size:       explicit billboard size; falls back to the bound template's size
    """
    is_setup: bool = True
    renderer: Optional[MobileRenderer] = field(default_factory=MobileRenderer)
    children: List[LightAura] = field(default_factory=list)
    behaviours: List[str] = field(default_factory=list)
    size: Optional[pygame.Vector2] = None

    enemy: Optional[MobileTemplate] = None
    reaction: MobileReactions = MobileReactions.HOSTILE
    spawn_distance_type: int = 0

    def set_enemy(
            self,
            template: MobileTemplate,
            reaction: MobileReactions,
            spawn_distance_type: int = 0,
    ) -> None:
        """Bind a template to this unit and reset per-spawn visual state."""
        self.enemy = template
        self.reaction = reaction
        self.spawn_distance_type = spawn_distance_type
        self.children = []
        self.behaviours = []
        if self.renderer is not None:
            self.renderer = MobileRenderer()

    def clear_enemy(self) -> None:
        """Drop the bound template and everything attached for it."""
        self.enemy = None
        self.reaction = MobileReactions.HOSTILE
        self.spawn_distance_type = 0
        self.children = []
        self.behaviours = []
        if self.renderer is not None:
            self.renderer = MobileRenderer()

    def get_size(self) -> pygame.Vector2:
        if self.size is not None:
            return pygame.Vector2(self.size)
        if self.enemy is not None:
            return pygame.Vector2(self.enemy.size)
        return pygame.Vector2(1.0, 1.0)

    def add_behaviour(self, name: str) -> None:
        if name not in self.behaviours:
            self.behaviours.append(name)


@dataclass
class CharacterController:
    """Collision capsule. center is relative to the host position."""
    height: float = 2.0
    center: pygame.Vector3 = field(default_factory=pygame.Vector3)
    layer: str = "Default"

    @property
    def bottom(self) -> float:
        """Local y of the capsule's lower edge."""
        return self.center.y - self.height / 2


@dataclass
class EnemySounds:
    move_sound: int = -1
    bark_sound: int = -1
    attack_sound: int = -1


@dataclass
class Enemy:
    """
    Host object for a spawned enemy.

    Components are optional; the setup pipeline skips whatever is missing.
    entity is replaced wholesale every time the enemy is configured.
    """
    position: pygame.Vector3 = field(default_factory=pygame.Vector3)
    mobile_unit: Optional[MobileUnit] = None
    controller: Optional[CharacterController] = None
    sounds: Optional[EnemySounds] = None
    entity: Optional[object] = None
    active: bool = True

    def move_to(self, x: float, y: float, z: float) -> None:
        self.position = pygame.Vector3(x, y, z)
