"""
Enemy setup: turns a spawn configuration into a fully configured enemy.

One call to EnemySetup.initialize() classifies the mobile id, looks up its
template, binds the visual unit, sizes the collision capsule, applies visual
and audio effects and builds a fresh EnemyEntity with the requested level.
The convenience entry points (apply_enemy_settings, configure,
configure_from_career) all end up in initialize().

Nothing here raises for missing components or unknown ids. The outcome is
reported through ResolvedEntity.is_valid and ResolvedEntity.category.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple
import random

import pygame

from settings import ENEMIES_LAYER
from systems.careers import EnemyEntity, assign_career
from systems.mobiles import (
    MOBILE_REGISTRY,
    EntityTypes,
    MobileCategory,
    MobileGender,
    MobileReactions,
    MobileRegistry,
    MobileTeams,
    MobileTemplate,
    MobileTypes,
    classify_mobile_id,
    mobile_type_for_career,
)
from world.entities import CharacterController, Enemy
from engine.config import get_config
from engine.effects import EffectDirective, apply_effects, bind_effects
from engine.error_handler import logger
from engine.geometry import (
    CollisionBounds,
    GroundProbe,
    align_controller_to_ground,
    apply_collision_bounds,
    derive_collision_bounds,
)
from telemetry.logger import telemetry

# Extra behaviour markers attached to the visual unit for specific mobile ids
SPECIAL_BEHAVIOURS: Dict[int, List[str]] = {
    int(MobileTypes.DAEDRA_SEDUCER): ["DaedraSeducerMobileBehaviour"],
}


@dataclass
class SpawnConfiguration:
    """Caller-set spawn parameters; the sole input of one initialization."""
    enemy_type: int = int(MobileTypes.SKELETAL_WARRIOR)
    reaction: MobileReactions = MobileReactions.HOSTILE
    gender: MobileGender = MobileGender.UNSPECIFIED
    allied_to_player: bool = False
    spawn_distance_type: int = 0

    def __post_init__(self) -> None:
        self.enemy_type = int(self.enemy_type)
        if not 0 <= self.spawn_distance_type <= 255:
            raise ValueError(f"spawn_distance_type must fit in a byte, got {self.spawn_distance_type}")


@dataclass
class ResolvedEntity:
    """
    Result of one initialization.

    is_valid is False when the host has no usable visual unit (the host should
    be deactivated by the caller) or when the id has no template.
    """
    category: MobileCategory = MobileCategory.UNRECOGNIZED
    template: Optional[MobileTemplate] = None
    level: int = 0
    allied_to_player: bool = False
    team: MobileTeams = MobileTeams.NONE
    collision: Optional[CollisionBounds] = None
    effects: List[EffectDirective] = field(default_factory=list)
    behaviours: List[str] = field(default_factory=list)
    entity: Optional[EnemyEntity] = None
    is_valid: bool = False

    @property
    def entity_type(self) -> EntityTypes:
        return self.category.entity_type


class EnemySetup:
    """
    Sets up an enemy host from spawn settings.

    Usage:
        setup = EnemySetup(host, world_context="dungeon")
        result = setup.configure(MobileTypes.SPRIGGAN, MobileReactions.HOSTILE,
                                 MobileGender.FEMALE, enemy_level=5)
        if not result.is_valid:
            host.active = False

    The level passed in is forwarded untouched to the career so that enemies
    restored from a save keep theirs. Pass 0 only for brand-new spawns.
    """

    def __init__(
        self,
        host: Enemy,
        registry: Optional[MobileRegistry] = None,
        world_context: Any = None,
        dungeon_light_shadows: Optional[bool] = None,
        rng: Optional[random.Random] = None,
        player_level: int = 1,
        config: Optional[SpawnConfiguration] = None,
    ) -> None:
        self.host = host
        self.registry = registry if registry is not None else MOBILE_REGISTRY
        self.world_context = world_context
        if dungeon_light_shadows is None:
            dungeon_light_shadows = get_config().dungeon_light_shadows
        self.dungeon_light_shadows = dungeon_light_shadows
        self.rng = rng or random.Random()
        self.player_level = player_level
        self.config = config or SpawnConfiguration()
        self.last_result: Optional[ResolvedEntity] = None
        # Controller center before any sizing, so repeated setups start from the same capsule
        self._rest_center: Optional[Tuple[CharacterController, pygame.Vector3]] = None

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def validate_host(self) -> bool:
        """False when the host has no set-up visual unit and should be deactivated."""
        unit = self.host.mobile_unit
        return unit is not None and unit.is_setup

    def apply_enemy_settings(self, gender: MobileGender, enemy_level: int = 0) -> ResolvedEntity:
        """Set up the enemy from the stored configuration with a new gender."""
        self.config = replace(self.config, gender=gender)
        return self.initialize(self.config, enemy_level)

    def configure(
        self,
        enemy_type: int,
        reaction: MobileReactions,
        gender: MobileGender,
        spawn_distance_type: int = 0,
        allied_to_player: bool = False,
        enemy_level: int = 0,
    ) -> ResolvedEntity:
        """Change enemy settings and set up in a single call."""
        self.config = SpawnConfiguration(
            enemy_type=enemy_type,
            reaction=reaction,
            gender=gender,
            allied_to_player=allied_to_player,
            spawn_distance_type=spawn_distance_type,
        )
        return self.initialize(self.config, enemy_level)

    def configure_from_career(
        self,
        entity_type: EntityTypes,
        career_index: int,
        gender: MobileGender,
        is_hostile: bool = True,
        allied_to_player: bool = False,
        enemy_level: int = 0,
    ) -> ResolvedEntity:
        """Set up from a career index; non-enemy entity types do nothing."""
        mobile_type = mobile_type_for_career(entity_type, career_index)
        if mobile_type is None:
            logger.debug(f"configure_from_career ignored for entity type {entity_type}")
            return ResolvedEntity()

        reaction = MobileReactions.HOSTILE if is_hostile else MobileReactions.PASSIVE
        return self.configure(
            mobile_type,
            reaction,
            gender,
            allied_to_player=allied_to_player,
            enemy_level=enemy_level,
        )

    def align_to_ground(self, ground_probe: GroundProbe) -> None:
        """Snap the host so the base of its capsule touches the ground below."""
        controller = self.host.controller
        if controller is None:
            return
        self.host.position = align_controller_to_ground(self.host.position, controller, ground_probe)

    # ------------------------------------------------------------------
    # Canonical initializer
    # ------------------------------------------------------------------

    def initialize(self, config: SpawnConfiguration, level: int = 0) -> ResolvedEntity:
        """Configure the host from config. Never raises for missing pieces."""
        self.config = config
        if level < 0:
            logger.warning(f"Negative enemy level {level} for mobile {config.enemy_type}; using 0")
            level = 0

        unit = self.host.mobile_unit
        if unit is None or not unit.is_setup:
            logger.debug(f"Mobile {config.enemy_type}: no set-up visual unit, host left inert")
            return self._finish(ResolvedEntity(), config)

        classification = classify_mobile_id(config.enemy_type, self.registry)
        base_template = self.registry.get(classification.lookup_key)
        if base_template is None:
            logger.warning(f"No template for mobile id {config.enemy_type}; host cleared")
            unit.clear_enemy()
            self.host.entity = None
            return self._finish(ResolvedEntity(category=classification.category), config)

        # Per-spawn copy; team override must precede everything that reads the team
        template = base_template
        if config.allied_to_player:
            template = replace(template, team=MobileTeams.PLAYER_ALLY)
        template = replace(template, gender=config.gender, reactions=config.reaction)

        unit.set_enemy(template, config.reaction, config.spawn_distance_type)

        result = ResolvedEntity(
            category=classification.category,
            template=template,
            allied_to_player=config.allied_to_player,
            team=template.team,
            is_valid=True,
        )

        controller = self.host.controller
        if controller is not None:
            size = unit.get_size()
            bounds = derive_collision_bounds(size.y, template.behaviour, self._controller_rest_center(controller))
            apply_collision_bounds(controller, bounds)
            controller.layer = ENEMIES_LAYER
            result.collision = CollisionBounds(bounds.height, pygame.Vector3(bounds.center))
        else:
            logger.debug(f"Mobile {template.id}: no controller, skipping capsule sizing")

        result.effects = bind_effects(template, self.dungeon_light_shadows)
        apply_effects(result.effects, unit, self.host.sounds)

        entity = EnemyEntity(team=template.team, gender=template.gender)
        entity.world_context = self.world_context
        if classification.recognized:
            assign_career(
                entity,
                template,
                classification.entity_type,
                level,
                rng=self.rng,
                player_level=self.player_level,
            )
        else:
            logger.info(f"Mobile {template.id} is not an enemy career; entity type none")
        self.host.entity = entity
        result.entity = entity
        result.level = entity.level

        for behaviour in SPECIAL_BEHAVIOURS.get(template.id, []):
            unit.add_behaviour(behaviour)
        result.behaviours = list(unit.behaviours)

        return self._finish(result, config)

    def _controller_rest_center(self, controller: CharacterController) -> pygame.Vector3:
        if self._rest_center is None or self._rest_center[0] is not controller:
            self._rest_center = (controller, pygame.Vector3(controller.center))
        return pygame.Vector3(self._rest_center[1])

    def _finish(self, result: ResolvedEntity, config: SpawnConfiguration) -> ResolvedEntity:
        self.last_result = result
        telemetry.log_setup(
            config.enemy_type,
            result.category.value,
            result.level,
            result.is_valid,
            config.allied_to_player,
        )
        return result
