# systems/careers.py

"""Enemy careers: level and level-dependent stats for a spawned enemy.

The setup pipeline hands over (template, entity type, level). A level above
zero is always used as-is so that enemies restored from a save keep the level
they spawned with; zero means a brand-new spawn and picks a fresh level.
"""

from dataclasses import dataclass
from typing import Any, Optional
import random

from settings import CLASS_LEVEL_SPREAD
from .mobiles.types import EntityTypes, MobileGender, MobileTeams, MobileTemplate


@dataclass
class EnemyEntity:
    """
    Runtime state of one enemy.

    - entity_type:    monster or class career
    - career:         template the career was built from
    - level:          progression level; persisted with the enemy
    - max/current_health, min/max_damage, armor_value: derived from career + level
    - team, gender:   copied from the per-spawn template
    - world_context:  opaque value supplied by the caller (interior, dungeon...)
    """
    entity_type: EntityTypes = EntityTypes.NONE
    career: Optional[MobileTemplate] = None
    level: int = 0

    max_health: int = 0
    current_health: int = 0
    min_damage: int = 0
    max_damage: int = 0
    armor_value: int = 0

    team: MobileTeams = MobileTeams.NONE
    gender: MobileGender = MobileGender.UNSPECIFIED
    world_context: Any = None

    def set_enemy_career(
        self,
        template: MobileTemplate,
        entity_type: EntityTypes,
        level: int = 0,
        rng: Optional[random.Random] = None,
        player_level: int = 1,
    ) -> None:
        """
        Assign a career and derive level-dependent stats.

        level > 0 is kept exactly. level == 0 rolls a new one: monsters use
        their template level, classes land within CLASS_LEVEL_SPREAD of the
        player's level.
        """
        if entity_type == EntityTypes.NONE:
            raise ValueError("Cannot assign a career to a non-enemy entity")
        if level < 0:
            raise ValueError(f"Enemy level cannot be negative: {level}")

        rng = rng or random.Random()

        self.entity_type = entity_type
        self.career = template
        self.team = template.team
        self.gender = template.gender

        if level > 0:
            self.level = level
        elif entity_type == EntityTypes.ENEMY_MONSTER:
            self.level = max(1, template.level)
        else:
            spread = rng.randint(-CLASS_LEVEL_SPREAD, CLASS_LEVEL_SPREAD)
            self.level = max(1, player_level + spread)

        if entity_type == EntityTypes.ENEMY_MONSTER:
            self.max_health = rng.randint(template.min_health, template.max_health)
            self.min_damage = template.min_damage
            self.max_damage = template.max_damage
            self.armor_value = template.armor_value
        else:
            # Classes roll hit points per level and hit harder as they level
            self.max_health = sum(
                rng.randint(template.min_health, template.max_health)
                for _ in range(self.level)
            )
            bonus = self.level // 5
            self.min_damage = template.min_damage + bonus
            self.max_damage = template.max_damage + bonus
            self.armor_value = max(0, template.armor_value - bonus)

        self.current_health = self.max_health

    @property
    def is_alive(self) -> bool:
        return self.current_health > 0


def assign_career(
    entity: EnemyEntity,
    template: MobileTemplate,
    entity_type: EntityTypes,
    level: int = 0,
    rng: Optional[random.Random] = None,
    player_level: int = 1,
) -> EnemyEntity:
    """Assign a career to an entity in place and return it."""
    entity.set_enemy_career(template, entity_type, level, rng=rng, player_level=player_level)
    return entity
