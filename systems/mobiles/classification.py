"""
Mobile identifier classification.

Maps an integer mobile id to the kind of enemy it describes:

- 0-42:    built-in monster
- 128-146: built-in class
- any other id with a custom career template: bit 7 decides, so custom ids
  repeat in 128-wide bands (0-127 monster, 128-255 class, 256-383 monster...)
- everything else is unrecognized (decorative mobiles, no career)

The band rule assumes custom ids stay within a few thousand; nothing here
enforces an upper bound.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from settings import (
    BUILTIN_CLASS_MAX_ID,
    BUILTIN_CLASS_MIN_ID,
    BUILTIN_MONSTER_MAX_ID,
    BUILTIN_MONSTER_MIN_ID,
    CUSTOM_CLASS_BAND_BIT,
)
from .registry import MobileRegistry
from .types import EntityTypes


class MobileCategory(Enum):
    BUILTIN_MONSTER = "builtin_monster"
    BUILTIN_CLASS = "builtin_class"
    CUSTOM_MONSTER = "custom_monster"
    CUSTOM_CLASS = "custom_class"
    UNRECOGNIZED = "unrecognized"

    @property
    def entity_type(self) -> EntityTypes:
        if self in (MobileCategory.BUILTIN_MONSTER, MobileCategory.CUSTOM_MONSTER):
            return EntityTypes.ENEMY_MONSTER
        if self in (MobileCategory.BUILTIN_CLASS, MobileCategory.CUSTOM_CLASS):
            return EntityTypes.ENEMY_CLASS
        return EntityTypes.NONE

    @property
    def is_custom(self) -> bool:
        return self in (MobileCategory.CUSTOM_MONSTER, MobileCategory.CUSTOM_CLASS)


@dataclass(frozen=True)
class MobileClassification:
    category: MobileCategory
    lookup_key: int

    @property
    def entity_type(self) -> EntityTypes:
        return self.category.entity_type

    @property
    def recognized(self) -> bool:
        return self.category is not MobileCategory.UNRECOGNIZED


def classify_mobile_id(mobile_id: int, registry: MobileRegistry) -> MobileClassification:
    """Classify a mobile id. Never raises for unknown ids."""
    mobile_id = int(mobile_id)

    if BUILTIN_MONSTER_MIN_ID <= mobile_id <= BUILTIN_MONSTER_MAX_ID:
        return MobileClassification(MobileCategory.BUILTIN_MONSTER, mobile_id)

    if BUILTIN_CLASS_MIN_ID <= mobile_id <= BUILTIN_CLASS_MAX_ID:
        return MobileClassification(MobileCategory.BUILTIN_CLASS, mobile_id)

    if registry.get_custom(mobile_id) is not None:
        if mobile_id & CUSTOM_CLASS_BAND_BIT:
            return MobileClassification(MobileCategory.CUSTOM_CLASS, mobile_id)
        return MobileClassification(MobileCategory.CUSTOM_MONSTER, mobile_id)

    return MobileClassification(MobileCategory.UNRECOGNIZED, mobile_id)


def mobile_type_for_career(entity_type: EntityTypes, career_index: int) -> Optional[int]:
    """
    Mobile id for a career index.

    Monster careers use the index as-is, class careers are offset by 128.
    Returns None for non-enemy entity types.
    """
    if entity_type == EntityTypes.ENEMY_MONSTER:
        return career_index
    if entity_type == EntityTypes.ENEMY_CLASS:
        return career_index + CUSTOM_CLASS_BAND_BIT
    return None
