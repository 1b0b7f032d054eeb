"""
Built-in class templates (ids 128-146).

Classes are human enemies. They share one billboard size, carry no fixed
level (systems.careers rolls one around the player's level) and scale
health from their hit points per level.
"""

from ..types import MobileTeams, MobileTemplate, MobileTypes
from ..registry import MobileRegistry

# Human move/bark/attack clips
_HUMAN_SOUNDS = (330, 329, 331)
_HUMAN_SIZE = (1.0, 2.0)

# (type, name, team, hit points per level, damage range, armor)
_CLASS_ROWS = [
    (MobileTypes.MAGE, "Mage", MobileTeams.KNIGHTS_AND_MAGES, 6, (1, 6), 8),
    (MobileTypes.SPELLSWORD, "Spellsword", MobileTeams.KNIGHTS_AND_MAGES, 12, (2, 10), 6),
    (MobileTypes.BATTLEMAGE, "Battlemage", MobileTeams.KNIGHTS_AND_MAGES, 10, (2, 9), 6),
    (MobileTypes.SORCERER, "Sorcerer", MobileTeams.KNIGHTS_AND_MAGES, 6, (1, 6), 8),
    (MobileTypes.HEALER, "Healer", MobileTeams.KNIGHTS_AND_MAGES, 8, (1, 6), 7),
    (MobileTypes.NIGHTBLADE, "Nightblade", MobileTeams.CRIMINALS, 10, (2, 10), 6),
    (MobileTypes.BARD, "Bard", MobileTeams.CRIMINALS, 10, (2, 8), 6),
    (MobileTypes.BURGLAR, "Burglar", MobileTeams.CRIMINALS, 10, (2, 8), 6),
    (MobileTypes.ROGUE, "Rogue", MobileTeams.CRIMINALS, 12, (2, 10), 5),
    (MobileTypes.ACROBAT, "Acrobat", MobileTeams.CRIMINALS, 10, (2, 8), 6),
    (MobileTypes.THIEF, "Thief", MobileTeams.CRIMINALS, 10, (2, 8), 6),
    (MobileTypes.ASSASSIN, "Assassin", MobileTeams.CRIMINALS, 12, (3, 12), 5),
    (MobileTypes.MONK, "Monk", MobileTeams.KNIGHTS_AND_MAGES, 12, (2, 10), 6),
    (MobileTypes.ARCHER, "Archer", MobileTeams.KNIGHTS_AND_MAGES, 12, (2, 12), 5),
    (MobileTypes.RANGER, "Ranger", MobileTeams.KNIGHTS_AND_MAGES, 14, (2, 12), 5),
    (MobileTypes.BARBARIAN, "Barbarian", MobileTeams.KNIGHTS_AND_MAGES, 16, (3, 14), 5),
    (MobileTypes.WARRIOR, "Warrior", MobileTeams.KNIGHTS_AND_MAGES, 14, (3, 12), 4),
    (MobileTypes.KNIGHT, "Knight", MobileTeams.KNIGHTS_AND_MAGES, 14, (3, 12), 3),
    (MobileTypes.KNIGHT_CITY_WATCH, "City Watch", MobileTeams.CITY_WATCH, 14, (3, 12), 3),
]


def register_class_templates(registry: MobileRegistry) -> None:
    """Register all built-in class templates."""
    move, bark, attack = _HUMAN_SOUNDS
    for mobile_type, name, team, hp_per_level, damage, armor in _CLASS_ROWS:
        registry.register(
            MobileTemplate(
                id=int(mobile_type),
                name=name,
                team=team,
                move_sound=move,
                bark_sound=bark,
                attack_sound=attack,
                size=_HUMAN_SIZE,
                # For classes min/max health hold the per-level hit point roll
                min_health=hp_per_level // 2,
                max_health=hp_per_level,
                min_damage=damage[0],
                max_damage=damage[1],
                armor_value=armor,
            )
        )
