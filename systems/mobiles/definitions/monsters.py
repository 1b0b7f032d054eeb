"""
Built-in monster templates (ids 0-42).

Sizes are billboard sizes in world units taken from frame 0 of each
monster's idle animation. Sound ids index the game's sound clip table.
"""

from typing import Optional, Tuple

from ..types import MobileBehaviour, MobileTeams, MobileTemplate, MobileTypes
from ..registry import MobileRegistry

B = MobileBehaviour
T = MobileTeams


def _monster(
    mobile_type: MobileTypes,
    name: str,
    team: MobileTeams,
    sounds: Tuple[int, int, int],
    size: Tuple[float, float],
    level: int,
    health: Tuple[int, int],
    damage: Tuple[int, int],
    armor: int,
    behaviour: MobileBehaviour = B.GENERAL,
    glow: Optional[Tuple[int, int, int]] = None,
    no_shadow: bool = False,
) -> MobileTemplate:
    move, bark, attack = sounds
    return MobileTemplate(
        id=int(mobile_type),
        name=name,
        behaviour=behaviour,
        team=team,
        move_sound=move,
        bark_sound=bark,
        attack_sound=attack,
        glow_color=glow,
        no_shadow=no_shadow,
        size=size,
        level=level,
        min_health=health[0],
        max_health=health[1],
        min_damage=damage[0],
        max_damage=damage[1],
        armor_value=armor,
    )


MONSTERS = [
    _monster(MobileTypes.RAT, "Rat", T.VERMIN, (222, 221, 223), (0.8, 0.5), 1, (4, 8), (1, 3), 6),
    _monster(MobileTypes.IMP, "Imp", T.MAGIC, (233, 232, 234), (0.9, 1.1), 2, (5, 15), (1, 10), 2,
             behaviour=B.FLYING),
    _monster(MobileTypes.SPRIGGAN, "Spriggan", T.SPRIGGANS, (225, 224, 226), (1.0, 1.9), 3, (8, 18), (1, 6), 2),
    _monster(MobileTypes.GIANT_BAT, "Giant Bat", T.VERMIN, (219, 218, 220), (1.1, 0.8), 3, (3, 11), (1, 4), 4,
             behaviour=B.FLYING),
    _monster(MobileTypes.GRIZZLY_BEAR, "Grizzly Bear", T.BEARS, (228, 227, 229), (2.0, 2.1), 4, (10, 30), (2, 8), 6),
    _monster(MobileTypes.SABERTOOTH_TIGER, "Sabertooth Tiger", T.TIGERS, (231, 230, 232), (2.2, 1.3), 4,
             (12, 32), (3, 12), 4),
    _monster(MobileTypes.SPIDER, "Spider", T.SPIDERS, (249, 248, 250), (1.4, 0.7), 4, (7, 27), (2, 8), 5),
    _monster(MobileTypes.ORC, "Orc", T.ORCS, (237, 236, 238), (1.0, 2.0), 5, (13, 33), (2, 14), 7),
    _monster(MobileTypes.CENTAUR, "Centaur", T.CENTAURS, (240, 239, 241), (2.1, 2.4), 6, (16, 36), (3, 18), 6),
    _monster(MobileTypes.WEREWOLF, "Werewolf", T.WEREBEASTS, (243, 242, 244), (1.2, 2.2), 7,
             (21, 41), (4, 24), 5),
    _monster(MobileTypes.NYMPH, "Nymph", T.NYMPHS, (246, 245, 247), (1.0, 1.8), 6, (17, 37), (1, 5), 6),
    _monster(MobileTypes.SLAUGHTERFISH, "Slaughterfish", T.AQUATIC, (252, 251, 253), (1.6, 0.6), 7,
             (20, 40), (2, 12), 7, behaviour=B.AQUATIC),
    _monster(MobileTypes.ORC_SERGEANT, "Orc Sergeant", T.ORCS, (237, 236, 238), (1.1, 2.1), 9,
             (31, 51), (4, 16), 5),
    _monster(MobileTypes.HARPY, "Harpy", T.HARPIES, (255, 254, 256), (1.3, 1.7), 10, (32, 52), (4, 18), 5,
             behaviour=B.FLYING),
    _monster(MobileTypes.WEREBOAR, "Wereboar", T.WEREBEASTS, (258, 257, 259), (1.4, 2.2), 10,
             (34, 54), (4, 28), 6),
    _monster(MobileTypes.SKELETAL_WARRIOR, "Skeletal Warrior", T.UNDEAD, (261, 260, 262), (1.0, 2.0), 11,
             (17, 37), (2, 24), 5),
    _monster(MobileTypes.GIANT, "Giant", T.GIANTS, (264, 263, 265), (2.6, 4.2), 12, (55, 75), (4, 28), 4),
    _monster(MobileTypes.ZOMBIE, "Zombie", T.UNDEAD, (267, 266, 268), (1.0, 1.9), 12, (43, 63), (5, 30), 6),
    _monster(MobileTypes.GHOST, "Ghost", T.UNDEAD, (270, 269, 271), (1.1, 2.0), 13, (45, 65), (1, 15), 0,
             behaviour=B.SPECTRAL, no_shadow=True),
    _monster(MobileTypes.MUMMY, "Mummy", T.UNDEAD, (273, 272, 274), (1.0, 2.0), 15, (53, 73), (6, 26), 2),
    _monster(MobileTypes.GIANT_SCORPION, "Giant Scorpion", T.SCORPIONS, (276, 275, 277), (2.4, 1.2), 16,
             (49, 69), (7, 27), 0),
    _monster(MobileTypes.ORC_SHAMAN, "Orc Shaman", T.ORCS, (237, 236, 238), (1.0, 2.0), 16, (38, 58), (2, 15), 7),
    _monster(MobileTypes.GARGOYLE, "Gargoyle", T.MAGIC, (279, 278, 280), (1.6, 2.3), 14, (48, 68), (5, 30), 0),
    _monster(MobileTypes.WRAITH, "Wraith", T.UNDEAD, (282, 281, 283), (1.1, 2.1), 15, (51, 71), (6, 28), 0,
             behaviour=B.SPECTRAL, no_shadow=True),
    _monster(MobileTypes.ORC_WARLORD, "Orc Warlord", T.ORCS, (237, 236, 238), (1.2, 2.2), 19,
             (61, 81), (8, 36), 3),
    _monster(MobileTypes.FROST_DAEDRA, "Frost Daedra", T.DAEDRA, (285, 284, 286), (1.4, 2.6), 17,
             (63, 83), (10, 60), 0, glow=(156, 200, 255)),
    _monster(MobileTypes.FIRE_DAEDRA, "Fire Daedra", T.DAEDRA, (288, 287, 289), (1.4, 2.6), 17,
             (63, 83), (10, 60), 0, glow=(255, 140, 60)),
    _monster(MobileTypes.DAEDROTH, "Daedroth", T.DAEDRA, (291, 290, 292), (1.5, 2.4), 18, (66, 86), (5, 35), 0),
    _monster(MobileTypes.VAMPIRE, "Vampire", T.UNDEAD, (294, 293, 295), (1.0, 2.0), 19, (70, 90), (10, 40), 0),
    _monster(MobileTypes.DAEDRA_SEDUCER, "Daedra Seducer", T.DAEDRA, (297, 296, 298), (1.0, 2.0), 19,
             (77, 97), (15, 50), 0),
    _monster(MobileTypes.VAMPIRE_ANCIENT, "Vampire Ancient", T.UNDEAD, (294, 293, 295), (1.0, 2.0), 20,
             (90, 110), (20, 55), 0),
    _monster(MobileTypes.DAEDRA_LORD, "Daedra Lord", T.DAEDRA, (300, 299, 301), (1.6, 2.8), 20,
             (100, 120), (25, 75), 0, glow=(255, 80, 40)),
    _monster(MobileTypes.LICH, "Lich", T.UNDEAD, (303, 302, 304), (1.0, 2.0), 20, (90, 110), (20, 65), 0,
             glow=(120, 255, 120)),
    _monster(MobileTypes.ANCIENT_LICH, "Ancient Lich", T.UNDEAD, (306, 305, 307), (1.0, 2.0), 21,
             (105, 125), (25, 75), 0, glow=(120, 255, 120)),
    _monster(MobileTypes.DRAGONLING, "Dragonling", T.DRAGONLINGS, (309, 308, 310), (1.8, 1.5), 16,
             (53, 73), (6, 32), 2, behaviour=B.FLYING),
    _monster(MobileTypes.FIRE_ATRONACH, "Fire Atronach", T.MAGIC, (312, 311, 313), (1.2, 2.2), 16,
             (45, 65), (6, 24), 0, glow=(255, 120, 30), no_shadow=True),
    _monster(MobileTypes.IRON_ATRONACH, "Iron Atronach", T.MAGIC, (315, 314, 316), (1.3, 2.3), 21,
             (75, 95), (6, 24), 0),
    _monster(MobileTypes.FLESH_ATRONACH, "Flesh Atronach", T.MAGIC, (318, 317, 319), (1.3, 2.2), 16,
             (64, 84), (6, 24), 0),
    _monster(MobileTypes.ICE_ATRONACH, "Ice Atronach", T.MAGIC, (321, 320, 322), (1.2, 2.2), 15,
             (55, 75), (6, 24), 0, glow=(170, 220, 255)),
    _monster(MobileTypes.HORSE, "Horse", T.NONE, (-1, -1, -1), (2.2, 2.0), 1, (10, 20), (1, 3), 5),
    _monster(MobileTypes.DRAGONLING_ALTERNATE, "Dragonling", T.DRAGONLINGS, (309, 308, 310), (2.4, 2.0), 21,
             (90, 110), (10, 50), 0, behaviour=B.FLYING),
    _monster(MobileTypes.DREUGH, "Dreugh", T.AQUATIC, (324, 323, 325), (1.5, 1.7), 16, (48, 68), (6, 36), 0,
             behaviour=B.AQUATIC),
    _monster(MobileTypes.LAMIA, "Lamia", T.AQUATIC, (327, 326, 328), (1.2, 1.9), 16, (46, 66), (5, 30), 5,
             behaviour=B.AQUATIC),
]


def register_monster_templates(registry: MobileRegistry) -> None:
    """Register all built-in monster templates."""
    for template in MONSTERS:
        registry.register(template)
