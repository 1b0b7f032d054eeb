"""
Mobile type definitions.

Contains the enums shared by the setup pipeline and the immutable
template record every enemy is built from.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class MobileTypes(IntEnum):
    """Built-in mobile ids. Monsters are 0-42, classes 128-146."""
    RAT = 0
    IMP = 1
    SPRIGGAN = 2
    GIANT_BAT = 3
    GRIZZLY_BEAR = 4
    SABERTOOTH_TIGER = 5
    SPIDER = 6
    ORC = 7
    CENTAUR = 8
    WEREWOLF = 9
    NYMPH = 10
    SLAUGHTERFISH = 11
    ORC_SERGEANT = 12
    HARPY = 13
    WEREBOAR = 14
    SKELETAL_WARRIOR = 15
    GIANT = 16
    ZOMBIE = 17
    GHOST = 18
    MUMMY = 19
    GIANT_SCORPION = 20
    ORC_SHAMAN = 21
    GARGOYLE = 22
    WRAITH = 23
    ORC_WARLORD = 24
    FROST_DAEDRA = 25
    FIRE_DAEDRA = 26
    DAEDROTH = 27
    VAMPIRE = 28
    DAEDRA_SEDUCER = 29
    VAMPIRE_ANCIENT = 30
    DAEDRA_LORD = 31
    LICH = 32
    ANCIENT_LICH = 33
    DRAGONLING = 34
    FIRE_ATRONACH = 35
    IRON_ATRONACH = 36
    FLESH_ATRONACH = 37
    ICE_ATRONACH = 38
    HORSE = 39
    DRAGONLING_ALTERNATE = 40
    DREUGH = 41
    LAMIA = 42

    MAGE = 128
    SPELLSWORD = 129
    BATTLEMAGE = 130
    SORCERER = 131
    HEALER = 132
    NIGHTBLADE = 133
    BARD = 134
    BURGLAR = 135
    ROGUE = 136
    ACROBAT = 137
    THIEF = 138
    ASSASSIN = 139
    MONK = 140
    ARCHER = 141
    RANGER = 142
    BARBARIAN = 143
    WARRIOR = 144
    KNIGHT = 145
    KNIGHT_CITY_WATCH = 146


class MobileReactions(Enum):
    HOSTILE = "hostile"
    PASSIVE = "passive"
    ALLY = "ally"


class MobileGender(Enum):
    UNSPECIFIED = "unspecified"
    MALE = "male"
    FEMALE = "female"


class MobileBehaviour(Enum):
    GENERAL = "general"
    FLYING = "flying"
    SPECTRAL = "spectral"
    AQUATIC = "aquatic"


class MobileTeams(Enum):
    NONE = "none"
    VERMIN = "vermin"
    SPRIGGANS = "spriggans"
    BEARS = "bears"
    TIGERS = "tigers"
    SPIDERS = "spiders"
    ORCS = "orcs"
    CENTAURS = "centaurs"
    WEREBEASTS = "werebeasts"
    NYMPHS = "nymphs"
    AQUATIC = "aquatic"
    HARPIES = "harpies"
    UNDEAD = "undead"
    GIANTS = "giants"
    SCORPIONS = "scorpions"
    MAGIC = "magic"
    DAEDRA = "daedra"
    DRAGONLINGS = "dragonlings"
    KNIGHTS_AND_MAGES = "knights_and_mages"
    CRIMINALS = "criminals"
    CITY_WATCH = "city_watch"
    PLAYER_ALLY = "player_ally"


class EntityTypes(Enum):
    NONE = "none"
    ENEMY_MONSTER = "enemy_monster"
    ENEMY_CLASS = "enemy_class"


@dataclass(frozen=True)
class MobileTemplate:
    """
    Immutable description of a mobile, keyed by its integer id.

    - id:            MobileTypes value for built-ins, any other int for custom careers
    - name:          display name
    - behaviour:     movement/visual behaviour (flying, spectral...)
    - team:          allegiance used by AI target selection
    - *_sound:       sound clip ids for move, bark and attack
    - glow_color:    RGB tuple; spawns a light aura when set
    - no_shadow:     disables shadow casting on the billboard
    - size:          billboard size in world units (width, height)

    Career stats (consumed by systems.careers):
    - level:         fixed level for monsters (classes roll theirs)
    - min/max_health, min/max_damage, armor_value
    """
    id: int
    name: str
    behaviour: MobileBehaviour = MobileBehaviour.GENERAL
    team: MobileTeams = MobileTeams.NONE
    reactions: MobileReactions = MobileReactions.HOSTILE
    gender: MobileGender = MobileGender.UNSPECIFIED

    move_sound: int = -1
    bark_sound: int = -1
    attack_sound: int = -1

    glow_color: Optional[Tuple[int, int, int]] = None
    no_shadow: bool = False
    size: Tuple[float, float] = (1.0, 1.0)

    level: int = 1
    min_health: int = 1
    max_health: int = 1
    min_damage: int = 1
    max_damage: int = 1
    armor_value: int = 0
