"""
Save/Load support for spawned enemies.

Only the spawn configuration and the enemy level are persisted. Capsule
geometry and effects are recomputed by re-running enemy setup on load, and
the stored level is passed back in so restored enemies keep it.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from engine.enemy_setup import EnemySetup, ResolvedEntity, SpawnConfiguration
from engine.error_handler import SaveError, logger
from systems.mobiles import MobileGender, MobileReactions


@dataclass
class EnemySaveData:
    enemy_type: int
    reaction: MobileReactions = MobileReactions.HOSTILE
    gender: MobileGender = MobileGender.UNSPECIFIED
    allied_to_player: bool = False
    spawn_distance_type: int = 0
    enemy_level: int = 0
    world_context: Any = None

    def to_config(self) -> SpawnConfiguration:
        return SpawnConfiguration(
            enemy_type=self.enemy_type,
            reaction=self.reaction,
            gender=self.gender,
            allied_to_player=self.allied_to_player,
            spawn_distance_type=self.spawn_distance_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enemy_type": self.enemy_type,
            "reaction": self.reaction.value,
            "gender": self.gender.value,
            "allied_to_player": self.allied_to_player,
            "spawn_distance_type": self.spawn_distance_type,
            "enemy_level": self.enemy_level,
            "world_context": self.world_context,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnemySaveData":
        try:
            record = cls(
                enemy_type=int(data["enemy_type"]),
                reaction=MobileReactions(data.get("reaction", MobileReactions.HOSTILE.value)),
                gender=MobileGender(data.get("gender", MobileGender.UNSPECIFIED.value)),
                allied_to_player=bool(data.get("allied_to_player", False)),
                spawn_distance_type=int(data.get("spawn_distance_type", 0)),
                enemy_level=int(data.get("enemy_level", 0)),
                world_context=data.get("world_context"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SaveError(f"Malformed enemy save record: {e}") from e

        if not 0 <= record.spawn_distance_type <= 255:
            raise SaveError(f"spawn_distance_type out of byte range: {record.spawn_distance_type}")
        return record


def get_save_data(setup: EnemySetup) -> EnemySaveData:
    """Capture what is needed to rebuild this enemy after a load."""
    config = setup.config
    entity = setup.host.entity
    level = getattr(entity, "level", 0) if entity is not None else 0
    return EnemySaveData(
        enemy_type=config.enemy_type,
        reaction=config.reaction,
        gender=config.gender,
        allied_to_player=config.allied_to_player,
        spawn_distance_type=config.spawn_distance_type,
        enemy_level=level,
        world_context=setup.world_context,
    )


def restore_enemy(setup: EnemySetup, data: EnemySaveData) -> ResolvedEntity:
    """Re-run enemy setup with the persisted configuration and level."""
    setup.config = data.to_config()
    setup.world_context = data.world_context
    return setup.initialize(setup.config, data.enemy_level)


def save_enemies(path: Union[str, Path], records: List[EnemySaveData]) -> None:
    """
    Write enemy records to a JSON file.

    Raises:
        SaveError: when the file cannot be written
    """
    path = Path(path)
    payload = {"enemies": [record.to_dict() for record in records]}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Write to a temporary file first, then rename (atomic write)
        temp_path = path.with_suffix(".tmp")
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        temp_path.replace(path)
    except (OSError, TypeError) as e:
        raise SaveError(f"Error saving enemies to {path}: {e}") from e
    logger.debug(f"Saved {len(records)} enemies to {path}")


def load_enemies(path: Union[str, Path]) -> List[EnemySaveData]:
    """
    Read enemy records from a JSON file.

    Raises:
        SaveError: when the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        raise SaveError(f"Error loading enemies from {path}: {e}") from e

    if not isinstance(payload, dict) or not isinstance(payload.get("enemies"), list):
        raise SaveError(f"Expected an 'enemies' list in {path}")

    return [EnemySaveData.from_dict(record) for record in payload["enemies"]]
