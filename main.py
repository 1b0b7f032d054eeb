"""
Headless enemy setup demo.

Builds a host with a billboard, a controller and a sound component, runs
enemy setup for the given mobile id and prints the resulting configuration.

Usage:
    python main.py 2 --gender female --level 5
    python main.py 130 --allied
    python main.py 300 --custom-templates mods/custom_enemies.json
"""

import argparse
import sys
from pathlib import Path

from engine.config import load_config
from engine.enemy_setup import EnemySetup, SpawnConfiguration
from engine.error_handler import TemplateError, log_error
from systems.mobiles import MOBILE_REGISTRY, MobileGender, MobileReactions
from world.entities import CharacterController, Enemy, EnemySounds, MobileUnit


def build_demo_host() -> Enemy:
    return Enemy(
        mobile_unit=MobileUnit(),
        controller=CharacterController(),
        sounds=EnemySounds(),
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Set up an enemy and print its configuration")
    parser.add_argument("enemy_id", type=int, help="Mobile id (0-42 monsters, 128-146 classes, custom ids)")
    parser.add_argument(
        "--gender",
        choices=[g.value for g in MobileGender],
        default=MobileGender.UNSPECIFIED.value,
    )
    parser.add_argument("--level", type=int, default=0, help="Enemy level (0 = new spawn)")
    parser.add_argument("--passive", action="store_true", help="Spawn passive instead of hostile")
    parser.add_argument("--allied", action="store_true", help="Put the enemy on the player's team")
    parser.add_argument("--no-shadows", action="store_true", help="Disable glow light shadows")
    parser.add_argument("--custom-templates", type=str, help="JSON file with custom career templates")
    args = parser.parse_args()

    config = load_config()
    custom_path = args.custom_templates or config.custom_templates_path
    if custom_path:
        try:
            MOBILE_REGISTRY.load_custom_templates(Path(custom_path))
        except TemplateError as e:
            log_error(e, "load_custom_templates")
            print(f"Could not load custom templates: {e.user_message}")
            return 1

    host = build_demo_host()
    setup = EnemySetup(
        host,
        world_context="demo",
        dungeon_light_shadows=False if args.no_shadows else config.dungeon_light_shadows,
    )
    result = setup.initialize(
        SpawnConfiguration(
            enemy_type=args.enemy_id,
            reaction=MobileReactions.PASSIVE if args.passive else MobileReactions.HOSTILE,
            gender=MobileGender(args.gender),
            allied_to_player=args.allied,
        ),
        args.level,
    )

    if not result.is_valid:
        print(f"Mobile {args.enemy_id}: no template, host would be deactivated")
        return 1

    print(f"Mobile {args.enemy_id}: {result.template.name}")
    print(f"  category:  {result.category.value} ({result.entity_type.value})")
    print(f"  team:      {result.team.value}")
    print(f"  level:     {result.level}")
    if result.collision is not None:
        print(f"  capsule:   height={result.collision.height:.2f} center_y={result.collision.center.y:.2f}")
    for directive in result.effects:
        print(f"  effect:    {directive}")
    for behaviour in result.behaviours:
        print(f"  behaviour: {behaviour}")
    if result.entity is not None and result.entity.career is not None:
        entity = result.entity
        print(f"  health:    {entity.max_health}  damage: {entity.min_damage}-{entity.max_damage}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
