"""
Unit tests for EnemySetup, the enemy initialization pipeline.
"""

import json

import pytest
import pygame

from engine.enemy_setup import SPECIAL_BEHAVIOURS, EnemySetup, ResolvedEntity, SpawnConfiguration
from engine.effects import LightAuraDirective, SoundBindingDirective
from engine.error_handler import ValidationError
from settings import ENEMIES_LAYER
from systems.careers import EnemyEntity
from systems.mobiles import (
    EntityTypes,
    MobileBehaviour,
    MobileCategory,
    MobileGender,
    MobileReactions,
    MobileTeams,
    MobileTemplate,
    MobileTypes,
)
from telemetry.logger import telemetry
from world.entities import CharacterController, Enemy, EnemySounds, MobileUnit


class TestScenarios:
    """End-to-end setups for representative ids."""

    def test_builtin_monster_small_female(self, host, make_setup):
        """Test id 2 at level 5 with a 1x1 billboard clamps to 1.6."""
        host.mobile_unit.size = pygame.Vector2(1.0, 1.0)
        setup = make_setup(host)
        result = setup.initialize(
            SpawnConfiguration(enemy_type=2, gender=MobileGender.FEMALE), level=5
        )

        assert result.is_valid
        assert result.category == MobileCategory.BUILTIN_MONSTER
        assert result.entity_type == EntityTypes.ENEMY_MONSTER
        assert result.collision.height == pytest.approx(1.6)
        assert host.controller.height == pytest.approx(1.6)
        assert result.level == 5
        assert host.entity.level == 5
        assert host.entity.gender == MobileGender.FEMALE
        assert result.template.gender == MobileGender.FEMALE

    def test_builtin_class_not_clamped(self, host, make_setup):
        """Test id 130 with a 2.0 billboard keeps its height."""
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=130))
        assert result.category == MobileCategory.BUILTIN_CLASS
        assert result.entity_type == EntityTypes.ENEMY_CLASS
        assert result.collision.height == pytest.approx(2.0)
        assert result.collision.center.y == pytest.approx(0.0)

    def test_unregistered_id(self, host, make_setup):
        """Test id 999 with no template: category none, no career, no entity on the host."""
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=999), level=3)
        assert result.category == MobileCategory.UNRECOGNIZED
        assert result.entity_type == EntityTypes.NONE
        assert result.entity is None
        assert result.is_valid is False
        assert host.entity is None

    def test_flying_creature(self, registry, host, make_setup, custom_template):
        """Test a 3.0 flyer halves to 1.5 then clamps to 1.6."""
        registry.register_custom(custom_template(300, behaviour=MobileBehaviour.FLYING, size=(1.0, 3.0)))
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=300))
        assert result.category == MobileCategory.CUSTOM_MONSTER
        assert result.collision.height == pytest.approx(1.6)
        assert result.collision.center.y == pytest.approx(-0.7)


class TestInitialize:
    """Tests for the canonical initializer."""

    def test_missing_visual_unit_is_noop(self, make_setup):
        host = Enemy(controller=CharacterController(height=2.0))
        setup = make_setup(host)
        result = setup.initialize(SpawnConfiguration(enemy_type=2), level=4)
        assert result.is_valid is False
        assert host.entity is None
        assert host.controller.height == 2.0
        assert setup.validate_host() is False

    def test_unconfigured_visual_unit_is_noop(self, host, make_setup):
        host.mobile_unit.is_setup = False
        setup = make_setup(host)
        result = setup.initialize(SpawnConfiguration(enemy_type=2))
        assert result.is_valid is False
        assert host.mobile_unit.enemy is None
        assert setup.validate_host() is False

    def test_validate_host_with_unit(self, host, make_setup):
        assert make_setup(host).validate_host() is True

    def test_missing_controller_skips_geometry(self, make_setup):
        host = Enemy(mobile_unit=MobileUnit(), sounds=EnemySounds())
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=2), level=2)
        assert result.is_valid
        assert result.collision is None
        assert host.entity.level == 2
        assert host.sounds.move_sound == result.template.move_sound

    def test_missing_audio_component_skips_sounds(self, make_setup):
        host = Enemy(mobile_unit=MobileUnit(), controller=CharacterController())
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=2))
        assert result.is_valid
        assert any(isinstance(d, SoundBindingDirective) for d in result.effects)

    def test_controller_moved_to_enemies_layer(self, host, make_setup):
        make_setup(host).initialize(SpawnConfiguration(enemy_type=15))
        assert host.controller.layer == ENEMIES_LAYER

    def test_unit_bound_with_reaction_and_distance(self, host, make_setup):
        make_setup(host).initialize(
            SpawnConfiguration(
                enemy_type=7,
                reaction=MobileReactions.PASSIVE,
                spawn_distance_type=3,
            )
        )
        unit = host.mobile_unit
        assert unit.enemy.id == 7
        assert unit.reaction == MobileReactions.PASSIVE
        assert unit.spawn_distance_type == 3
        assert unit.enemy.reactions == MobileReactions.PASSIVE

    def test_spawn_distance_must_fit_byte(self):
        with pytest.raises(ValueError):
            SpawnConfiguration(enemy_type=2, spawn_distance_type=256)

    def test_world_context_copied(self, host, make_setup):
        context = object()
        make_setup(host, world_context=context).initialize(SpawnConfiguration(enemy_type=2))
        assert host.entity.world_context is context

    def test_glow_light_attached(self, host, make_setup):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=int(MobileTypes.FIRE_DAEDRA)))
        assert len(host.mobile_unit.children) == 1
        assert host.mobile_unit.renderer.receive_shadows is False
        assert any(isinstance(d, LightAuraDirective) for d in result.effects)

    def test_negative_level_treated_as_new_spawn(self, host, make_setup):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=7), level=-3)
        assert result.level == host.entity.level
        assert result.level >= 1


class TestAllegiance:
    """Tests for the player-ally team override."""

    def test_allied_uses_player_ally_team(self, host, make_setup, registry):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=2, allied_to_player=True))
        assert result.allied_to_player
        assert result.team == MobileTeams.PLAYER_ALLY
        assert host.entity.team == MobileTeams.PLAYER_ALLY
        assert host.mobile_unit.enemy.team == MobileTeams.PLAYER_ALLY
        assert host.entity.career.team == MobileTeams.PLAYER_ALLY

    def test_registry_template_untouched(self, host, make_setup, registry):
        original_team = registry.get(2).team
        make_setup(host).initialize(SpawnConfiguration(enemy_type=2, allied_to_player=True))
        assert registry.get(2).team == original_team
        assert registry.get(2).team != MobileTeams.PLAYER_ALLY

    def test_hostile_keeps_template_team(self, host, make_setup, registry):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=2))
        assert result.team == registry.get(2).team


class TestIdempotence:
    """Tests that repeated setup gives identical results."""

    def test_same_geometry_and_effects(self, registry, host, make_setup, custom_template):
        registry.register_custom(
            custom_template(300, behaviour=MobileBehaviour.FLYING, size=(1.0, 3.0), glow_color=(1, 2, 3))
        )
        setup = make_setup(host)
        config = SpawnConfiguration(enemy_type=300)
        first = setup.initialize(config, level=4)
        second = setup.initialize(config, level=4)

        assert first.collision == second.collision
        assert first.effects == second.effects
        assert host.controller.height == pytest.approx(1.6)
        assert host.controller.center.y == pytest.approx(-0.7)
        assert len(host.mobile_unit.children) == 1

    def test_unregistered_id_clears_previous_enemy(self, host, make_setup):
        setup = make_setup(host)
        setup.initialize(SpawnConfiguration(enemy_type=int(MobileTypes.FIRE_DAEDRA)), level=5)
        assert host.entity.level == 5
        assert host.mobile_unit.children

        result = setup.initialize(SpawnConfiguration(enemy_type=999))

        assert result.is_valid is False
        assert host.entity is None
        assert host.mobile_unit.enemy is None
        assert host.mobile_unit.children == []
        assert host.mobile_unit.behaviours == []
        assert setup.config.enemy_type == 999

    def test_entity_replaced_not_mutated(self, host, make_setup):
        setup = make_setup(host)
        first = setup.initialize(SpawnConfiguration(enemy_type=2), level=3)
        second = setup.initialize(SpawnConfiguration(enemy_type=2), level=3)
        assert first.entity is not second.entity
        assert host.entity is second.entity


class TestLevelPreservation:
    """Tests that a supplied level is never reset."""

    @pytest.mark.parametrize("mobile_id", [2, 15, 130, 146])
    def test_level_threaded_through(self, host, make_setup, mobile_id):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=mobile_id), level=17)
        assert result.level == 17
        assert host.entity.level == 17

    def test_custom_career_level(self, registry, host, make_setup, custom_template):
        registry.register_custom(custom_template(200))
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=200), level=9)
        assert result.category == MobileCategory.CUSTOM_CLASS
        assert result.level == 9


class TestEntryPoints:
    """Tests that every entry point runs the full pipeline."""

    def test_apply_enemy_settings_uses_stored_config(self, host, make_setup):
        setup = make_setup(host, config=SpawnConfiguration(enemy_type=130, allied_to_player=True))
        result = setup.apply_enemy_settings(MobileGender.MALE, enemy_level=6)
        assert result.category == MobileCategory.BUILTIN_CLASS
        assert result.team == MobileTeams.PLAYER_ALLY
        assert result.level == 6
        assert setup.config.gender == MobileGender.MALE
        assert result.collision is not None

    def test_configure(self, host, make_setup):
        setup = make_setup(host)
        result = setup.configure(
            MobileTypes.GIANT_BAT,
            MobileReactions.HOSTILE,
            MobileGender.UNSPECIFIED,
            spawn_distance_type=1,
            enemy_level=2,
        )
        assert setup.config.enemy_type == int(MobileTypes.GIANT_BAT)
        assert result.collision.height == pytest.approx(1.6)
        assert result.effects
        assert result.level == 2

    def test_configure_from_monster_career(self, host, make_setup):
        result = make_setup(host).configure_from_career(
            EntityTypes.ENEMY_MONSTER, 2, MobileGender.FEMALE, enemy_level=5
        )
        assert result.template.id == 2
        assert result.category == MobileCategory.BUILTIN_MONSTER
        assert result.level == 5

    def test_configure_from_class_career(self, host, make_setup):
        result = make_setup(host).configure_from_career(
            EntityTypes.ENEMY_CLASS, 2, MobileGender.MALE, is_hostile=False, enemy_level=8
        )
        assert result.template.id == 130
        assert result.template.reactions == MobileReactions.PASSIVE
        assert result.collision.height == pytest.approx(2.0)
        assert result.level == 8

    def test_configure_from_non_enemy_is_noop(self, host, make_setup):
        result = make_setup(host).configure_from_career(EntityTypes.NONE, 2, MobileGender.MALE)
        assert isinstance(result, ResolvedEntity)
        assert result.is_valid is False
        assert host.entity is None

    def test_entry_points_agree(self, registry, make_setup):
        hosts = [
            Enemy(mobile_unit=MobileUnit(), controller=CharacterController(), sounds=EnemySounds())
            for _ in range(3)
        ]
        results = [
            make_setup(hosts[0]).initialize(SpawnConfiguration(enemy_type=133), level=4),
            make_setup(hosts[1]).configure(133, MobileReactions.HOSTILE, MobileGender.UNSPECIFIED, enemy_level=4),
            make_setup(hosts[2]).configure_from_career(
                EntityTypes.ENEMY_CLASS, 5, MobileGender.UNSPECIFIED, enemy_level=4
            ),
        ]
        assert len({r.collision.height for r in results}) == 1
        assert results[0].effects == results[1].effects == results[2].effects
        assert {r.level for r in results} == {4}


class TestSpecialBehaviours:
    """Tests for the id-keyed behaviour table."""

    def test_seducer_gets_marker(self, host, make_setup):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=int(MobileTypes.DAEDRA_SEDUCER)))
        assert "DaedraSeducerMobileBehaviour" in host.mobile_unit.behaviours
        assert result.behaviours == ["DaedraSeducerMobileBehaviour"]

    def test_other_ids_get_none(self, host, make_setup):
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=int(MobileTypes.DAEDRA_LORD)))
        assert result.behaviours == []

    def test_table_only_has_seducer(self):
        assert list(SPECIAL_BEHAVIOURS) == [int(MobileTypes.DAEDRA_SEDUCER)]


class TestDecorativeMobiles:
    """Tests for mobiles that have a template but no career."""

    def test_full_setup_without_career(self, registry, host, make_setup):
        registry.register(MobileTemplate(id=600, name="Villager", size=(1.0, 1.8)))
        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=600), level=4)
        assert result.is_valid
        assert result.category == MobileCategory.UNRECOGNIZED
        assert result.entity_type == EntityTypes.NONE
        assert result.collision.height == pytest.approx(1.8)
        assert isinstance(host.entity, EnemyEntity)
        assert host.entity.career is None
        assert host.entity.entity_type == EntityTypes.NONE


class TestCustomTemplateFiles:
    """Tests for setups using templates loaded from JSON."""

    def test_rejected_file_leaves_setup_working(self, tmp_path, registry, host, make_setup):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({
            "300": {"name": "Bog", "min_health": 5},
            "301": {"name": "Glowing Bog", "glow_color": [300, 0, 0]},
        }), encoding="utf-8")
        with pytest.raises(ValidationError):
            registry.load_custom_templates(path)

        setup = make_setup(host)
        for mobile_id in (300, 301):
            result = setup.initialize(SpawnConfiguration(enemy_type=mobile_id), level=2)
            assert result.is_valid is False
            assert result.category == MobileCategory.UNRECOGNIZED
            assert host.entity is None

    def test_loaded_template_sets_up(self, tmp_path, registry, host, make_setup):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({
            "300": {"name": "Bog", "min_health": 5, "max_health": 9, "glow_color": [200, 80, 0]},
        }), encoding="utf-8")
        registry.load_custom_templates(path)

        result = make_setup(host).initialize(SpawnConfiguration(enemy_type=300), level=2)
        assert result.is_valid
        assert result.level == 2
        assert 5 <= host.entity.max_health <= 9
        assert any(isinstance(d, LightAuraDirective) for d in result.effects)


class TestTelemetry:
    """Tests for the setup event log."""

    def test_setup_event_written(self, tmp_path, host, make_setup):
        log_path = tmp_path / "telemetry.jsonl"
        telemetry.init(log_path)
        try:
            make_setup(host).initialize(SpawnConfiguration(enemy_type=2), level=5)
        finally:
            telemetry.close()

        rows = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
        events = [row for row in rows if row["event"] == "enemy_setup"]
        assert len(events) == 1
        assert events[0]["enemy_type"] == 2
        assert events[0]["level"] == 5
        assert events[0]["category"] == "builtin_monster"
        assert events[0]["valid"] is True
