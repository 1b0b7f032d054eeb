"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import random

import pytest
import pygame
from typing import Generator


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    Only pygame.math and pygame.Color are used, so no display is opened.
    """
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def registry():
    """
    A fresh registry with all built-in templates and no custom careers.
    """
    from systems.mobiles import MobileRegistry, register_all_definitions
    reg = MobileRegistry()
    register_all_definitions(reg)
    return reg


@pytest.fixture
def host():
    """
    A host with every component present.
    """
    from world.entities import CharacterController, Enemy, EnemySounds, MobileUnit
    return Enemy(
        mobile_unit=MobileUnit(),
        controller=CharacterController(),
        sounds=EnemySounds(),
    )


@pytest.fixture
def make_setup(registry):
    """
    Factory for EnemySetup bound to the test registry with a seeded RNG.
    """
    from engine.enemy_setup import EnemySetup

    def _make(target_host, **kwargs):
        kwargs.setdefault("registry", registry)
        kwargs.setdefault("rng", random.Random(1234))
        kwargs.setdefault("dungeon_light_shadows", True)
        return EnemySetup(target_host, **kwargs)

    return _make


@pytest.fixture
def custom_template():
    """
    Factory for small custom career templates.
    """
    from systems.mobiles import MobileTemplate

    def _make(mobile_id, **kwargs):
        kwargs.setdefault("name", f"Custom {mobile_id}")
        kwargs.setdefault("size", (1.0, 2.0))
        kwargs.setdefault("level", 3)
        kwargs.setdefault("min_health", 10)
        kwargs.setdefault("max_health", 20)
        return MobileTemplate(id=mobile_id, **kwargs)

    return _make
