"""
Visual and audio effects for a mobile template.

bind_effects() turns a template into a list of directives without touching
the template; apply_effects() pushes those directives onto the visual unit
and the audio component. Missing components are skipped, never an error.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

import pygame

from settings import GHOST_ALPHA_CUTOFF, GHOST_SHADER_NAME, LIGHT_AURA_LOCAL_POSITION
from systems.mobiles.types import MobileBehaviour, MobileTemplate
from world.entities import EnemySounds, LightAura, LightShadows, MobileUnit
from engine.error_handler import logger


@dataclass(frozen=True)
class ShaderDirective:
    shader_name: str
    cutoff: float


@dataclass(frozen=True)
class CastShadowsDirective:
    enabled: bool


@dataclass(frozen=True)
class ReceiveShadowsDirective:
    enabled: bool


@dataclass(frozen=True)
class LightAuraDirective:
    local_position: tuple
    color: tuple
    shadows: LightShadows


@dataclass(frozen=True)
class SoundBindingDirective:
    move_sound: int
    bark_sound: int
    attack_sound: int


EffectDirective = Union[
    ShaderDirective,
    CastShadowsDirective,
    ReceiveShadowsDirective,
    LightAuraDirective,
    SoundBindingDirective,
]


def bind_effects(template: MobileTemplate, dungeon_light_shadows: bool) -> List[EffectDirective]:
    """
    Directives for a template.

    dungeon_light_shadows selects soft shadows for glow lights; it is the
    lighting quality setting and is passed in rather than read globally.
    """
    directives: List[EffectDirective] = []

    if template.behaviour == MobileBehaviour.SPECTRAL:
        directives.append(ShaderDirective(GHOST_SHADER_NAME, GHOST_ALPHA_CUTOFF))

    if template.no_shadow:
        directives.append(CastShadowsDirective(False))

    if template.glow_color is not None:
        directives.append(ReceiveShadowsDirective(False))
        directives.append(
            LightAuraDirective(
                local_position=tuple(LIGHT_AURA_LOCAL_POSITION),
                color=tuple(template.glow_color),
                shadows=LightShadows.SOFT if dungeon_light_shadows else LightShadows.NONE,
            )
        )

    directives.append(
        SoundBindingDirective(
            move_sound=template.move_sound,
            bark_sound=template.bark_sound,
            attack_sound=template.attack_sound,
        )
    )
    return directives


def apply_effects(
    directives: List[EffectDirective],
    mobile_unit: MobileUnit,
    sounds: Optional[EnemySounds],
) -> None:
    """Apply directives to the unit's renderer and to the audio component."""
    renderer = mobile_unit.renderer

    for directive in directives:
        if isinstance(directive, SoundBindingDirective):
            if sounds is None:
                logger.debug("No audio component; skipping sound binding")
                continue
            sounds.move_sound = directive.move_sound
            sounds.bark_sound = directive.bark_sound
            sounds.attack_sound = directive.attack_sound
            continue

        if renderer is None:
            logger.debug(f"No renderer on mobile unit; skipping {type(directive).__name__}")
            continue

        if isinstance(directive, ShaderDirective):
            renderer.shader_name = directive.shader_name
            renderer.cutoff = directive.cutoff
        elif isinstance(directive, CastShadowsDirective):
            renderer.cast_shadows = directive.enabled
        elif isinstance(directive, ReceiveShadowsDirective):
            renderer.receive_shadows = directive.enabled
        elif isinstance(directive, LightAuraDirective):
            mobile_unit.children.append(
                LightAura(
                    local_position=pygame.Vector3(directive.local_position),
                    color=pygame.Color(*directive.color),
                    shadows=directive.shadows,
                )
            )
