"""
Mobile template registry.

Holds two stores:
- mobile templates: every mobile that can be spawned, keyed by id
- custom career templates: the extension store for enemy careers outside
  the built-in ranges

A mobile registered without a career (decorative mobiles) can still be
spawned; it just never becomes an enemy. Both stores are populated at
startup and only read afterwards, so lookups need no locking.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from engine.error_handler import TemplateError, ValidationError, logger
from settings import (
    BUILTIN_CLASS_MAX_ID,
    BUILTIN_CLASS_MIN_ID,
    BUILTIN_MONSTER_MAX_ID,
    BUILTIN_MONSTER_MIN_ID,
)
from .types import MobileBehaviour, MobileGender, MobileReactions, MobileTeams, MobileTemplate
from .validation import validate_template


def is_builtin_id(mobile_id: int) -> bool:
    """True when the id falls in one of the shipped ranges."""
    return (
        BUILTIN_MONSTER_MIN_ID <= mobile_id <= BUILTIN_MONSTER_MAX_ID
        or BUILTIN_CLASS_MIN_ID <= mobile_id <= BUILTIN_CLASS_MAX_ID
    )


class MobileRegistry:
    """
    Registry of mobile templates keyed by exact integer id.

    Usage:
        registry = MobileRegistry()
        register_all_definitions(registry)
        registry.load_custom_templates(Path("mods/custom_enemies.json"))

        template = registry.get(2)         # any spawnable mobile
        career = registry.get_custom(300)  # custom career store only
    """

    def __init__(self) -> None:
        self._templates: Dict[int, MobileTemplate] = {}
        self._custom: Dict[int, MobileTemplate] = {}

    def register(self, template: MobileTemplate) -> MobileTemplate:
        """Register a mobile template (built-in or decorative)."""
        if template.id in self._templates:
            raise TemplateError(f"Template id already registered: {template.id}")
        _check_template(template)
        self._templates[template.id] = template
        return template

    def register_custom(self, template: MobileTemplate) -> MobileTemplate:
        """
        Register a custom career template.

        The template also becomes the mobile template for its id unless one
        was registered before.
        """
        if is_builtin_id(template.id):
            raise TemplateError(f"Custom template id {template.id} collides with a built-in range")
        if template.id in self._custom:
            raise TemplateError(f"Custom template id already registered: {template.id}")
        _check_template(template)
        self._custom[template.id] = template
        self._templates.setdefault(template.id, template)
        return template

    def get(self, mobile_id: int) -> Optional[MobileTemplate]:
        """Get a mobile template by exact id, or None."""
        return self._templates.get(mobile_id)

    def get_custom(self, mobile_id: int) -> Optional[MobileTemplate]:
        """Get a custom career template by id."""
        return self._custom.get(mobile_id)

    def ids(self) -> List[int]:
        return sorted(self._templates.keys())

    def custom_ids(self) -> List[int]:
        return sorted(self._custom.keys())

    def __contains__(self, mobile_id: object) -> bool:
        return mobile_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    # ------------------------------------------------------------------
    # Custom template loading
    # ------------------------------------------------------------------

    def load_custom_templates(self, path: Union[str, Path]) -> List[MobileTemplate]:
        """
        Load custom templates from a JSON object keyed by id.

        Example file:
            {
                "300": {"name": "Bog Lurker", "behaviour": "aquatic", "size": [1.2, 0.8]},
                "400": {"name": "Hedge Witch", "team": "knights_and_mages"}
            }

        Returns the registered templates. Raises TemplateError on bad data.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            raise TemplateError(f"Could not read custom templates from {path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise TemplateError(f"Expected top-level object in {path}")

        # Check every entry before registering any, so a bad file registers nothing
        templates = [template_from_dict(raw_id, payload) for raw_id, payload in raw.items()]
        for template in templates:
            _check_template(template)
        loaded = [self.register_custom(template) for template in templates]

        logger.info(f"Loaded {len(loaded)} custom templates from {path}")
        return loaded


def _check_template(template: MobileTemplate) -> None:
    errors = validate_template(template)
    if errors:
        raise ValidationError(
            f"Template {template.id} ({template.name!r}) is invalid: {'; '.join(errors)}",
            user_message=f"Template {template.id} is invalid",
        )


def template_from_dict(raw_id: Any, payload: Any) -> MobileTemplate:
    """Build a template from JSON data. Raises TemplateError on bad fields."""
    try:
        mobile_id = int(raw_id)
    except (TypeError, ValueError) as exc:
        raise TemplateError(f"Template id must be an integer, got {raw_id!r}") from exc

    if not isinstance(payload, dict):
        raise TemplateError(f"Template {mobile_id} must be an object")
    if not isinstance(payload.get("name"), str):
        raise TemplateError(f"Template {mobile_id} missing name")

    try:
        glow = payload.get("glow_color")
        size = payload.get("size", (1.0, 1.0))
        if len(size) != 2:
            raise ValueError(f"size must have two components, got {size!r}")
        return MobileTemplate(
            id=mobile_id,
            name=payload["name"],
            behaviour=MobileBehaviour(payload.get("behaviour", "general")),
            team=MobileTeams(payload.get("team", "none")),
            reactions=MobileReactions(payload.get("reactions", "hostile")),
            gender=MobileGender(payload.get("gender", "unspecified")),
            move_sound=int(payload.get("move_sound", -1)),
            bark_sound=int(payload.get("bark_sound", -1)),
            attack_sound=int(payload.get("attack_sound", -1)),
            glow_color=tuple(int(c) for c in glow) if glow is not None else None,
            no_shadow=bool(payload.get("no_shadow", False)),
            size=(float(size[0]), float(size[1])),
            level=int(payload.get("level", 1)),
            min_health=int(payload.get("min_health", 1)),
            max_health=int(payload.get("max_health", 1)),
            min_damage=int(payload.get("min_damage", 1)),
            max_damage=int(payload.get("max_damage", 1)),
            armor_value=int(payload.get("armor_value", 0)),
        )
    except (TypeError, ValueError) as exc:
        raise TemplateError(f"Template {mobile_id} is malformed: {exc}") from exc


# Global registry
MOBILE_REGISTRY = MobileRegistry()


def register_template(template: MobileTemplate) -> MobileTemplate:
    """Register a built-in template in the global registry."""
    return MOBILE_REGISTRY.register(template)


def get_template(mobile_id: int) -> Optional[MobileTemplate]:
    """Get a template from the global registry."""
    return MOBILE_REGISTRY.get(mobile_id)


def register_custom_template(template: MobileTemplate) -> MobileTemplate:
    """Register a custom career template in the global registry."""
    return MOBILE_REGISTRY.register_custom(template)


def get_custom_career_template(mobile_id: int) -> Optional[MobileTemplate]:
    """Get a custom career template from the global registry."""
    return MOBILE_REGISTRY.get_custom(mobile_id)
