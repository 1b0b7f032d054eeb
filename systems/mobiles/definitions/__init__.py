"""
Built-in mobile template definitions.

Structure:
- monsters.py: monster templates (ids 0-42)
- classes.py:  class templates (ids 128-146)
"""

from . import monsters
from . import classes
from ..registry import MobileRegistry


def register_all_definitions(registry: MobileRegistry) -> None:
    """Register all built-in mobile templates into a registry."""
    monsters.register_monster_templates(registry)
    classes.register_class_templates(registry)
