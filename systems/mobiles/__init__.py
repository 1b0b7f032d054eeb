"""
Mobile system module.

This module provides mobile templates, the template registry and identifier
classification used by the enemy setup pipeline.

All public APIs are exported from this module.
"""

from .types import (
    EntityTypes, MobileBehaviour, MobileGender, MobileReactions,
    MobileTeams, MobileTemplate, MobileTypes,
)
from .registry import (
    MOBILE_REGISTRY, MobileRegistry, is_builtin_id, template_from_dict,
    register_template, get_template,
    register_custom_template, get_custom_career_template,
)
from .classification import (
    MobileCategory, MobileClassification,
    classify_mobile_id, mobile_type_for_career,
)

# Register all built-in definitions on import
from .definitions import register_all_definitions
register_all_definitions(MOBILE_REGISTRY)

__all__ = [
    "EntityTypes",
    "MobileBehaviour",
    "MobileGender",
    "MobileReactions",
    "MobileTeams",
    "MobileTemplate",
    "MobileTypes",
    "MOBILE_REGISTRY",
    "MobileRegistry",
    "is_builtin_id",
    "template_from_dict",
    "register_template",
    "get_template",
    "register_custom_template",
    "get_custom_career_template",
    "MobileCategory",
    "MobileClassification",
    "classify_mobile_id",
    "mobile_type_for_career",
    "register_all_definitions",
]

# Validation helpers are available but not in __all__ to keep the main API clean:
# from systems.mobiles.validation import run_full_validation
