"""
Validation and integrity checking for mobile templates.

Provides functions to validate that all registered templates are usable by
the setup pipeline.
"""

from typing import TYPE_CHECKING, Any, Dict, List

from settings import CUSTOM_CLASS_BAND_BIT
from .types import MobileTemplate

if TYPE_CHECKING:
    from .registry import MobileRegistry


def validate_template(template: MobileTemplate) -> List[str]:
    """
    Validate a single template.

    Returns:
        List of problems (empty list if valid)
    """
    errors = []

    if not template.name or not template.name.strip():
        errors.append("Missing or empty name")

    width, height = template.size
    if width <= 0 or height <= 0:
        errors.append(f"Invalid size: {template.size} (both components must be > 0)")

    for slot in ("move_sound", "bark_sound", "attack_sound"):
        value = getattr(template, slot)
        if value < -1:
            errors.append(f"Invalid {slot}: {value} (use -1 for no sound)")

    if template.glow_color is not None:
        if len(template.glow_color) != 3 or any(not 0 <= c <= 255 for c in template.glow_color):
            errors.append(f"Invalid glow_color: {template.glow_color}")

    if template.level < 1:
        errors.append(f"Invalid level: {template.level} (must be >= 1)")

    if template.min_health > template.max_health:
        errors.append(
            f"min_health ({template.min_health}) > max_health ({template.max_health})"
        )
    if template.min_damage > template.max_damage:
        errors.append(
            f"min_damage ({template.min_damage}) > max_damage ({template.max_damage})"
        )
    if template.armor_value < 0:
        errors.append(f"armor_value cannot be negative: {template.armor_value}")

    return errors


def validate_all_templates(registry: "MobileRegistry") -> Dict[int, List[str]]:
    """
    Validate all registered templates, built-in and custom.

    Returns:
        Dict mapping template id to list of errors (empty list if valid)
    """
    results = {}

    for mobile_id in registry.ids():
        errors = validate_template(registry.get(mobile_id))
        career = registry.get_custom(mobile_id)
        if career is not None and career is not registry.get(mobile_id):
            errors.extend(f"career: {error}" for error in validate_template(career))
        results[mobile_id] = errors

    return results


def describe_custom_bands(registry: "MobileRegistry") -> Dict[str, List[int]]:
    """Split custom ids by the band they fall in (monster or class)."""
    bands: Dict[str, List[int]] = {"monster": [], "class": []}
    for mobile_id in registry.custom_ids():
        key = "class" if mobile_id & CUSTOM_CLASS_BAND_BIT else "monster"
        bands[key].append(mobile_id)
    return bands


def run_full_validation(registry: "MobileRegistry") -> Dict[str, Any]:
    """
    Run all validation checks and return a comprehensive report.

    Returns:
        Dict with validation results
    """
    template_errors = validate_all_templates(registry)
    error_count = sum(len(errors) for errors in template_errors.values())

    return {
        "templates": {
            "total": len(registry),
            "valid": len([t for t, e in template_errors.items() if not e]),
            "invalid": len([t for t, e in template_errors.items() if e]),
            "errors": template_errors,
            "error_count": error_count,
        },
        "custom_bands": describe_custom_bands(registry),
        "overall_valid": error_count == 0,
    }
