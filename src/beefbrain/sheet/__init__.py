"""Character sheet recomputation: abilities, derived fields and rules."""

from .abilities import ABILITY_ABBREVIATIONS, AbilityName, get_modifier
from .capacity import carrying_capacity, heavy_load
from .engine import SheetUpdate, apply_modifier, recompute, update_sheet, validate
from .modifiers import Modifier

__all__ = [
    "ABILITY_ABBREVIATIONS",
    "AbilityName",
    "Modifier",
    "SheetUpdate",
    "apply_modifier",
    "carrying_capacity",
    "get_modifier",
    "heavy_load",
    "recompute",
    "update_sheet",
    "validate",
]
