"""Ability scores and modifiers for D&D 3.5e character sheets.

Every entry under ``character.abilities`` is brought into a consistent state:
the score is recomputed from its component breakdown when one exists, and the
modifier is recomputed from the score.
"""

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import structlog

from .document import get_mapping, set_path
from .entries import ComponentAbility, parse_ability
from .tracker import ChangeTracker

logger = structlog.get_logger(__name__)

ABILITIES_PATH = ("character", "abilities")


class AbilityName(StrEnum):
    """Core character abilities."""

    STRENGTH = "strength"
    DEXTERITY = "dexterity"
    CONSTITUTION = "constitution"
    INTELLIGENCE = "intelligence"
    WISDOM = "wisdom"
    CHARISMA = "charisma"


# Contribution keys used for each ability throughout a sheet
ABILITY_ABBREVIATIONS: dict[str, str] = {
    AbilityName.STRENGTH: "str",
    AbilityName.DEXTERITY: "dex",
    AbilityName.CONSTITUTION: "con",
    AbilityName.INTELLIGENCE: "int",
    AbilityName.WISDOM: "wis",
    AbilityName.CHARISMA: "cha",
}


@dataclass(frozen=True)
class ResolvedAbility:
    """
    An ability after resolution.

    Attributes:
        name: Ability name as written on the sheet, e.g. ``strength``
        score: Current score
        modifier: Modifier derived from the score
    """

    name: str
    score: int | float
    modifier: int

    @property
    def abbreviation(self) -> str | None:
        """Contribution key for this ability, e.g. ``str``."""
        return ABILITY_ABBREVIATIONS.get(self.name.lower())


def get_modifier(score: int | float) -> int:
    """Calculate the D&D ability modifier.

    Args:
        score: The ability score (any number, including <= 0 and >= 30)

    Returns:
        The modifier as an int: (score - 10) / 2 floored toward negative infinity

    Examples:
        >>> get_modifier(10)
        0
        >>> get_modifier(18)
        4
        >>> get_modifier(9)
        -1
    """
    return math.floor((score - 10) / 2)


def resolve_abilities(document: dict[str, Any], tracker: ChangeTracker) -> dict[str, ResolvedAbility]:
    """
    Recompute every ability's score and modifier in place.

    Entries that are not ability-shaped are left alone. Each rebuilt entry
    replaces the old one in the document only if it differs.

    Args:
        document: Parsed sheet with a ``character.abilities`` mapping
        tracker: Change tracker for this pass

    Returns:
        Resolved abilities keyed by lower-cased ability name
    """
    abilities = get_mapping(document, ABILITIES_PATH)
    if abilities is None:
        return {}

    resolved: dict[str, ResolvedAbility] = {}
    for name, node in list(abilities.items()):
        entry = parse_ability(node)
        if entry is None:
            logger.debug("ability_entry_skipped", ability=name)
            continue

        score = entry.total()
        modifier = get_modifier(score)
        rebuilt = entry.to_node(score, modifier)

        path = ABILITIES_PATH + (name,)
        if tracker.compare(path, node, rebuilt):
            set_path(document, path, rebuilt)

        if isinstance(entry, ComponentAbility) and score != entry.score:
            logger.debug("ability_score_from_components", ability=name, old=entry.score, new=score)

        resolved[str(name).lower()] = ResolvedAbility(str(name), score, modifier)

    return resolved
