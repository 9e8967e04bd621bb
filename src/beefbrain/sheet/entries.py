"""Entry shapes found on a character sheet.

Sheet entries are short YAML sequences whose meaning depends on position.
Each shape gets its own variant here so the rules never index raw lists:

- abilities: ``[score, {str: mod}]`` or ``[score, {str: mod}, {base: n, ...}]``
- derived stats: ``[total, {bab: 1, str: 2}, ...]``
- weapons: ``[attack, "1d8+2 slashing", "19-20/x2", {_: 3, enh: 1}, {str: 2}, ...]``
"""

import re
from dataclasses import dataclass, field
from typing import Any

from .document import is_number, sum_numbers

# Placeholder for an ability entry written as a bare [score]
NO_BAG = object()

# First dice term of a damage string with its optional flat bonus
DAMAGE_TERM = re.compile(
    r"(?P<dice>\d*d\d+)(?:(?P<gap>\s*)(?P<sign>[+-])(?P<pad>\s*)(?P<flat>\d+))?"
)


@dataclass(frozen=True)
class ScoredAbility:
    """
    Ability whose score is authoritative: ``[score, modifier_bag, ...]``.

    Attributes:
        score: Score as written on the sheet
        modifier_bag: Single-key mapping holding the modifier
        trailing: Elements after the modifier bag, kept as-is
    """

    score: int | float
    modifier_bag: Any
    trailing: tuple[Any, ...] = ()

    @property
    def modifier_key(self) -> str | None:
        """Name of the modifier bag's key, e.g. ``str``."""
        if isinstance(self.modifier_bag, dict) and self.modifier_bag:
            return next(iter(self.modifier_bag))
        return None

    def total(self) -> int | float:
        """The score this entry should carry."""
        return self.score

    def to_node(self, score: int | float, modifier: int) -> list[Any]:
        """Rebuild the sequence with a new score and modifier."""
        if self.modifier_bag is NO_BAG:
            return [score]
        bag = self.modifier_bag
        if self.modifier_key is not None:
            bag = {self.modifier_key: modifier}
        return [score, bag, *self.trailing]


@dataclass(frozen=True)
class ComponentAbility(ScoredAbility):
    """Ability whose score is the sum of its component breakdown."""

    @property
    def components(self) -> dict[str, Any]:
        return self.trailing[0]

    def total(self) -> int | float:
        return sum_numbers(self.components)


def parse_ability(node: Any) -> ScoredAbility | None:
    """
    Classify an ability entry.

    Returns:
        A ComponentAbility when a breakdown with a numeric ``base`` follows
        the modifier bag, a ScoredAbility when only the score is usable, or
        None when the node is not an ability entry at all
    """
    if not isinstance(node, list) or not node:
        return None

    score = node[0]
    bag = node[1] if len(node) > 1 else NO_BAG
    trailing = tuple(node[2:])

    if trailing and isinstance(trailing[0], dict) and is_number(trailing[0].get("base")):
        return ComponentAbility(score, bag, trailing)
    if is_number(score):
        return ScoredAbility(score, bag, trailing)
    return None


@dataclass(frozen=True)
class DerivedStat:
    """
    A total with its named contributions: ``[total, {name: value, ...}, ...]``.

    Attributes:
        total: Total as written on the sheet
        contributions: Named numeric terms summing to the total
        trailing: Elements after the contribution map, kept as-is
    """

    total: Any
    contributions: dict[str, Any]
    trailing: tuple[Any, ...] = ()

    @classmethod
    def from_node(cls, node: Any) -> "DerivedStat | None":
        if isinstance(node, list) and len(node) >= 2 and isinstance(node[1], dict):
            return cls(node[0], node[1], tuple(node[2:]))
        return None

    def with_contribution(self, name: str, value: int | float) -> "DerivedStat":
        """Return a copy with ``name`` set to ``value`` and the total re-summed."""
        contributions = {**self.contributions, name: value}
        return DerivedStat(sum_numbers(contributions), contributions, self.trailing)

    def to_node(self) -> list[Any]:
        return [self.total, self.contributions, *self.trailing]


@dataclass(frozen=True)
class Weapon:
    """
    A named weapon under ``combat.attack.melee`` or ``combat.attack.ranged``.

    Attributes:
        attack_bonus: Total attack bonus
        damage: Damage string such as ``1d8+2 slashing``
        critical: Critical range, e.g. ``19-20/x2``
        bonuses: Attack bonus breakdown; ``_`` mirrors the generic attack
        ability_modifiers: Ability modifiers added to damage, e.g. ``{str: 2}``
        flags: Any further elements, kept as-is
    """

    attack_bonus: Any
    damage: Any
    critical: Any
    bonuses: dict[str, Any]
    ability_modifiers: dict[str, Any]
    flags: tuple[Any, ...] = field(default=())

    @classmethod
    def from_node(cls, node: Any) -> "Weapon | None":
        if (
            isinstance(node, list)
            and len(node) >= 5
            and isinstance(node[3], dict)
            and isinstance(node[4], dict)
        ):
            return cls(node[0], node[1], node[2], node[3], node[4], tuple(node[5:]))
        return None

    def to_node(self) -> list[Any]:
        return [
            self.attack_bonus,
            self.damage,
            self.critical,
            self.bonuses,
            self.ability_modifiers,
            *self.flags,
        ]


def set_damage_bonus(damage: str, bonus: int | float) -> str:
    """
    Rewrite the flat bonus on the first dice term of a damage string.

    An existing bonus keeps its spacing (``1d8 + 2``). A term without a bonus
    only gains one when ``bonus`` is non-zero.

    Examples:
        >>> set_damage_bonus("1d8+2 slashing", 4)
        '1d8+4 slashing'
        >>> set_damage_bonus("1d8 + 2 slashing", -1)
        '1d8 - 1 slashing'
        >>> set_damage_bonus("2d6", 0)
        '2d6'
    """
    match = DAMAGE_TERM.search(damage)
    if match is None:
        return damage

    if match.group("flat") is None:
        if bonus == 0:
            return damage
        term = f"{match.group('dice')}{bonus:+}"
    else:
        sign = "-" if bonus < 0 else "+"
        term = f"{match.group('dice')}{match.group('gap')}{sign}{match.group('pad')}{abs(bonus)}"

    return damage[: match.start()] + term + damage[match.end() :]
