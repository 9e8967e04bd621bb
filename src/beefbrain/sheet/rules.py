"""Propagation rules for derived character sheet fields.

Each rule reads one resolved ability and pushes its modifier (or score) into
the derived fields that embed it. Rules are guarded by the presence of their
ability and their target structure; a missing section simply skips the rule.
Rules never mutate nested values in place: they rebuild an entry and assign
it back by path, so values shared between entries cannot leak changes.
"""

from dataclasses import dataclass
from typing import Any

import structlog

from .abilities import ABILITY_ABBREVIATIONS, AbilityName, ResolvedAbility
from .capacity import carrying_capacity
from .document import NodePath, get_mapping, get_path, set_path, sum_numbers
from .entries import DerivedStat, Weapon, set_damage_bonus
from .tracker import ChangeTracker

logger = structlog.get_logger(__name__)

CHARACTER = ("character",)
ATTACK_PATH = CHARACTER + ("combat", "attack")
SAVES_PATH = CHARACTER + ("combat", "saves")
DEFENSE_PATH = CHARACTER + ("combat", "defense")
SKILLS_PATH = CHARACTER + ("skills",)

# Skills that always carry a strength contribution
STRENGTH_SKILLS = frozenset({"climb", "jump", "swim"})

# Key of the generic entry inside an attack group, and of its mirror on weapons
GENERIC_ATTACK = "_"


@dataclass
class RuleContext:
    """
    State shared by the rules of one recomputation pass.

    Attributes:
        document: Parsed sheet being updated
        abilities: Resolved abilities keyed by lower-cased name
        tracker: Change tracker for this pass
    """

    document: dict[str, Any]
    abilities: dict[str, ResolvedAbility]
    tracker: ChangeTracker

    def replace(self, path: NodePath, old: Any, new: Any) -> bool:
        """Assign ``new`` at ``path`` if it differs from ``old``."""
        if self.tracker.compare(path, old, new):
            set_path(self.document, path, new)
            return True
        return False

    def update_stat(
        self, path: NodePath, ability: ResolvedAbility, force: bool = False
    ) -> DerivedStat | None:
        """
        Push an ability modifier into the derived stat at ``path``.

        Args:
            path: Location of a ``[total, {contributions}]`` entry
            ability: Ability whose modifier is pushed
            force: Add the contribution even if the entry lacks it

        Returns:
            The entry after the update, or None if ``path`` holds no derived stat
        """
        node = get_path(self.document, path)
        stat = DerivedStat.from_node(node)
        if stat is None:
            return None
        key = ability.abbreviation
        if key is None or (not force and key not in stat.contributions):
            return stat

        updated = stat.with_contribution(key, ability.modifier)
        self.replace(path, node, updated.to_node())
        return updated


class PropagationRule:
    """Base class for rules driven by a single ability."""

    ability: str

    def apply(self, context: RuleContext) -> None:
        ability = context.abilities.get(self.ability)
        if ability is None:
            return
        self.propagate(context, ability)

    def propagate(self, context: RuleContext, ability: ResolvedAbility) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class CarryingCapacityRule(PropagationRule):
    """Strength score to ``movement.capacity`` load thresholds."""

    ability: str = AbilityName.STRENGTH
    path: NodePath = CHARACTER + ("movement", "capacity")

    def propagate(self, context: RuleContext, ability: ResolvedAbility) -> None:
        capacity = get_mapping(context.document, self.path)
        if capacity is None:
            return
        # Existing keys keep their order; missing ones are appended
        updated = {**capacity, **carrying_capacity(ability.score)}
        context.replace(self.path, capacity, updated)


@dataclass(frozen=True)
class DerivedStatRule(PropagationRule):
    """A single derived stat that always carries the ability, e.g. initiative."""

    ability: str
    path: NodePath

    def propagate(self, context: RuleContext, ability: ResolvedAbility) -> None:
        context.update_stat(self.path, ability, force=True)


@dataclass(frozen=True)
class ContributionGroupRule(PropagationRule):
    """
    Every entry of a group (skills, saves, defense) keyed with the ability.

    Attributes:
        ability: Ability name
        path: Mapping holding the entries
        always: Entry names that carry the ability even when not yet keyed
    """

    ability: str
    path: NodePath
    always: frozenset[str] = frozenset()

    def propagate(self, context: RuleContext, ability: ResolvedAbility) -> None:
        group = get_mapping(context.document, self.path)
        if group is None:
            return
        for name in list(group):
            context.update_stat(self.path + (name,), ability, force=name in self.always)


@dataclass(frozen=True)
class AttackGroupRule(PropagationRule):
    """
    Generic attack entry of a group plus every named weapon in it.

    The generic entry (``_``) always carries the ability. Each weapon then
    mirrors the generic total into its bonus breakdown, takes current
    modifiers for every ability in its damage modifier map, re-sums its attack
    bonus and rewrites the bonus of its damage dice.
    """

    ability: str
    group: str

    def propagate(self, context: RuleContext, ability: ResolvedAbility) -> None:
        group_path = ATTACK_PATH + (self.group,)
        group = get_mapping(context.document, group_path)
        if group is None:
            return

        generic = context.update_stat(group_path + (GENERIC_ATTACK,), ability, force=True)
        for name in list(group):
            if name == GENERIC_ATTACK:
                continue
            self._update_weapon(context, group_path + (name,), generic)

    def _update_weapon(
        self, context: RuleContext, path: NodePath, generic: DerivedStat | None
    ) -> None:
        node = get_path(context.document, path)
        weapon = Weapon.from_node(node)
        if weapon is None:
            return

        bonuses = dict(weapon.bonuses)
        if generic is not None:
            bonuses[GENERIC_ATTACK] = generic.total

        modifiers = dict(weapon.ability_modifiers)
        keyed = False
        for resolved in context.abilities.values():
            if resolved.abbreviation in modifiers:
                modifiers[resolved.abbreviation] = resolved.modifier
                keyed = True

        damage = weapon.damage
        if keyed and isinstance(damage, str):
            damage = set_damage_bonus(damage, sum_numbers(modifiers))

        updated = Weapon(
            sum_numbers(bonuses),
            damage,
            weapon.critical,
            bonuses,
            modifiers,
            weapon.flags,
        )
        context.replace(path, node, updated.to_node())


def _keyed_rules(ability: str) -> tuple[PropagationRule, ...]:
    return (
        ContributionGroupRule(ability, SAVES_PATH),
        ContributionGroupRule(ability, DEFENSE_PATH),
        ContributionGroupRule(ability, SKILLS_PATH),
    )


# Order matters: weapons read the generic attack total updated just before them
RULES: tuple[PropagationRule, ...] = (
    CarryingCapacityRule(),
    AttackGroupRule(AbilityName.STRENGTH, "melee"),
    DerivedStatRule(AbilityName.STRENGTH, ATTACK_PATH + ("grapple",)),
    ContributionGroupRule(AbilityName.STRENGTH, SKILLS_PATH, always=STRENGTH_SKILLS),
    AttackGroupRule(AbilityName.DEXTERITY, "ranged"),
    DerivedStatRule(AbilityName.DEXTERITY, CHARACTER + ("combat", "initiative")),
    ContributionGroupRule(AbilityName.DEXTERITY, SAVES_PATH),
    ContributionGroupRule(AbilityName.DEXTERITY, DEFENSE_PATH),
    ContributionGroupRule(AbilityName.DEXTERITY, SKILLS_PATH),
    *(
        rule
        for name in ABILITY_ABBREVIATIONS
        if name not in (AbilityName.STRENGTH, AbilityName.DEXTERITY)
        for rule in _keyed_rules(name)
    ),
)


def apply_rules(
    document: dict[str, Any],
    abilities: dict[str, ResolvedAbility],
    tracker: ChangeTracker,
    rules: tuple[PropagationRule, ...] = RULES,
) -> None:
    """
    Run propagation rules in order against a sheet.

    Args:
        document: Parsed sheet, abilities already resolved
        abilities: Output of :func:`resolve_abilities`
        tracker: Change tracker for this pass
        rules: Rules to run, in order
    """
    context = RuleContext(document, abilities, tracker)
    for rule in rules:
        before = len(tracker.changes)
        rule.apply(context)
        if len(tracker.changes) > before:
            logger.debug(
                "rule_applied",
                rule=type(rule).__name__,
                ability=str(rule.ability),
                changes=len(tracker.changes) - before,
            )
