"""Flow-style policy: which nodes of a sheet render inline.

A policy is an ordered list of dotted path patterns. Each segment is either a
literal mapping key, a sequence index, or ``*`` to match any single segment.
"""

from dataclasses import dataclass

DEFAULT_FLOW_STYLE_PATHS: tuple[str, ...] = (
    "character.abilities.*",
    "character.levels.*",
    "character.combat.initiative",
    "character.combat.saves.*",
    "character.combat.attack.bab",
    "character.combat.attack.grapple",
    "character.combat.attack.melee.*",
    "character.combat.attack.ranged.*",
    "character.combat.defense.*",
    "character.movement.*",
    "character.movement.capacity",
    "character.skills.*",
    "character.special.feats.*",
    "character.inventory._on",
    "character.inventory.*.*",
)


@dataclass(frozen=True)
class FlowStylePolicy:
    """
    Ordered path patterns selecting nodes for compact flow rendering.

    Attributes:
        patterns: Dotted patterns such as ``character.skills.*``
    """

    patterns: tuple[str, ...] = DEFAULT_FLOW_STYLE_PATHS

    def __post_init__(self) -> None:
        for pattern in self.patterns:
            if not pattern or "" in pattern.split("."):
                raise ValueError(f"Invalid flow style pattern: {pattern!r}")

    def matches(self, path: tuple[str, ...]) -> bool:
        """Check whether a node at ``path`` should render in flow style.

        Args:
            path: Path segments from the document root, indices as strings

        Returns:
            True if any pattern matches the path segment-for-segment
        """
        for pattern in self.patterns:
            parts = pattern.split(".")
            if len(parts) == len(path) and all(
                part == "*" or part == segment for part, segment in zip(parts, path)
            ):
                return True
        return False
