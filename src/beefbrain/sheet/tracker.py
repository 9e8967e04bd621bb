"""Change tracking for a recomputation pass."""

from dataclasses import dataclass, field
from typing import Any

import structlog

from .document import NodePath, format_path

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Change:
    """
    A single derived value that was rewritten.

    Attributes:
        path: Location of the value in the document
        old: Value found in the document
        new: Recomputed value
    """

    path: NodePath
    old: Any
    new: Any

    def __str__(self) -> str:
        return f"{format_path(self.path)}: {self.old!r} -> {self.new!r}"


@dataclass
class ChangeTracker:
    """Records every derived value a pass altered."""

    changes: list[Change] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if at least one value was altered."""
        return bool(self.changes)

    def compare(self, path: NodePath, old: Any, new: Any) -> bool:
        """
        Record a change at ``path`` if ``old`` and ``new`` differ.

        Values are compared by type as well as value, so ``1`` and ``1.0`` or
        ``1`` and ``True`` count as different.

        Returns:
            True if a change was recorded
        """
        if type(old) is type(new) and old == new:
            return False
        self.changes.append(Change(path, old, new))
        logger.debug("derived_field_updated", path=format_path(path), old=old, new=new)
        return True
