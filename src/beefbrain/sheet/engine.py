"""
Recomputation engine for character sheets.

Entry points used by the command line and by other tools:

- :func:`validate` checks YAML well-formedness only.
- :func:`recompute` brings every derived field in line with the
  authoritative ones and re-renders the sheet when anything changed.
- :func:`apply_modifier` is a pass-through placeholder.
"""

from dataclasses import dataclass, field

import structlog

from beefbrain.exceptions import ParseError
from beefbrain.render import FlowStylePolicy, dump_compact

from .abilities import ABILITIES_PATH, resolve_abilities
from .document import get_mapping, parse_document
from .modifiers import Modifier
from .rules import apply_rules
from .tracker import Change, ChangeTracker

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SheetUpdate:
    """
    Result of a recomputation pass.

    Attributes:
        text: Resulting document text; the input object itself if unchanged
        changes: Every derived value that was rewritten
    """

    text: str
    changes: list[Change] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.changes)


def validate(text: str) -> bool:
    """
    Check that text is a well-formed YAML document.

    Empty or whitespace-only text is valid. No schema checks are made.

    Args:
        text: Document text

    Returns:
        True if the text parses, False otherwise
    """
    if not text.strip():
        return True
    try:
        parse_document(text)
    except ParseError as e:
        logger.debug("sheet_invalid", error=e.message, **e.details)
        return False
    return True


def update_sheet(text: str, policy: FlowStylePolicy | None = None) -> SheetUpdate:
    """
    Recompute derived fields and report what changed.

    Args:
        text: Document text
        policy: Flow-style policy for re-rendering. Defaults to the sheet layout.

    Returns:
        SheetUpdate with the resulting text and the list of changes

    Raises:
        ParseError: If the text is not well-formed YAML
    """
    document = parse_document(text)
    if get_mapping(document, ABILITIES_PATH) is None:
        logger.debug("sheet_inert", reason="no character.abilities")
        return SheetUpdate(text)

    tracker = ChangeTracker()
    abilities = resolve_abilities(document, tracker)
    apply_rules(document, abilities, tracker)

    if not tracker.changed:
        logger.debug("sheet_unchanged", abilities=len(abilities))
        return SheetUpdate(text)

    logger.info("sheet_recomputed", changes=len(tracker.changes))
    return SheetUpdate(dump_compact(document, policy), tracker.changes)


def recompute(text: str, policy: FlowStylePolicy | None = None) -> str:
    """
    Recompute derived fields of a character sheet.

    Args:
        text: Document text
        policy: Flow-style policy for re-rendering

    Returns:
        ``text`` itself when nothing changed or the sheet has no abilities,
        otherwise the canonical rendering starting with ``---``

    Raises:
        ParseError: If the text is not well-formed YAML
    """
    return update_sheet(text, policy).text


def apply_modifier(text: str, modifier: Modifier | object) -> str:
    """
    Apply a modifier to a character sheet.

    Modifiers are not applied yet. The description is opaque: a
    :class:`Modifier` or anything else is accepted and the text is returned
    unchanged.
    """
    if isinstance(modifier, Modifier):
        logger.info("modifier_not_applied", type=modifier.type, target=modifier.target)
    else:
        logger.info("modifier_not_applied", kind=type(modifier).__name__)
    return text
