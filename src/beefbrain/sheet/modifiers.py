"""Structured modifier description accepted by :func:`~beefbrain.sheet.engine.apply_modifier`."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Modifier(BaseModel):
    """
    A modifier that can be applied to a character sheet.

    Attributes:
        type: Kind of modifier (e.g., 'ability', 'skill', 'combat')
        target: Field or property the modifier acts on
        value: Value to apply; numeric, string or structured
        description: Optional note on what the modifier does
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., description="Kind of modifier")
    target: str = Field(..., description="Target field or property")
    value: Any = Field(..., description="Value to apply")
    description: str | None = Field(default=None, description="What this modifier does")
