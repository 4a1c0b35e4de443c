"""Enumerations used by the save-file domain model."""

from __future__ import annotations

from enum import StrEnum


class NameKind(StrEnum):
    """Shapes a pawn name node can take."""

    NULL = "null"
    SINGLE = "single"
    TRIPLE = "triple"


class Gender(StrEnum):
    """Pawn gender as recorded by the save."""

    MALE = "male"
    FEMALE = "female"


class RelationKind(StrEnum):
    """Faction relationship states.

    Values mirror the text stored in the save document.
    """

    HOSTILE = "Hostile"
    NEUTRAL = "Neutral"
    ALLY = "Ally"
