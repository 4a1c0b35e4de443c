"""Declarative description of the save document layout.

Every tag, path and sentinel string the builder relies on lives here so the
parsers never hard-code document details.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NameFormat:
    """Discriminators and fields of a name node."""

    null_attribute: str = "IsNull"
    null_value: str = "True"
    class_attribute: str = "Class"
    triple_class: str = "NameTriple"
    single_class: str = "NameSingle"
    first_field: str = "first"
    last_field: str = "last"
    nick_field: str = "nick"
    single_field: str = "name"
    placeholder: str = "???"


@dataclass(frozen=True, slots=True)
class FactionFormat:
    """Faction entry layout."""

    entries_path: str = "world/factionManager/allFactions/li"
    name_field: str = "name"
    id_field: str = "loadID"
    def_field: str = "def"
    leader_field: str = "leader"
    relations_path: str = "relations/li"
    relation_other_field: str = "other"
    relation_kind_field: str = "kind"
    relation_goodwill_field: str = "goodwill"
    player_def: str = "PlayerColony"
    key_prefix: str = "Faction_"
    placeholder_name: str = "Unnamed Faction"
    null_reference: str = "null"


@dataclass(frozen=True, slots=True)
class PawnFormat:
    """Pawn node layout and sentinel values."""

    human_def: str = "Human"
    id_field: str = "id"
    def_field: str = "def"
    name_field: str = "name"
    gender_field: str = "gender"
    female_value: str = "Female"
    faction_field: str = "faction"
    health_state_path: str = "healthTracker/healthState"
    dead_value: str = "Dead"
    seen_path: str = "social/everSeenByPlayer"
    unseen_value: str = "False"
    relations_path: str = "social/directRelations/li"
    relation_other_field: str = "otherPawn"
    relation_kind_field: str = "def"


@dataclass(frozen=True, slots=True)
class SaveFormat:
    """Top-level container for the document layout."""

    game_container: str = "game"
    thing_reference_prefix: str = "Thing_"
    names: NameFormat = NameFormat()
    factions: FactionFormat = FactionFormat()
    pawns: PawnFormat = PawnFormat()


DEFAULT_FORMAT = SaveFormat()
