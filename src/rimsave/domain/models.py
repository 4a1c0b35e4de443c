"""Dataclasses describing the entities found in a save file.

The graph is built once by :func:`rimsave.domain.game.build_game` and is
read-only afterwards. Entities never point back at the :class:`Game` that
owns them; queries that need the whole graph live on the aggregate.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NewType

from .enums import Gender, NameKind, RelationKind
from .errors import RelationNotFoundError

# --- Strongly typed identifiers -------------------------------------------------

FactionKey = NewType("FactionKey", str)
PawnID = NewType("PawnID", str)

NULL_NAME_PLACEHOLDER = "???"
THING_REFERENCE_PREFIX = "Thing_"


def _frozen(mapping: Mapping | None = None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


# --- Value types ----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Name:
    """A pawn name in one of the three shapes the save format knows."""

    kind: NameKind
    first: str = ""
    last: str = ""
    nick: str = ""

    @classmethod
    def null(cls, placeholder: str = NULL_NAME_PLACEHOLDER) -> Name:
        return cls(NameKind.NULL, placeholder, placeholder, placeholder)

    @classmethod
    def single(cls, nick: str) -> Name:
        return cls(NameKind.SINGLE, nick=nick)

    @classmethod
    def triple(cls, first: str, last: str, nick: str) -> Name:
        return cls(NameKind.TRIPLE, first=first, last=last, nick=nick)

    @property
    def full_name(self) -> str:
        """Display form; the nickname is quoted, or folded into first/last."""

        if self.kind is NameKind.NULL:
            return self.nick or NULL_NAME_PLACEHOLDER
        if self.kind is NameKind.SINGLE:
            return f"'{self.nick}'"
        if self.nick == self.first:
            return f"'{self.first}' {self.last}"
        if self.nick == self.last:
            return f"{self.first} '{self.last}'"
        return f"{self.first} '{self.nick}' {self.last}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True, slots=True)
class FactionRelation:
    """Standing of one faction towards another."""

    kind: RelationKind
    goodwill: int = 0


# --- Entities -------------------------------------------------------------------

# Entities compare and hash by identity.


@dataclass(frozen=True, slots=True, eq=False)
class Faction:
    """Political group; exactly one per game belongs to the player."""

    id: int
    name: str
    def_name: str
    leader_id: PawnID | None = None
    relations: Mapping[FactionKey, FactionRelation] = field(default_factory=_frozen)
    key_prefix: str = field(default="Faction_", repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "relations", _frozen(self.relations))

    @property
    def str_id(self) -> FactionKey:
        """Canonical key of the faction inside :attr:`Game.factions`."""

        return FactionKey(f"{self.key_prefix}{self.id}")

    def relation_with(self, other: Faction | str) -> FactionRelation:
        """Return the stored relation towards ``other``.

        Unlike parsing, this lookup is strict and raises
        :class:`RelationNotFoundError` when no entry exists.
        """

        key = other.str_id if isinstance(other, Faction) else other
        try:
            return self.relations[FactionKey(key)]
        except KeyError as exc:
            raise RelationNotFoundError(self.str_id, key) from exc


@dataclass(frozen=True, slots=True, eq=False)
class Pawn:
    """Individual human character."""

    id: PawnID
    name: Name
    def_name: str
    gender: Gender = Gender.MALE
    alive: bool = True
    faction: Faction | None = None
    seen: bool = True
    relations: Mapping[PawnID, str] = field(default_factory=_frozen)

    def __post_init__(self) -> None:
        object.__setattr__(self, "relations", _frozen(self.relations))


# --- Aggregate ------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False)
class Game:
    """Root aggregate built from a single save document."""

    factions: Mapping[FactionKey, Faction]
    pawns: Mapping[PawnID, Pawn]
    player_faction: Faction

    def __post_init__(self) -> None:
        object.__setattr__(self, "factions", _frozen(self.factions))
        object.__setattr__(self, "pawns", _frozen(self.pawns))

    def get_faction(self, key: str | int) -> Faction | None:
        """Lenient faction lookup by key (``Faction_3``) or bare load id (``3``)."""

        text = str(key)
        if text.isdigit():
            text = f"{self.player_faction.key_prefix}{text}"
        return self.factions.get(FactionKey(text))

    def get_pawn(self, pawn_id: str) -> Pawn | None:
        return self.pawns.get(PawnID(pawn_id))

    def pawns_of(self, faction: Faction) -> list[Pawn]:
        """Pawns whose faction is ``faction`` (by identity), recomputed per call."""

        return [pawn for pawn in self.pawns.values() if pawn.faction is faction]

    def colonists(self) -> list[Pawn]:
        return self.pawns_of(self.player_faction)

    def leader_of(self, faction: Faction) -> Pawn | None:
        if faction.leader_id is None:
            return None
        return self.pawns.get(faction.leader_id)

    def relatives_of(self, pawn: Pawn) -> list[tuple[Pawn, str]]:
        """Resolve ``pawn.relations`` against the game, skipping missing targets."""

        resolved: list[tuple[Pawn, str]] = []
        for other_id, kind in pawn.relations.items():
            other = self.pawns.get(other_id)
            if other is None and other_id.startswith(THING_REFERENCE_PREFIX):
                other = self.pawns.get(PawnID(other_id[len(THING_REFERENCE_PREFIX) :]))
            if other is not None:
                resolved.append((other, kind))
        return resolved
