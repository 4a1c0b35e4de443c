"""Pawn node parsing."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from xml.etree.ElementTree import Element

from .enums import Gender
from .fields import child_text, required_text
from .models import Faction, FactionKey, Name, Pawn, PawnID
from .names import parse_name
from .save_format import DEFAULT_FORMAT, PawnFormat, SaveFormat

logger = logging.getLogger(__name__)


def parse_pawn(
    node: Element,
    factions: Mapping[FactionKey, Faction],
    *,
    fmt: SaveFormat = DEFAULT_FORMAT,
) -> Pawn:
    """Build a :class:`Pawn` from a pawn-shaped node.

    ``factions`` must already hold every faction of the game; the pawn's
    faction reference is resolved against it eagerly. A reference that does
    not resolve leaves the pawn without a faction.
    """

    spec = fmt.pawns
    pawn_id = PawnID(required_text(node, spec.id_field))
    def_name = required_text(node, spec.def_field)

    name_node = node.find(spec.name_field)
    if name_node is None:
        name = Name.null(fmt.names.placeholder)
    else:
        name = parse_name(name_node, fmt=fmt)

    female = child_text(node, spec.gender_field) == spec.female_value
    gender = Gender.FEMALE if female else Gender.MALE

    return Pawn(
        id=pawn_id,
        name=name,
        def_name=def_name,
        gender=gender,
        alive=child_text(node, spec.health_state_path) != spec.dead_value,
        faction=_resolve_faction(node, factions, pawn_id, fmt),
        seen=child_text(node, spec.seen_path) != spec.unseen_value,
        relations=_relations(node, spec),
    )


def faction_key(reference: str, *, fmt: SaveFormat = DEFAULT_FORMAT) -> FactionKey:
    """Normalize a faction reference; bare load ids gain the key prefix."""

    if reference.isdigit():
        return FactionKey(f"{fmt.factions.key_prefix}{reference}")
    return FactionKey(reference)


def _resolve_faction(
    node: Element,
    factions: Mapping[FactionKey, Faction],
    pawn_id: PawnID,
    fmt: SaveFormat,
) -> Faction | None:
    reference = child_text(node, fmt.pawns.faction_field)
    if reference is None:
        return None
    faction = factions.get(faction_key(reference, fmt=fmt))
    if faction is None:
        logger.debug("pawn %s references unknown faction %r", pawn_id, reference)
    return faction


def _relations(node: Element, spec: PawnFormat) -> dict[PawnID, str]:
    relations: dict[PawnID, str] = {}
    for entry in node.iterfind(spec.relations_path):
        other = required_text(entry, spec.relation_other_field)
        kind = required_text(entry, spec.relation_kind_field)
        # Animals and other non-human targets are dropped.
        if spec.human_def in other:
            relations[PawnID(other)] = kind
    return relations
