"""Faction node parsing."""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

from .enums import RelationKind
from .errors import InvalidFieldError
from .fields import child_text, describe, optional_int, required_text
from .models import Faction, FactionKey, FactionRelation, PawnID
from .save_format import DEFAULT_FORMAT, FactionFormat, SaveFormat

logger = logging.getLogger(__name__)

_KNOWN_KINDS = {kind.value: kind for kind in RelationKind}


def parse_faction(node: Element, *, fmt: SaveFormat = DEFAULT_FORMAT) -> Faction:
    """Build a :class:`Faction` from one faction entry.

    ``def`` is required. A missing name or load id falls back to the
    placeholder name and ``0``.
    """

    spec = fmt.factions
    faction_id = optional_int(node, spec.id_field, default=0)
    if faction_id < 0:
        raise InvalidFieldError(spec.id_field, str(faction_id), describe(node))

    return Faction(
        id=faction_id,
        name=child_text(node, spec.name_field) or spec.placeholder_name,
        def_name=required_text(node, spec.def_field),
        leader_id=_leader_id(node, fmt),
        relations=_relations(node, spec),
        key_prefix=spec.key_prefix,
    )


def _leader_id(node: Element, fmt: SaveFormat) -> PawnID | None:
    reference = child_text(node, fmt.factions.leader_field)
    if reference is None or reference == fmt.factions.null_reference:
        return None
    return PawnID(reference[len(fmt.thing_reference_prefix) :])


def _relations(node: Element, spec: FactionFormat) -> dict[FactionKey, FactionRelation]:
    relations: dict[FactionKey, FactionRelation] = {}
    for entry in node.iterfind(spec.relations_path):
        other = FactionKey(required_text(entry, spec.relation_other_field))
        raw_kind = child_text(entry, spec.relation_kind_field)
        kind = _KNOWN_KINDS.get(raw_kind or "", RelationKind.NEUTRAL)
        if raw_kind is not None and raw_kind not in _KNOWN_KINDS:
            logger.debug("unknown relation kind %r towards %s, using Neutral", raw_kind, other)
        relations[other] = FactionRelation(
            kind=kind,
            goodwill=optional_int(entry, spec.relation_goodwill_field, default=0),
        )
    return relations
