"""Assemble the :class:`Game` aggregate from a parsed save document."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from xml.etree.ElementTree import Element

from .errors import MissingPlayerFactionError, MissingRootError
from .factions import parse_faction
from .models import Faction, FactionKey, Game, Pawn, PawnID
from .pawns import parse_pawn
from .save_format import DEFAULT_FORMAT, SaveFormat

logger = logging.getLogger(__name__)


def build_game(root: Element, *, fmt: SaveFormat = DEFAULT_FORMAT) -> Game:
    """Build the entity graph from the document root element.

    Factions are parsed first, then every human pawn node found anywhere
    below the game container, in document order. Any structural error aborts
    the whole build.
    """

    container = root.find(fmt.game_container)
    if container is None:
        raise MissingRootError(fmt.game_container)

    factions = collect_factions(container, fmt=fmt)
    player_faction = find_player_faction(factions, fmt=fmt)
    pawns = collect_pawns(container, factions, fmt=fmt)

    logger.info(
        "built game with %d factions and %d pawns (player faction %s)",
        len(factions),
        len(pawns),
        player_faction.str_id,
    )
    return Game(factions=factions, pawns=pawns, player_faction=player_faction)


def collect_factions(
    container: Element, *, fmt: SaveFormat = DEFAULT_FORMAT
) -> dict[FactionKey, Faction]:
    factions: dict[FactionKey, Faction] = {}
    for node in container.iterfind(fmt.factions.entries_path):
        faction = parse_faction(node, fmt=fmt)
        if faction.str_id in factions:
            logger.debug("faction %s replaced by a later entry", faction.str_id)
        factions[faction.str_id] = faction
    return factions


def find_player_faction(
    factions: dict[FactionKey, Faction], *, fmt: SaveFormat = DEFAULT_FORMAT
) -> Faction:
    """Return the first faction with the player colony category."""

    player_def = fmt.factions.player_def
    candidates = [f for f in factions.values() if f.def_name == player_def]
    if not candidates:
        raise MissingPlayerFactionError(player_def)
    if len(candidates) > 1:
        logger.warning(
            "%d factions have def %s; using %s",
            len(candidates),
            player_def,
            candidates[0].str_id,
        )
    return candidates[0]


def iter_pawn_nodes(container: Element, *, fmt: SaveFormat = DEFAULT_FORMAT) -> Iterator[Element]:
    """Yield every descendant whose ``def`` child marks a human, in document order."""

    spec = fmt.pawns
    for node in container.iter():
        if node is container:
            continue
        if any(
            "".join(child.itertext()) == spec.human_def
            for child in node.iterfind(spec.def_field)
        ):
            yield node


def collect_pawns(
    container: Element,
    factions: dict[FactionKey, Faction],
    *,
    fmt: SaveFormat = DEFAULT_FORMAT,
) -> dict[PawnID, Pawn]:
    pawns: dict[PawnID, Pawn] = {}
    for node in iter_pawn_nodes(container, fmt=fmt):
        pawn = parse_pawn(node, factions, fmt=fmt)
        if pawn.id in pawns:
            logger.debug("pawn %s replaced by a later node", pawn.id)
        pawns[pawn.id] = pawn
    return pawns
